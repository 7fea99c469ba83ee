"""Static front-end files served from the working directory."""

from __future__ import annotations

import os
from pathlib import PurePosixPath

from fastapi.staticfiles import StaticFiles


class PublicStaticFiles(StaticFiles):
    """StaticFiles that never serves hidden entries such as `.env` or `.git/`."""

    def lookup_path(self, path: str) -> tuple[str, os.stat_result | None]:
        if any(part.startswith(".") for part in PurePosixPath(path).parts):
            return "", None
        return super().lookup_path(path)
