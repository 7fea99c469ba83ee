"""Errors raised by geocoders and the distance use case."""

from __future__ import annotations


class GeocodingError(Exception):
    """Base class for a failed address lookup."""

    kind = "geocoding_error"


class AddressNotFoundError(GeocodingError):
    """Provider answered, but had no match for the address."""

    kind = "not_found"


class GeocoderTransportError(GeocodingError):
    """Network, DNS, TLS, timeout or non-2xx status on the outbound call."""

    kind = "transport_error"


class GeocoderParseError(GeocodingError):
    """Provider body was not the expected JSON, or a coordinate was unusable."""

    kind = "parse_error"


class AddressResolutionError(Exception):
    """A geocoding failure attributed to one of the request parameters."""

    def __init__(self, field: str, address: str, cause: GeocodingError):
        self.field = field
        self.address = address
        self.cause = cause
        super().__init__(f"{field} lookup failed ({cause.kind}): {cause}")
