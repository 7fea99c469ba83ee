from dataclasses import dataclass


@dataclass(frozen=True)
class DistanceResult:
    """Answer to one distance query; addresses are echoed exactly as received."""

    address1: str
    address2: str
    distance_km: float

    def to_dict(self) -> dict:
        return {
            "address1": self.address1,
            "address2": self.address2,
            "distance_km": self.distance_km,
        }
