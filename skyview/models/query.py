"""Place queries: a city name or a coordinate pair, never both."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float

    @property
    def in_range(self) -> bool:
        return -90.0 <= self.lat <= 90.0 and -180.0 <= self.lon <= 180.0


@dataclass(frozen=True)
class PlaceQuery:
    name: str | None = None
    coords: Coordinates | None = None

    def __post_init__(self) -> None:
        if (self.name is None) == (self.coords is None):
            raise ValueError("PlaceQuery needs exactly one of name or coords")

    @classmethod
    def by_name(cls, name: str) -> "PlaceQuery":
        return cls(name=name)

    @classmethod
    def by_coords(cls, lat: float, lon: float) -> "PlaceQuery":
        return cls(coords=Coordinates(lat=lat, lon=lon))

    @property
    def is_name(self) -> bool:
        return self.name is not None

    def params(self) -> dict[str, str | float]:
        """Provider query parameters identifying this place."""
        if self.coords is not None:
            return {"lat": self.coords.lat, "lon": self.coords.lon}
        assert self.name is not None
        return {"q": self.name}

    def describe(self) -> str:
        if self.coords is not None:
            return f"{self.coords.lat:.4f},{self.coords.lon:.4f}"
        assert self.name is not None
        return self.name
