"""Domain models for geographic points and cleanup stops."""

from dataclasses import dataclass, field
from typing import Any, Hashable


@dataclass(frozen=True, slots=True)
class Point:
    """A latitude/longitude pair in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class Stop:
    """A location to visit. ``metadata`` is carried through untouched."""

    id: Hashable
    location: Point
    metadata: dict[str, Any] = field(default_factory=dict, hash=False)
