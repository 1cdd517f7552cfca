"""Scene records of a ray-tracing description file."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Union

_BYTE_MAX = 0xFF
_WORD_MAX = 0xFFFFFFFF
_FOV_MAX = 180


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB colour with a padding alpha channel."""

    red: int
    green: int
    blue: int
    alpha: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= _BYTE_MAX:
                raise ValueError(f"{name} must be an integer in [0, 255], got {value!r}")

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Build a colour from its packed 32-bit form (red in the low byte)."""
        if not isinstance(value, int) or not 0 <= value <= _WORD_MAX:
            raise ValueError(f"packed colour must be in [0, 0xFFFFFFFF], got {value!r}")
        return cls(
            value & _BYTE_MAX,
            (value >> 8) & _BYTE_MAX,
            (value >> 16) & _BYTE_MAX,
            (value >> 24) & _BYTE_MAX,
        )

    def hex(self) -> int:
        """Return the packed 32-bit form of the colour."""
        return self.red | self.green << 8 | self.blue << 16 | self.alpha << 24


@dataclass(frozen=True)
class Vec3:
    """A point or vector in three dimensions."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


Point3 = Vec3
Vector3 = Vec3


def _check_ratio(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0.0, 1.0], got {value!r}")


def _check_direction(name: str, vector: Vec3) -> None:
    if any(not -1.0 <= component <= 1.0 for component in vector):
        raise ValueError(f"{name} components must be in [-1.0, 1.0], got {vector!r}")


class ElementKind(enum.Enum):
    """Identifiers of the records a scene file may hold."""

    AMBIENT = "A"
    CAMERA = "C"
    LIGHT = "L"
    SPHERE = "sp"
    PLANE = "pl"
    CYLINDER = "cy"


@dataclass(frozen=True)
class AmbientLighting:
    brightness: float
    color: Color

    def __post_init__(self) -> None:
        _check_ratio("brightness", self.brightness)


@dataclass(frozen=True)
class Camera:
    viewpoint: Vec3
    orientation: Vec3
    fov: int

    def __post_init__(self) -> None:
        _check_direction("orientation", self.orientation)
        if not isinstance(self.fov, int) or not 0 <= self.fov <= _FOV_MAX:
            raise ValueError(f"fov must be an integer in [0, 180], got {self.fov!r}")


@dataclass(frozen=True)
class Light:
    position: Vec3
    brightness: float
    color: Color

    def __post_init__(self) -> None:
        _check_ratio("brightness", self.brightness)


@dataclass(frozen=True)
class Sphere:
    center: Vec3
    diameter: float
    color: Color


@dataclass(frozen=True)
class Plane:
    point: Vec3
    normal: Vec3
    color: Color

    def __post_init__(self) -> None:
        _check_direction("normal", self.normal)


@dataclass(frozen=True)
class Cylinder:
    center: Vec3
    axis: Vec3
    diameter: float
    height: float
    color: Color

    def __post_init__(self) -> None:
        _check_direction("axis", self.axis)


ElementValue = Union[AmbientLighting, Camera, Light, Sphere, Plane, Cylinder]

_VALUE_TYPES: dict[ElementKind, type] = {
    ElementKind.AMBIENT: AmbientLighting,
    ElementKind.CAMERA: Camera,
    ElementKind.LIGHT: Light,
    ElementKind.SPHERE: Sphere,
    ElementKind.PLANE: Plane,
    ElementKind.CYLINDER: Cylinder,
}


@dataclass(frozen=True)
class Element:
    """One record of a scene file: its identifier and its data."""

    id: str
    value: ElementValue

    def __post_init__(self) -> None:
        try:
            kind = ElementKind(self.id)
        except ValueError:
            raise ValueError(f"unknown element identifier {self.id!r}") from None
        expected = _VALUE_TYPES[kind]
        if not isinstance(self.value, expected):
            raise ValueError(
                f"element {self.id!r} needs a {expected.__name__}, "
                f"got {type(self.value).__name__}"
            )

    def kind(self) -> ElementKind:
        """Return the kind of record this element holds."""
        return ElementKind(self.id)