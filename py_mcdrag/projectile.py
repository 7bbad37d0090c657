"""Projectile geometry accepted by the drag model.

All lengths except the reference diameter are expressed in calibers
(multiples of the reference diameter).

Examples:
    ```python
    from py_mcdrag import ProjectileGeometry, BoundaryLayer

    geometry = ProjectileGeometry(
        ref_diameter=7.62,
        total_length=4.0,
        nose_length=1.5,
        rt_r=1.0,
        boattail_length=0.5,
        base_diameter=0.9,
        meplat_diameter=0.0,
        band_diameter=1.02,
        cg_location=2.0,
        boundary_layer=BoundaryLayer.LAMINAR_TURBULENT,
        identification="7.62mm ball",
    )
    ```
"""
import math
from dataclasses import dataclass, fields

from typing_extensions import Any, Dict, Mapping, Tuple, Union

from py_mcdrag.boundary_layer import BoundaryLayer
from py_mcdrag.constants import MACH_SWEEP, cMaxMeplatDiameter, cMinReynoldsNumber, cReynoldsPerMachMm
from py_mcdrag.exceptions import InvalidGeometry, ParseError
from py_mcdrag.settings import Settings

__all__ = ('ProjectileGeometry', 'NUMERIC_FIELDS', 'REQUIRED_FIELDS')

# Fields without a configurable default
REQUIRED_FIELDS: Tuple[str, ...] = ('ref_diameter', 'total_length', 'nose_length')


@dataclass(frozen=True)
class ProjectileGeometry:
    """Immutable axisymmetric projectile description.

    Attributes:
        ref_diameter: Reference diameter, mm
        total_length: Overall length, calibers
        nose_length: Nose length, calibers
        rt_r: Head shape parameter RT/R (ratio of tangent to actual ogive radius)
        boattail_length: Boattail length, calibers (0 for a flat base)
        base_diameter: Base diameter, calibers
        meplat_diameter: Meplat (flat nose tip) diameter, calibers
        band_diameter: Rotating band diameter, calibers
        cg_location: Center of gravity from nose, calibers (0 if unknown)
        boundary_layer: Boundary layer assumption
        identification: Free-form label

    Raises:
        InvalidGeometry: If a numeric field is not finite, ref_diameter <= 0,
            nose_length <= 0, total_length <= nose_length, meplat_diameter > 1
            or the Reynolds number at the slowest swept Mach is not above 1
        InvalidBoundaryLayerCode: If boundary_layer is an unrecognized code string
    """

    ref_diameter: float
    total_length: float
    nose_length: float
    rt_r: float = 0.0
    boattail_length: float = 0.0
    base_diameter: float = 1.0
    meplat_diameter: float = 0.0
    band_diameter: float = 1.0
    cg_location: float = 0.0
    boundary_layer: BoundaryLayer = BoundaryLayer.LAMINAR_TURBULENT
    identification: str = ''

    def __post_init__(self) -> None:
        for name in NUMERIC_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidGeometry(name, value, "expected a number")
            if not math.isfinite(value):
                raise InvalidGeometry(name, value, "expected a finite number")
            object.__setattr__(self, name, float(value))
        object.__setattr__(self, 'boundary_layer', BoundaryLayer.parse(self.boundary_layer))
        object.__setattr__(self, 'identification', str(self.identification))

        if self.ref_diameter <= 0:
            raise InvalidGeometry('ref_diameter', self.ref_diameter, "must be positive")
        if self.nose_length <= 0:
            raise InvalidGeometry('nose_length', self.nose_length, "must be positive")
        if self.total_length <= self.nose_length:
            raise InvalidGeometry('total_length', self.total_length,
                                  f"must exceed nose_length={self.nose_length}")
        if self.meplat_diameter > cMaxMeplatDiameter:
            raise InvalidGeometry('meplat_diameter', self.meplat_diameter,
                                  f"must not exceed {cMaxMeplatDiameter} caliber")
        # the Reynolds number is lowest at the first swept Mach
        reynolds = cReynoldsPerMachMm * MACH_SWEEP[0] * self.total_length * self.ref_diameter
        if reynolds <= cMinReynoldsNumber:
            raise InvalidGeometry('ref_diameter', self.ref_diameter,
                                  f"Reynolds number {reynolds:.3g} at Mach {MACH_SWEEP[0]} is too small")

    @property
    def afterbody_length(self) -> float:
        """Length of cylinder plus boattail, calibers."""
        return self.total_length - self.nose_length

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping of the geometry with the boundary layer as its canonical code."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['boundary_layer'] = self.boundary_layer.code
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], section: str = 'input') -> 'ProjectileGeometry':
        """Build geometry from a mapping, filling omitted optional fields from Settings.

        Args:
            data: Mapping with ProjectileGeometry field names as keys
            section: Name of the record used in error messages

        Returns:
            ProjectileGeometry instance

        Raises:
            ParseError: If a required field is missing, a key is unknown
                or a numeric field can not be read as a number
            InvalidBoundaryLayerCode: If boundary_layer is not recognized
            InvalidGeometry: If the geometry violates a model precondition
        """
        if not isinstance(data, Mapping):
            raise ParseError(f"'{section}' must be a table of projectile fields, not {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        if unknown := sorted(set(data.keys()) - known):
            raise ParseError(f"Unknown properties {unknown} in '{section}'")
        if missing := [key for key in REQUIRED_FIELDS if key not in data]:
            raise ParseError(f"Required properties {missing} are not presented in '{section}'")

        kwargs: Dict[str, Any] = Settings.defaults()
        for key, value in data.items():
            if key in NUMERIC_FIELDS:
                kwargs[key] = _parse_number(value, f"{section}.{key}")
            elif key == 'identification':
                kwargs[key] = '' if value is None else str(value)
            else:
                kwargs[key] = value
        return cls(**kwargs)


NUMERIC_FIELDS: Tuple[str, ...] = tuple(
    f.name for f in fields(ProjectileGeometry) if f.name not in ('boundary_layer', 'identification')
)


def _parse_number(value: Union[str, float, int], where: str) -> float:
    if isinstance(value, bool):
        raise ParseError(f"Expected a number for {where}, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Could not convert {where}={value!r} to float") from exc
