"""McCoy MCDRAG zero-yaw drag coefficient model.

This module estimates the zero-yaw drag coefficient of an axisymmetric
projectile from its geometry alone, by summing five empirical components
over a fixed sweep of Mach numbers:

    CD0 = CDH + CDSF + CDBND + CDBT + CDB

Key Components:
    - MachSweepPoint: Drag breakdown at a single Mach number
    - MACH_SWEEP: The fixed Mach numbers evaluated by the model
    - evaluate: Compute the drag table for a ProjectileGeometry

Component functions:
    - skin_friction_drag: CDSF, flat plate skin friction over the wetted area
    - meplat_drag: Wave drag of the flat nose tip (part of CDH)
    - base_pressure_ratio: PB/PINF
    - base_drag: CDB
    - band_drag: CDBND, rotating band
    - head_drag: CDH, nose wave drag plus meplat drag
    - boattail_drag: CDBT

All constants are curve fits to the dataset of R. L. McCoy, "MC DRAG - A
Computer Program for Estimating the Drag Coefficients of Projectiles"
(BRL-MR-2745, 1981) and must not be rounded or rearranged.

Examples:
    ```python
    from py_mcdrag import ProjectileGeometry
    from py_mcdrag.drag_model import evaluate

    table = evaluate(ProjectileGeometry(7.62, 4.0, 1.5, rt_r=1.0, boattail_length=0.5,
                                        base_diameter=0.9, band_diameter=1.02))
    for point in table:
        print(point.mach, point.cd0)
    ```
"""

# Standard library imports
import math

# Third-party imports
from typing_extensions import Callable, Final, List, NamedTuple, Tuple

# Local imports
from py_mcdrag.constants import MACH_SWEEP, cLog10E, cReynoldsPerMachMm
from py_mcdrag.logger import logger
from py_mcdrag.projectile import ProjectileGeometry

__all__ = (
    'MACH_SWEEP',
    'MachSweepPoint',
    'evaluate',
    'evaluate_point',
    'skin_friction_drag',
    'meplat_drag',
    'base_pressure_ratio',
    'base_drag',
    'band_drag',
    'head_drag',
    'boattail_drag',
)


class MachSweepPoint(NamedTuple):
    """Drag coefficient breakdown at one Mach number.

    Attributes:
        mach: Mach number
        cd0: Total drag coefficient
        cdh: Head (nose wave + meplat) drag coefficient
        cdsf: Skin friction drag coefficient
        cdbnd: Rotating band drag coefficient
        cdbt: Boattail drag coefficient
        cdb: Base drag coefficient
        pb_pinf: Base pressure to free stream pressure ratio
    """

    mach: float
    cd0: float
    cdh: float
    cdsf: float
    cdbnd: float
    cdbt: float
    cdb: float
    pb_pinf: float

    def formatted(self) -> Tuple[str, ...]:
        """Return attributes as tuple of strings in the report column formats."""
        return (f'{self.mach:6.3f}',) + tuple(f'{value:7.3f}' for value in self[1:])


def _shape_parameter(geometry: ProjectileGeometry) -> float:
    """Nose fineness term T1."""
    return (1.0 - geometry.meplat_diameter) / geometry.nose_length


def _reynolds_number(geometry: ProjectileGeometry, mach: float) -> float:
    return cReynoldsPerMachMm * mach * geometry.total_length * geometry.ref_diameter


def skin_friction_drag(geometry: ProjectileGeometry, mach: float) -> float:
    """Skin friction drag CDSF.

    Laminar (Blasius) and turbulent (Schlichting) flat plate coefficients with
    compressibility corrections are weighted by the nose and afterbody wetted
    areas according to the boundary layer code.
    """
    m2 = mach * mach
    nose = geometry.nose_length
    reynolds = _reynolds_number(geometry, mach)
    log_reynolds = math.log(reynolds) * cLog10E

    laminar = (1.328 / math.sqrt(reynolds)) * math.pow(1.0 + 0.12 * m2, -0.12)
    turbulent = (0.455 / math.pow(log_reynolds, 2.58)) * math.pow(1.0 + 0.21 * m2, -0.32)

    d5 = 1.0 + (0.333 + 0.02 / (nose * nose)) * geometry.rt_r
    s_nose = 1.5708 * nose * d5 * (1.0 + 1.0 / (8.0 * nose * nose))
    s_afterbody = 3.1416 * (geometry.total_length - nose)
    s_total = s_nose + s_afterbody

    c_nose = 1.2732 * s_total * (laminar if geometry.boundary_layer.laminar_nose else turbulent)
    c_afterbody = 1.2732 * s_total * (laminar if geometry.boundary_layer.laminar_afterbody else turbulent)
    return (c_nose * s_nose + c_afterbody * s_afterbody) / s_total


def _transonic_parameter(mach: float) -> float:
    """C15 = (M^2 - 1) / (2.4 M^2)."""
    m2 = mach * mach
    return (m2 - 1.0) / (2.4 * m2)


def meplat_drag(geometry: ProjectileGeometry, mach: float) -> float:
    """Wave drag of the meplat (C18), from the stagnation pressure on the flat tip."""
    m2 = mach * mach
    if mach <= 1.0:
        p5 = math.pow(1.0 + 0.2 * m2, 3.5)
    else:
        p5 = math.pow(1.2 * m2, 3.5) * math.pow(6.0 / (7.0 * m2 - 1.0), 2.5)
    c16 = (1.122 * (p5 - 1.0) * geometry.meplat_diameter * geometry.meplat_diameter) / m2

    if mach <= 0.91:
        return 0.0
    if mach >= 1.41:
        return 0.85 * c16
    return (0.254 + 2.88 * _transonic_parameter(mach)) * c16


def base_pressure_ratio(geometry: ProjectileGeometry, mach: float) -> float:
    """PB/PINF, clamped to be non-negative."""
    m2 = mach * mach
    if mach < 1.0:
        p2 = 1.0 / (1.0 + 0.1875 * m2 + 0.0531 * m2 * m2)
    else:
        p2 = 1.0 / (1.0 + 0.2477 * m2 + 0.0345 * m2 * m2)
    p4 = ((1.0 + 0.09 * m2 * (1.0 - math.exp(-geometry.total_length + geometry.nose_length)))
          * (1.0 + 0.25 * m2 * (1.0 - geometry.base_diameter)))
    return max(p2 * p4, 0.0)


def base_drag(geometry: ProjectileGeometry, mach: float, pb_pinf: float) -> float:
    m2 = mach * mach
    return (1.4286 * (1.0 - pb_pinf) * geometry.base_diameter * geometry.base_diameter) / m2


def band_drag(geometry: ProjectileGeometry, mach: float) -> float:
    m2 = mach * mach
    if mach < 0.95:
        return math.pow(mach, 12.5) * (geometry.band_diameter - 1.0)
    return (0.21 + 0.28 / m2) * (geometry.band_diameter - 1.0)


def _nose_wave_drag_subsonic(geometry: ProjectileGeometry, mach: float) -> float:
    t1 = _shape_parameter(geometry)
    critical_mach = math.pow(1.0 + 0.552 * math.pow(t1, 0.8), -0.5)
    if mach <= critical_mach:
        return 0.0
    return 0.368 * math.pow(t1, 1.8) + 1.6 * t1 * _transonic_parameter(mach)


def _nose_wave_drag_supersonic(geometry: ProjectileGeometry, mach: float) -> float:
    t1 = _shape_parameter(geometry)
    rt_r = geometry.rt_r
    b = math.sqrt(mach * mach - 1.0)

    s4 = 1.0 + 0.368 * math.pow(t1, 1.85)
    z = b if mach >= s4 else math.sqrt(s4 * s4 - 1.0)

    c11 = 0.7156 - 0.5313 * rt_r + 0.595 * rt_r * rt_r
    c12 = 0.0796 + 0.0779 * rt_r
    c13 = 1.587 + 0.049 * rt_r
    c14 = 0.1122 + 0.1658 * rt_r

    r4 = 1.0 / (z * z)
    return (c11 - c12 * t1 * t1) * r4 * math.pow(t1 * z, c13 + c14 * t1)


def head_drag(geometry: ProjectileGeometry, mach: float) -> float:
    """Head drag CDH: nose wave drag (C17) plus meplat drag (C18)."""
    if mach <= 1.0:
        c17 = _nose_wave_drag_subsonic(geometry, mach)
    else:
        c17 = _nose_wave_drag_supersonic(geometry, mach)
    return c17 + meplat_drag(geometry, mach)


def _boattail_slope(geometry: ProjectileGeometry) -> float:
    """T2, the boattail half-angle tangent in calibers."""
    return (1.0 - geometry.base_diameter) / (2.0 * geometry.boattail_length)


def _boattail_transonic_factor(geometry: ProjectileGeometry) -> float:
    """2 * T3 * B4, shared by the subsonic and low supersonic boattail fits."""
    t2 = _boattail_slope(geometry)
    t3 = 2.0 * t2 * t2 + t2 * t2 * t2
    e1 = math.exp(-2.0 * geometry.boattail_length)
    b4 = 1.0 - e1 + 2.0 * t2 * (e1 * (geometry.boattail_length + 0.5) - 0.5)
    return 2.0 * t3 * b4


def _no_boattail_drag(geometry: ProjectileGeometry, mach: float) -> float:
    return 0.0


def _boattail_drag_transonic(geometry: ProjectileGeometry, mach: float) -> float:
    c15 = _transonic_parameter(mach)
    return _boattail_transonic_factor(geometry) * (1.0 / (0.564 + 1250.0 * c15 * c15))


def _boattail_drag_low_supersonic(geometry: ProjectileGeometry, mach: float) -> float:
    return _boattail_transonic_factor(geometry) * (1.774 - 9.3 * _transonic_parameter(mach))


def _boattail_drag_supersonic(geometry: ProjectileGeometry, mach: float) -> float:
    m2 = mach * mach
    t1 = _shape_parameter(geometry)
    t2 = _boattail_slope(geometry)
    rt_r = geometry.rt_r
    boattail = geometry.boattail_length
    b2 = m2 - 1.0
    b = math.sqrt(b2)

    b3 = 0.85 / b
    a12 = (5.0 * t1) / (6.0 * b) + math.pow(0.5 * t1, 2.0) - (0.7435 / m2) * math.pow(t1 * mach, 1.6)
    a11 = (1.0 - (0.6 * rt_r) / mach) * a12
    e2 = math.exp((-1.1952 / mach) * (geometry.total_length - geometry.nose_length - boattail))
    x3 = ((2.4 * m2 * m2 - 4.0 * b2) * t2 * t2) / (2.0 * b2 * b2)
    a1 = a11 * e2 - x3 + (2.0 * t2) / b
    r5 = 1.0 / b3
    e3 = math.exp(-b3 * boattail)
    a2 = 1.0 - e3 + 2.0 * t2 * (e3 * (boattail + r5) - r5)
    return 4.0 * a1 * t2 * a2 * r5


BoattailDragFn = Callable[[ProjectileGeometry, float], float]

# (upper Mach bound inclusive, fit); the first bound that is >= Mach applies
_BOATTAIL_REGIMES: Final[Tuple[Tuple[float, BoattailDragFn], ...]] = (
    (0.85, _no_boattail_drag),
    (1.0, _boattail_drag_transonic),
    (1.1, _boattail_drag_low_supersonic),
    (math.inf, _boattail_drag_supersonic),
)


def boattail_drag(geometry: ProjectileGeometry, mach: float) -> float:
    """Boattail drag CDBT, zero for a flat base (boattail_length <= 0)."""
    if geometry.boattail_length <= 0.0:
        return 0.0
    for upper_mach, fit in _BOATTAIL_REGIMES:
        if mach <= upper_mach:
            return fit(geometry, mach)
    raise ValueError(f"Mach {mach} outside of boattail drag regimes")


def evaluate_point(geometry: ProjectileGeometry, mach: float) -> MachSweepPoint:
    """Compute the drag breakdown of a projectile at a single Mach number.

    Args:
        geometry: Projectile geometry
        mach: Mach number (> 0)

    Returns:
        MachSweepPoint for this Mach number

    Raises:
        ValueError: If mach is not positive
    """
    if mach <= 0:
        raise ValueError(f"Mach number must be positive, got {mach}")
    cdsf = skin_friction_drag(geometry, mach)
    pb_pinf = base_pressure_ratio(geometry, mach)
    cdb = base_drag(geometry, mach, pb_pinf)
    cdbnd = band_drag(geometry, mach)
    cdh = head_drag(geometry, mach)
    cdbt = boattail_drag(geometry, mach)
    cd0 = cdh + cdsf + cdbnd + cdbt + cdb
    return MachSweepPoint(mach, cd0, cdh, cdsf, cdbnd, cdbt, cdb, pb_pinf)


def evaluate(geometry: ProjectileGeometry) -> List[MachSweepPoint]:
    """Compute the drag table of a projectile over MACH_SWEEP.

    Args:
        geometry: Projectile geometry

    Returns:
        One MachSweepPoint per MACH_SWEEP entry, in ascending Mach order
    """
    logger.debug(f"MCDRAG evaluation of {geometry.identification!r} "
                 f"({geometry.boundary_layer.code}, {len(MACH_SWEEP)} Mach points)")
    return [evaluate_point(geometry, mach) for mach in MACH_SWEEP]

