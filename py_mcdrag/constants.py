"""Constants of the MCDRAG model.

Constant Categories:
    - Mach sweep: The fixed Mach numbers every drag table is computed at
    - Skin friction: Reynolds number scaling and the log10 approximation of the fits
    - Validation limits: Bounds geometry must satisfy before it reaches the model

References:
    - R. L. McCoy, "MC DRAG - A Computer Program for Estimating the Drag
      Coefficients of Projectiles", BRL-MR-2745, 1981
"""

# Third-party imports
from typing_extensions import Final, Tuple

# =============================================================================
# Mach Sweep
# =============================================================================

MACH_SWEEP: Final[Tuple[float, ...]] = (
    0.5, 0.6, 0.7, 0.8, 0.85, 0.9, 0.925, 0.95, 0.975, 1.0,
    1.1, 1.2, 1.3, 1.4, 1.5, 1.6, 1.7, 1.8, 2.0, 2.2,
    2.5, 3.0, 3.5, 4.0, 4.5, 5.0,
)
"""Mach numbers of the drag table, ascending"""

# =============================================================================
# Skin Friction Constants
# =============================================================================

cReynoldsPerMachMm: Final[float] = 23296.3
"""Reynolds number per (Mach * caliber * mm) at standard sea level conditions"""

cLog10E: Final[float] = 0.4343
"""ln(x) * cLog10E approximates log10(x) the way the reference tables were computed"""

# =============================================================================
# Validation Limits
# =============================================================================

cMinReynoldsNumber: Final[float] = 1.0
"""Reynolds number at the slowest swept Mach must exceed this for the turbulent fit"""

cMaxMeplatDiameter: Final[float] = 1.0
"""Largest meplat diameter (calibers); a wider one makes the nose fineness negative"""
