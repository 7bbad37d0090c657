"""Advisory diagnostics for geometry outside the validated envelope of the model.

The rules never block a computation; they only flag components whose
estimate is known to lose accuracy for the given geometry.
"""
from enum import Enum

from typing_extensions import List

from py_mcdrag.logger import logger
from py_mcdrag.projectile import ProjectileGeometry

__all__ = ('Diagnostic', 'evaluate')


class Diagnostic(Enum):
    """Advisory message, valued by its report text."""

    NOSE_TOO_SHORT = "NOSE TOO SHORT. CDH IS TOO HIGH AT TRANSONIC AND SUPERSONIC SPEEDS."
    NOSE_TOO_BLUNT = "NOSE TOO BLUNT. CDH IS TOO HIGH AT TRANSONIC AND SUPERSONIC SPEEDS."
    BOATTAIL_TOO_LONG = "BOATTAIL TOO LONG. CDBT AND CDB MAY BE INCORRECT."
    BOATTAIL_TOO_STEEP = "BOATTAIL TOO STEEP. CDBT AND CDB MAY BE INCORRECT."
    FLARE_TOO_STEEP = "CONICAL FLARE TAIL TOO STEEP. CDBT AND CDB MAY BE INCORRECT."

    def __str__(self) -> str:
        return self.value

    @property
    def message(self) -> str:
        return self.value


def evaluate(geometry: ProjectileGeometry) -> List[Diagnostic]:
    """Check geometry against the model envelope.

    Args:
        geometry: Projectile geometry

    Returns:
        Raised diagnostics in fixed rule order
    """
    diagnostics: List[Diagnostic] = []
    if geometry.nose_length < 1.0:
        diagnostics.append(Diagnostic.NOSE_TOO_SHORT)
    if geometry.meplat_diameter > 0.5:
        diagnostics.append(Diagnostic.NOSE_TOO_BLUNT)
    if geometry.boattail_length >= 1.5:
        diagnostics.append(Diagnostic.BOATTAIL_TOO_LONG)
    # a steep boattail and a steep flare are mutually exclusive
    if geometry.base_diameter < 0.65:
        diagnostics.append(Diagnostic.BOATTAIL_TOO_STEEP)
    elif geometry.base_diameter > 1.35:
        diagnostics.append(Diagnostic.FLARE_TOO_STEEP)

    for diagnostic in diagnostics:
        logger.warning(f"{geometry.identification or 'projectile'}: {diagnostic.message}")
    return diagnostics
