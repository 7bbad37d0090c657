"""Boundary layer assumptions for the skin friction estimate.

The boundary layer code selects which flat-plate skin friction coefficient
(laminar or turbulent) is applied to the nose and to the afterbody wetted areas.

Examples:
    >>> BoundaryLayer.parse('l/t')
    <BoundaryLayer.LAMINAR_TURBULENT: 'L/T'>
    >>> BoundaryLayer.TURBULENT_TURBULENT.code
    'T/T'
    >>> BoundaryLayer.is_valid('X/Y')
    False
"""
from enum import Enum

from typing_extensions import Any, Union

from py_mcdrag.exceptions import InvalidBoundaryLayerCode

__all__ = ('BoundaryLayer', 'BoundaryLayerCodeType')


class BoundaryLayer(Enum):
    """Boundary layer state of nose and afterbody, keyed by its two-character code."""

    LAMINAR_LAMINAR = 'L/L'
    LAMINAR_TURBULENT = 'L/T'
    TURBULENT_TURBULENT = 'T/T'

    def __str__(self) -> str:
        return self.value

    @property
    def code(self) -> str:
        """Canonical (upper-case) code."""
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def laminar_nose(self) -> bool:
        return self is not BoundaryLayer.TURBULENT_TURBULENT

    @property
    def laminar_afterbody(self) -> bool:
        return self is BoundaryLayer.LAMINAR_LAMINAR

    @classmethod
    def parse(cls, code: Union[str, 'BoundaryLayer']) -> 'BoundaryLayer':
        """Parse a boundary layer code, ignoring case and surrounding whitespace.

        Args:
            code: One of 'L/L', 'L/T', 'T/T' (any case), or a BoundaryLayer member

        Returns:
            The matching BoundaryLayer

        Raises:
            InvalidBoundaryLayerCode: If the code is not recognized
        """
        if isinstance(code, cls):
            return code
        if not isinstance(code, str):
            raise InvalidBoundaryLayerCode(code)
        try:
            return cls(code.strip().upper())
        except ValueError as exc:
            raise InvalidBoundaryLayerCode(code) from exc

    @classmethod
    def is_valid(cls, code: Any) -> bool:
        """Check a code without raising."""
        try:
            cls.parse(code)
        except InvalidBoundaryLayerCode:
            return False
        return True


_DESCRIPTIONS = {
    BoundaryLayer.LAMINAR_LAMINAR: "ALL LAMINAR BOUNDARY LAYER",
    BoundaryLayer.LAMINAR_TURBULENT: "LAMINAR NOSE, TURBULENT AFTERBODY",
    BoundaryLayer.TURBULENT_TURBULENT: "ALL TURBULENT BOUNDARY LAYER",
}

BoundaryLayerCodeType = Union[str, BoundaryLayer]
