"""Structured request/response interface to the drag model.

This module provides the `McDragCalculator` class that accepts a serialized
(JSON) projectile record and answers with a serialized result record made of
three parts: `coefficients`, `diagnostics` and `input_summary`.

Examples:
    >>> calc = McDragCalculator()
    >>> _ = calc.set_input('{"ref_diameter": 7.62, "total_length": 4.0, "nose_length": 1.5, '
    ...                '"boundary_layer": "l/t"}')
    >>> response = json.loads(calc.calculate())
    >>> response['input_summary']['boundary_layer']
    'L/T'
    >>> len(response['coefficients'])
    26
"""
import json
from dataclasses import dataclass, field

from typing_extensions import Any, Mapping, Optional, Union

from py_mcdrag.boundary_layer import BoundaryLayer
from py_mcdrag.drag_result import DragResult, calculate
from py_mcdrag.exceptions import MissingInput, ParseError
from py_mcdrag.logger import logger
from py_mcdrag.projectile import ProjectileGeometry

__all__ = ('McDragCalculator', 'RequestPayload')

RequestPayload = Union[str, bytes, Mapping[str, Any]]


@dataclass
class McDragCalculator:
    """Stateful wrapper holding the last input set on it.

    Attributes:
        indent: JSON indentation of responses, compact when None.
    """

    indent: Optional[int] = None
    _input: Optional[ProjectileGeometry] = field(default=None, init=False, repr=False)

    @property
    def input(self) -> Optional[ProjectileGeometry]:
        return self._input

    def set_input(self, payload: RequestPayload) -> ProjectileGeometry:
        """Parse and store the projectile record.

        Args:
            payload: JSON object text, or an already decoded mapping

        Returns:
            The parsed geometry

        Raises:
            ParseError: Invalid JSON, missing or unknown keys, non-numeric values
            InvalidBoundaryLayerCode: Unrecognized boundary layer code
            InvalidGeometry: Geometry violates a model precondition
        """
        if isinstance(payload, (str, bytes)):
            try:
                data = json.loads(payload)
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                raise ParseError(f"Invalid input: {exc}") from exc
        else:
            data = payload
        geometry = ProjectileGeometry.from_dict(data)
        self._input = geometry
        logger.debug(f"Input set: {geometry}")
        return geometry

    def result(self) -> DragResult:
        """Evaluate the stored input.

        Raises:
            MissingInput: If no input was set
        """
        if self._input is None:
            raise MissingInput()
        return calculate(self._input)

    def calculate(self) -> str:
        """Evaluate the stored input and return the JSON result record.

        Raises:
            MissingInput: If no input was set
        """
        return json.dumps(self.result().to_dict(), indent=self.indent)

    def handle_request(self, payload: RequestPayload) -> str:
        """Set input and calculate in one call."""
        self.set_input(payload)
        return self.calculate()

    @staticmethod
    def validate_boundary_layer(code: Any) -> bool:
        """Check a boundary layer code without computing anything."""
        return BoundaryLayer.is_valid(code)
