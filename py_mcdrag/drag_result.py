"""Result of a full MCDRAG evaluation.

Core Components:
    - DragResult: Drag table, diagnostics and the geometry they were computed for
    - calculate: Evaluate a ProjectileGeometry into a DragResult

Typical Usage:
    ```python
    from py_mcdrag import ProjectileGeometry, calculate

    result = calculate(ProjectileGeometry(7.62, 4.0, 1.5, rt_r=1.0))
    print(result.get_at(2.0).cd0)
    print([d.message for d in result.diagnostics])
    df = result.dataframe()  # requires pandas
    ```
"""
from __future__ import annotations

import math
import typing
from dataclasses import dataclass, field

from typing_extensions import Any, Dict, Iterator, List, Optional

from py_mcdrag import diagnostics as _diagnostics
from py_mcdrag import drag_model as _drag_model
from py_mcdrag.diagnostics import Diagnostic
from py_mcdrag.drag_model import MachSweepPoint
from py_mcdrag.projectile import ProjectileGeometry

if typing.TYPE_CHECKING:
    from pandas import DataFrame
    from matplotlib.axes import Axes

__all__ = ('DragResult', 'calculate')


@dataclass(frozen=True)
class DragResult:
    """Computed drag coefficients of a projectile.

    Attributes:
        geometry: The evaluated projectile geometry.
        table: MachSweepPoint rows in ascending Mach order.
        diagnostics: Advisory diagnostics in rule order.
    """

    geometry: ProjectileGeometry
    table: List[MachSweepPoint] = field(repr=False)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.table)

    def __iter__(self) -> Iterator[MachSweepPoint]:
        yield from self.table

    def __getitem__(self, index: int) -> MachSweepPoint:
        return self.table[index]

    def get_at(self, mach: float) -> MachSweepPoint:
        """Return the row computed at a Mach number of the sweep.

        Raises:
            KeyError: If mach is not one of the swept Mach numbers
        """
        for point in self.table:
            if math.isclose(point.mach, mach, rel_tol=0, abs_tol=1e-9):
                return point
        raise KeyError(f"Mach {mach} is not in the drag table")

    @property
    def messages(self) -> List[str]:
        return [diagnostic.message for diagnostic in self.diagnostics]

    def to_dict(self) -> Dict[str, Any]:
        """Serializable representation: coefficients, diagnostics and input summary."""
        return {
            'coefficients': [point._asdict() for point in self.table],
            'diagnostics': self.messages,
            'input_summary': self.geometry.to_dict(),
        }

    def dataframe(self, formatted: bool = False) -> DataFrame:
        """Return the drag table as a DataFrame.

        Args:
            formatted: False for values as floats; True for strings in report formats.

        Raises:
            ImportError: If pandas is not installed.
        """
        try:
            from py_mcdrag.visualize.dataframe import drag_result_as_dataframe
            return drag_result_as_dataframe(self, formatted)
        except ImportError as err:
            raise ImportError(
                "Use `pip install py_mcdrag[charts]` to get drag table as pandas.DataFrame"
            ) from err

    def plot(self, components: bool = True, ax: Optional[Axes] = None) -> Axes:
        """Return a graph of drag coefficients against Mach number.

        Args:
            components: Also plot each drag component.
            ax: Axes to draw on; a new figure is created when None.

        Raises:
            ImportError: If plotting dependencies are not installed.
        """
        try:
            from py_mcdrag.visualize.plot import drag_result_as_plot
            return drag_result_as_plot(self, components, ax)
        except ImportError as err:
            raise ImportError(
                "Use `pip install py_mcdrag[charts]` to get results as a plot"
            ) from err


def calculate(geometry: ProjectileGeometry) -> DragResult:
    """Evaluate drag coefficients and diagnostics of a projectile."""
    return DragResult(geometry, _drag_model.evaluate(geometry), _diagnostics.evaluate(geometry))
