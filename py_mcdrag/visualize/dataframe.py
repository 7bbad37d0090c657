"""MCDRAG Drag Table Export to pandas DataFrame.

Integration:
    This module is automatically used by the DragResult.dataframe() method.

Typical Usage:
    ```python
    from py_mcdrag import ProjectileGeometry, calculate
    from py_mcdrag.visualize.dataframe import drag_result_as_dataframe

    result = calculate(ProjectileGeometry(7.62, 4.0, 1.5, rt_r=1.0))
    df = drag_result_as_dataframe(result)
    df.to_csv('drag_table.csv')
    ```

Dependencies:
    This module requires pandas as an optional dependency. Install via:
    pip install py_mcdrag[charts]
"""

# pylint: skip-file
# Standard library imports
import warnings

# Local imports
from py_mcdrag.drag_model import MachSweepPoint
from py_mcdrag.drag_result import DragResult

# Handle optional pandas dependency with graceful degradation
try:
    from pandas import DataFrame
except ImportError as error:
    warnings.warn("Install pandas to convert drag table to pandas.DataFrame", UserWarning)
    raise error

__all__ = (
    'drag_result_as_dataframe',
)


def drag_result_as_dataframe(drag_result: DragResult, formatted: bool = False) -> DataFrame:
    """Convert DragResult MachSweepPoint rows to a pandas DataFrame.

    Args:
        drag_result: DragResult whose table is converted.
        formatted: False for float values; True for strings in report column formats.

    Returns:
        DataFrame with columns corresponding to MachSweepPoint fields.
    """
    col_names = list(MachSweepPoint._fields)
    if formatted:
        rows = [point.formatted() for point in drag_result]
    else:
        rows = [tuple(point) for point in drag_result]
    return DataFrame(rows, columns=col_names)
