# pylint: skip-file

from .plot import (
    show_drag_result_plot,
    drag_result_as_plot,
)
from .dataframe import (
    drag_result_as_dataframe,
)

__all__ = (
    'show_drag_result_plot',
    'drag_result_as_plot',
    'drag_result_as_dataframe',
)
