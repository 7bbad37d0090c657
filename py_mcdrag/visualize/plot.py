"""Drag Coefficient Plotting Module.

This module provides matplotlib-based plots of MCDRAG results.
It is used by DragResult.plot().

Examples:
    ```python
    import matplotlib.pyplot as plt
    from py_mcdrag import ProjectileGeometry, calculate

    ax = calculate(ProjectileGeometry(7.62, 4.0, 1.5, rt_r=1.0)).plot()
    plt.show()
    ```

Dependencies:
    This module requires matplotlib as an optional dependency. Install via:
    `pip install py_mcdrag[charts]`
"""

# pylint: skip-file
# Standard library imports
import warnings

# Third-party imports
from typing_extensions import Dict, Optional

# Local imports
from py_mcdrag.drag_result import DragResult

# Handle optional matplotlib dependency
try:
    from matplotlib import pyplot as plt
    from matplotlib.axes import Axes
except ImportError as error:
    warnings.warn("Install matplotlib to plot drag coefficients", UserWarning)
    raise error

__all__ = (
    'drag_result_as_plot',
    'show_drag_result_plot',
)

PLOT_COLORS: Dict[str, str] = {
    'cd0': 'black',
    'cdh': 'tab:red',
    'cdsf': 'tab:green',
    'cdbnd': 'tab:purple',
    'cdbt': 'tab:orange',
    'cdb': 'tab:blue',
    'mach_one': 'grey',
}

COMPONENT_LABELS: Dict[str, str] = {
    'cdh': 'Head',
    'cdsf': 'Skin friction',
    'cdbnd': 'Band',
    'cdbt': 'Boattail',
    'cdb': 'Base',
}


def show_drag_result_plot() -> None:
    """Display the current matplotlib figure."""
    plt.show()


def drag_result_as_plot(drag_result: DragResult, components: bool = True,
                        ax: Optional[Axes] = None) -> Axes:
    """Plot CD0 (and optionally its components) against Mach number.

    Args:
        drag_result: DragResult to plot.
        components: Also plot each drag component.
        ax: Axes to draw on; a new figure is created when None.

    Returns:
        The plot Axes object.
    """
    if ax is None:
        _, ax = plt.subplots()

    mach = [point.mach for point in drag_result]
    ax.plot(mach, [point.cd0 for point in drag_result], color=PLOT_COLORS['cd0'],
            linewidth=2, label='CD0')
    if components:
        for name, label in COMPONENT_LABELS.items():
            ax.plot(mach, [getattr(point, name) for point in drag_result],
                    color=PLOT_COLORS[name], linestyle='--', label=label)

    ax.axvline(1.0, color=PLOT_COLORS['mach_one'], linestyle=':', linewidth=1)
    ax.set_xlabel('Mach')
    ax.set_ylabel('Drag coefficient')
    title = drag_result.geometry.identification or 'MCDRAG'
    ax.set_title(f"{title} ({drag_result.geometry.boundary_layer.code})")
    ax.grid(True, which='both', alpha=0.3)
    ax.legend()
    return ax
