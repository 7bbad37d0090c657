"""Compare the drag curve of one projectile across boundary layer assumptions"""
from dataclasses import replace

import matplotlib.pyplot as plt

from py_mcdrag import BoundaryLayer, calculate, load_profile

COLORS = {
    BoundaryLayer.LAMINAR_LAMINAR: 'tab:green',
    BoundaryLayer.LAMINAR_TURBULENT: 'tab:blue',
    BoundaryLayer.TURBULENT_TURBULENT: 'tab:red',
}

projectile = load_profile("m80_ball.toml")

ax = None
for bl in BoundaryLayer:
    result = calculate(replace(projectile, boundary_layer=bl))
    print(f"{bl.description}: CD0 at Mach 2.0 = {result.get_at(2.0).cd0:.3f}")
    for message in result.messages:
        print(f"  {message}")
    ax = result.plot(components=False, ax=ax)
    # CD0 line is drawn right before the Mach 1 marker
    ax.lines[-2].set_label(bl.code)
    ax.lines[-2].set_color(COLORS[bl])

ax.set_title(projectile.identification)
ax.legend()
plt.show()
