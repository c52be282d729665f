"""2-D plot of a dam section.

Functions
---------
plot_section
    Section outline, upstream water and resultant location.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pydam.geometry.profiles import section_outline
from pydam.units.conversion import display_units


def plot_section(
    inputs: Any,
    results: Any = None,
    ax: Any = None,
    title: str = "",
) -> Any:
    """Plot the cross-section with its loading.

    Args:
        inputs: :class:`~pydam.statics.DamInputs` with all dimensions
            set (use the solved copy in solve mode).
        results: Optional :class:`~pydam.statics.StabilityResults`; if
            given, the resultant location is marked on the base and
            the safety factors are shown in the title.
        ax: Matplotlib axes (creates new figure if None).
        title: Plot title.  Defaults to a safety-factor summary.

    Returns:
        Matplotlib axes.
    """
    import matplotlib.pyplot as plt
    from matplotlib.patches import Polygon

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 6))

    b, h, h_w = inputs.base_width, inputs.height, inputs.water_level
    u = display_units(inputs.unit_system)
    outline = section_outline(inputs.profile, b, h, inputs.crest_width)

    # Reservoir upstream of the heel
    reach = 0.5 * b
    water = np.array([(-reach, 0), (0, 0), (0, h_w), (-reach, h_w)], dtype=float)
    ax.add_patch(Polygon(water, closed=True, facecolor="#4a90d9", alpha=0.4,
                         edgecolor="none", label="Water"))
    ax.add_patch(Polygon(outline, closed=True, facecolor="0.75",
                         edgecolor="k", linewidth=1.2, label="Dam"))
    ax.plot([-reach, 0], [h_w, h_w], color="#1f5fa8", linewidth=1.0)

    if results is not None:
        x_r = results.location_of_resultant
        ax.plot([x_r], [0], marker="v", markersize=10, color="crimson",
                linestyle="none", label="Resultant")
        # Middle-third limits of the base
        for x in (b / 3, 2 * b / 3):
            ax.axvline(x, ymax=0.05, color="0.4", linestyle=":", linewidth=0.8)
        if not title:
            title = f"FS overturning = {results.safety_factor_overturning:.2f}"
            if results.safety_factor_sliding is not None:
                title += f", FS sliding = {results.safety_factor_sliding:.2f}"

    ax.axhline(0, color="k", linewidth=0.8)
    ax.set_xlim(-reach * 1.1, b * 1.2)
    ax.set_ylim(-0.05 * h, h * 1.15)
    ax.set_aspect("equal")
    ax.set_title(title)
    ax.set_xlabel(f"x ({u.length})")
    ax.set_ylabel(f"y ({u.length})")
    ax.legend(loc="upper right")

    return ax
