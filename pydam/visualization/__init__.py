"""Visualization: 2-D plotting of the dam section."""

from pydam.visualization.plot2d import plot_section

__all__ = ["plot_section"]
