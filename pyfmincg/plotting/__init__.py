"""
Visualization functions for PyFmincg.

Functions:
    plot_cost_history: Plot the cost history of one fmincg run
    plot_cost_histories: Plot several cost histories on one axis
    save_cost_plot: Save current plot to file

Note: Requires matplotlib. Install with: pip install matplotlib
"""

from .cost_curve import (
    plot_cost_history,
    plot_cost_histories,
    save_cost_plot,
    HAS_MATPLOTLIB
)

__all__ = [
    "plot_cost_history",
    "plot_cost_histories",
    "save_cost_plot",
    "HAS_MATPLOTLIB",
]
