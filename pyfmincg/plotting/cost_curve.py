"""
Cost history plotting for PyFmincg.

Plots the cost after every successful line search of an fmincg run, which
shows how quickly the minimizer made progress and where it stalled.

Note: Requires matplotlib package. Install with: pip install matplotlib
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple

# Try to import matplotlib, but make it optional
try:
    import matplotlib.pyplot as plt
    import matplotlib
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False
    plt = None
    matplotlib = None


def _check_matplotlib():
    """Check if matplotlib is available and raise helpful error if not."""
    if not HAS_MATPLOTLIB:
        raise ImportError(
            "matplotlib is required for plotting. "
            "Install it with: pip install matplotlib"
        )


def plot_cost_history(
    cost_history: Sequence[float],
    label: Optional[str] = None,
    color: Optional[str] = None,
    linestyle: str = '-',
    linewidth: float = 2.0,
    log_scale: bool = False,
    ax: Optional['matplotlib.axes.Axes'] = None
) -> 'matplotlib.axes.Axes':
    """
    Plot the cost history of an fmincg run.

    Parameters
    ----------
    cost_history : sequence of float
        Costs after each successful line search (MinimizeResult.cost_history)
    label : str, optional
        Label for the curve (for legend)
    color : str, optional
        Line color
    linestyle : str, optional
        Line style (default: '-')
    linewidth : float, optional
        Line width (default: 2.0)
    log_scale : bool, optional
        Use a logarithmic cost axis (default: False)
    ax : matplotlib axis, optional
        Axis to plot on. If None, creates new figure

    Returns
    -------
    ax : matplotlib axis
        Axis with the cost curve

    Examples
    --------
    >>> x, costs, i = fmincg(f, x0, 50)
    >>> ax = plot_cost_history(costs, label='class 0')
    >>> plt.show()
    """
    _check_matplotlib()

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))

    costs = np.asarray(cost_history, dtype=float)
    line_searches = np.arange(1, len(costs) + 1)

    ax.plot(line_searches, costs,
            label=label, color=color, linestyle=linestyle, linewidth=linewidth)

    if log_scale:
        ax.set_yscale('log')

    ax.set_xlabel('Line search')
    ax.set_ylabel('Cost')
    ax.grid(True, alpha=0.3)

    if label:
        ax.legend(loc='best')

    ax.set_title('Cost History')

    return ax


def plot_cost_histories(
    histories: List[Sequence[float]],
    labels: Optional[List[str]] = None,
    colors: Optional[List[str]] = None,
    title: str = 'Cost Histories',
    figsize: Tuple[float, float] = (10, 6),
    log_scale: bool = False
) -> 'matplotlib.axes.Axes':
    """
    Plot several cost histories on the same axes, e.g. one per class of a
    one-vs-all training run.
    """
    _check_matplotlib()

    fig, ax = plt.subplots(figsize=figsize)

    if labels is None:
        labels = [None] * len(histories)
    if colors is None:
        colors = [None] * len(histories)

    for history, label, color in zip(histories, labels, colors):
        plot_cost_history(history, label=label, color=color,
                          log_scale=log_scale, ax=ax)

    ax.set_title(title)

    return ax


def save_cost_plot(
    filename: str,
    dpi: int = 300,
    bbox_inches: str = 'tight'
):
    """
    Save current cost plot to file.

    Parameters
    ----------
    filename : str
        Output filename (extension determines format: .png, .pdf, .svg, etc.)
    dpi : int, optional
        Resolution for raster formats (default: 300)
    bbox_inches : str, optional
        Bounding box setting (default: 'tight')
    """
    _check_matplotlib()

    plt.savefig(filename, dpi=dpi, bbox_inches=bbox_inches)
