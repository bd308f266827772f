"""Static matplotlib rendering of projected root systems."""

import logging
from typing import Optional, Union

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from .adjacency import edge_segments
from .frame import Frame

logger = logging.getLogger(__name__)


def plot_projection(
    data: Union[Frame, np.ndarray],
    edges: Optional[np.ndarray] = None,
    title: str = "E8 Root System Projection",
    figsize: tuple = (8, 8),
    save_path: Optional[str] = None,
    show: bool = True
) -> plt.Figure:
    """
    Plot projected roots with their connecting lines.

    Parameters
    ----------
    data : Frame or np.ndarray
        A frame, or (n_points, 2) / (n_points, 3) coordinates
    edges : np.ndarray, optional
        (n_edges, 2) index pairs; taken from the frame when data is a Frame
    title : str
        Plot title
    figsize : tuple
        Figure size
    save_path : str, optional
        Path to save figure
    show : bool
        Whether to call plt.show()

    Returns
    -------
    matplotlib.figure.Figure
        The figure that was drawn
    """
    if isinstance(data, Frame):
        points = data.points
        if edges is None:
            edges = data.edges
    else:
        points = np.asarray(data, dtype=float)

    if points.ndim != 2 or points.shape[1] not in (2, 3):
        raise ValueError(f"Expected 2D or 3D points, got shape {points.shape}")
    if edges is None:
        edges = np.empty((0, 2), dtype=int)

    # Rainbow by root index
    colors = plt.cm.hsv(np.linspace(0, 1, len(points), endpoint=False))
    segments = edge_segments(points, edges)

    fig = plt.figure(figsize=figsize)

    if points.shape[1] == 2:
        ax = fig.add_subplot(111)
        if len(segments):
            ax.add_collection(LineCollection(
                segments, colors='lightgray', linewidths=0.5, alpha=0.6
            ))
        ax.scatter(points[:, 0], points[:, 1], c=colors, s=10, alpha=0.8)
        ax.set_xlabel('Projected Dimension 1', fontsize=12)
        ax.set_ylabel('Projected Dimension 2', fontsize=12)
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)
    else:
        ax = fig.add_subplot(111, projection='3d')
        if len(segments):
            ax.add_collection3d(Line3DCollection(
                segments, colors='lightgray', linewidths=0.5, alpha=0.4
            ))
        ax.scatter(points[:, 0], points[:, 1], points[:, 2], c=colors, s=10, alpha=0.8)
        ax.set_xlabel('X', fontsize=12)
        ax.set_ylabel('Y', fontsize=12)
        ax.set_zlabel('Z', fontsize=12)

    ax.set_title(title, fontsize=14)
    logger.debug(f"Plotted {len(points)} points and {len(segments)} edges")

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        logger.info(f"Figure saved to {save_path}")

    if show:
        plt.show()

    return fig
