from __future__ import annotations
from typing import Iterable, Sequence, Tuple

from .geom import Pt


def plot_points(ax, points: Sequence[Pt], pairs: Iterable[Tuple[int, int]] = (),
                title: str = "") -> None:
    """
    Намалювати хмару точок на 3D-осі matplotlib і підсвітити пари (i, j) відрізками.
    Масштаб по осях однаковий.
    """
    ax.clear()

    if not points:
        ax.set_title(title or "Немає точок")
        return

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    zs = [p.z for p in points]
    ax.scatter(xs, ys, zs, s=6, color="tab:blue", depthshade=True)

    for i, j in pairs:
        pa, pb = points[i], points[j]
        ax.plot([pa.x, pb.x], [pa.y, pb.y], [pa.z, pb.z], color="tab:red", linewidth=2.0)
        ax.scatter([pa.x, pb.x], [pa.y, pb.y], [pa.z, pb.z], s=24, color="tab:red")

    # однакові масштаби
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    min_z, max_z = min(zs), max(zs)
    max_range = max(max_x - min_x, max_y - min_y, max_z - min_z)
    if max_range == 0:
        max_range = 1.0
    mx = 0.5 * (min_x + max_x)
    my = 0.5 * (min_y + max_y)
    mz = 0.5 * (min_z + max_z)
    ax.set_xlim(mx - max_range / 2, mx + max_range / 2)
    ax.set_ylim(my - max_range / 2, my + max_range / 2)
    ax.set_zlim(mz - max_range / 2, mz + max_range / 2)

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    if title:
        ax.set_title(title)


def make_figure(points: Sequence[Pt], pairs: Iterable[Tuple[int, int]] = (),
                title: str = ""):
    """Окрема Figure (без pyplot) з одним 3D-графіком."""
    from matplotlib.figure import Figure
    from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'

    fig = Figure(figsize=(5, 4))
    ax = fig.add_subplot(111, projection="3d")
    plot_points(ax, points, pairs, title)
    return fig
