import logging
import math
from typing import Iterable, List

import matplotlib.pyplot as plt
import matplotlib.animation as animation

from physlab.complex import Complex

logger = logging.getLogger(__name__)

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
DEFAULT_INTERVAL_MS = 200        # delay between animation frames
TRAIL_ALPHA         = 0.5


def _as_complex(z) -> Complex:
    if isinstance(z, Complex):
        return z
    if isinstance(z, complex):
        return Complex.from_builtin(z)
    x, y = z
    return Complex(x, y)


def rotation_sequence(step: float, count: int,
                      start: Complex = Complex(1.0, 0.0)) -> List[Complex]:
    """
    Successive rotations of ``start`` by ``step`` radians.

    Returns ``count`` values, the first being ``start`` itself; an empty
    list when ``count`` is not positive.
    """
    if count <= 0:
        return []
    seq = [start]
    turn = Complex.unit(step)
    for _ in range(1, count):
        seq.append(seq[-1] * turn)
    return seq


def frame_functions(ax, seq: List[Complex]):
    """
    Build the ``(init, update)`` pair that draws ``seq`` on ``ax``.

    ``update(frame)`` moves the point to ``seq[frame]`` and extends the
    trail; both return the ``(point, trail)`` artists for blitting.
    """
    # Artists
    point, = ax.plot([], [], "ro", markersize=6)
    trail, = ax.plot([], [], "b-", alpha=TRAIL_ALPHA, linewidth=1)

    # History containers for the trail
    history_x: List[float] = []
    history_y: List[float] = []

    def init():
        history_x.clear()
        history_y.clear()
        point.set_data([], [])
        trail.set_data([], [])
        return point, trail

    def update(frame: int):
        z = seq[frame]
        history_x.append(z.real)
        history_y.append(z.imaginary)

        point.set_data([z.real], [z.imaginary])
        trail.set_data(history_x, history_y)
        ax.set_title(f"t = {frame}  |  z = {z}")
        return point, trail

    return init, update


def animate_complex(
    sequence: Iterable[Complex | complex | tuple[float, float]],
    *,
    interval: int = DEFAULT_INTERVAL_MS,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex‑number samples in the 2‑D plane.

    Parameters
    ----------
    sequence : iterable of `Complex`, Python `complex`, or (x,y) tuples
    interval : delay between frames in **ms**
    show     : call ``plt.show()`` before returning

    Returns
    -------
    matplotlib.animation.FuncAnimation – handy if you need to save().
    """

    # Convert the iterable to a concrete list (needed to pre‑fit axes)
    seq: List[Complex] = [_as_complex(z) for z in sequence]
    if not seq:
        raise ValueError("cannot animate an empty sequence")

    # Pre‑compute limits for a clean box that fits everything
    xs = [z.real for z in seq]
    ys = [z.imaginary for z in seq]
    span = max(max(map(abs, xs)), max(map(abs, ys)), 1.0)
    margin = 0.1 * span
    logger.debug("animating %d samples, span %.3g", len(seq), span)

    fig, ax = plt.subplots()
    ax.set_aspect("equal")
    ax.set_xlim(-span - margin, span + margin)
    ax.set_ylim(-span - margin, span + margin)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.set_title("Complex number animation")
    ax.grid(True, linestyle="--", alpha=0.3)

    init, update = frame_functions(ax, seq)

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(seq),
        init_func=init,
        interval=interval,
        blit=True,
        repeat=False,
    )
    if show:
        plt.show()
    return anim


if __name__ == "__main__":
    animate_complex(rotation_sequence(math.pi/180, 360), interval=1)
