import math

from ..utils import logger
from .clock import Clock


TAU = 2 * math.pi


class AngleDriver:
    """Advance the rotation angle at a fixed rate.

    The driver owns the one piece of mutable state of the visualization: the
    angle in radians, always in ``[0, 2pi)``. Each tick adds ``step`` to the
    angle, wrapping around after a full turn.

    Ticks can be applied directly with ``tick()``, or derived from wall time
    while the driver is running: ``start()`` acquires a ``Clock``, after which
    each ``update()`` applies one tick for every ``interval`` seconds that
    passed. ``stop()`` releases the clock again. The driver can also be used
    as a context manager, which starts it on entry and stops it on exit.

    Parameters
    ----------
    step : float
        The angular increment per tick, in radians.
    interval : float
        The wall time per tick, in seconds.

    """

    def __init__(self, step=0.01, interval=0.016):
        step = float(step)
        interval = float(interval)
        if not step > 0:
            raise ValueError(f"AngleDriver step must be positive, not {step}.")
        if not interval > 0:
            raise ValueError(f"AngleDriver interval must be positive, not {interval}.")
        self._step = step
        self._interval = interval
        self._angle = 0.0
        self._pending = 0.0
        self._ticks = 0
        self._clock = None

    def __repr__(self):
        state = "running" if self.running else "stopped"
        return f"<AngleDriver angle={self._angle:.4f} step={self._step} {state}>"

    @property
    def angle(self):
        """The current angle, in radians."""
        return self._angle

    @property
    def step(self):
        """The angular increment per tick."""
        return self._step

    @property
    def interval(self):
        """The wall time per tick, in seconds."""
        return self._interval

    @property
    def ticks(self):
        """The number of ticks applied since creation or the last reset."""
        return self._ticks

    @property
    def period(self):
        """The number of ticks in one full turn."""
        return TAU / self._step

    @property
    def running(self):
        """Whether the driver holds a running clock."""
        return self._clock is not None

    def tick(self, dt=None):
        """Advance the angle and return it.

        Without ``dt`` a single step is applied. With ``dt`` (in seconds) the
        time is accumulated, and one step is applied for each full
        ``interval``; the remainder carries over to the next call.
        """
        if dt is None:
            n = 1
        else:
            dt = float(dt)
            if dt < 0:
                raise ValueError(f"Cannot tick with a negative time delta ({dt}).")
            self._pending += dt
            n = int(self._pending // self._interval)
            self._pending -= n * self._interval
        if n:
            self._angle = (self._angle + n * self._step) % TAU
            self._ticks += n
        return self._angle

    def reset(self):
        """Set the angle back to zero and drop pending time."""
        self._angle = 0.0
        self._pending = 0.0
        self._ticks = 0

    def start(self):
        """Start measuring wall time. Does nothing if already running."""
        if self._clock is not None:
            return
        self._clock = Clock()
        self._clock.start()
        logger.debug("Angle driver started.")

    def stop(self):
        """Release the clock. Does nothing if not running."""
        if self._clock is None:
            return
        self._clock.stop()
        self._clock = None
        self._pending = 0.0
        logger.debug("Angle driver stopped.")

    def update(self):
        """Apply the ticks for the wall time passed since the previous update.

        Returns the current angle. A stopped driver does not advance.
        """
        if self._clock is None:
            return self._angle
        return self.tick(self._clock.get_delta())

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *args):
        self.stop()
