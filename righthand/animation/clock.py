import time


class Clock:
    """A simple clock for keeping track of wall time.

    The clock is the timer resource of the animation driver: it only measures
    time while running.
    """

    def __init__(self):
        self._last_time = None
        self._running = False

    @property
    def running(self):
        """Whether the clock is running."""
        return self._running

    def start(self):
        self._last_time = time.perf_counter()
        self._running = True

    def stop(self):
        self._running = False

    def get_delta(self):
        """Get the time (in seconds) since the previous call."""
        diff = 0.0

        if self._running:
            now = time.perf_counter()
            diff = now - self._last_time
            self._last_time = now

        return diff
