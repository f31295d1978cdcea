"""
Call-rate limiter for authenticated requests.

Counts signed calls since the last checkpoint; throttle() sleeps for
calls * (1e9 / limit) - elapsed nanoseconds, then resets the checkpoint.
Bursts inside one window are only paid for at the next throttle().
"""
import logging
import threading
import time

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Sleep-based limiter, runs on the calling thread.

    Usage:
        limiter = RateLimiter(limit=10)
        limiter.acquire()   # before every signed call
        limiter.throttle()  # from a strategy loop, without counting a call
    """

    def __init__(self, limit=10.0, clock=None, sleep=None):
        """
        :param limit: max calls per second
        :param clock: nanosecond clock, defaults to time.time_ns
        :param sleep: sleep(seconds), defaults to time.sleep
        """
        self._clock = clock or time.time_ns
        self._sleep = sleep or time.sleep
        self._lock = threading.Lock()
        self.limit = float(limit)
        self.last_sleep = self._clock()
        self.last_times = 0

    def set_limit(self, limit):
        """Ignore non-positive values, return the active limit."""
        limit = float(limit)
        if limit > 0:
            self.limit = limit
        return self.limit

    def throttle(self):
        """Sleep off the calls counted since the last checkpoint. Returns seconds slept."""
        with self._lock:
            now = self._clock()
            interval = 1e9 / self.limit * self.last_times - (now - self.last_sleep)
            slept = 0.0
            if interval > 0:
                slept = interval / 1e9
                logger.debug("rate limit: %d calls, sleeping %.3fs", self.last_times, slept)
                self._sleep(slept)
                # checkpoint is the wake-up time, not the time we were called
                now += int(interval)
            self.last_times = 0
            self.last_sleep = now
            return slept

    def count(self):
        with self._lock:
            self.last_times += 1

    def acquire(self):
        """Throttle, then count the call about to be issued."""
        self.throttle()
        self.count()
