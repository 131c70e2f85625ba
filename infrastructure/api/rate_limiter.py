"""Request pacing for the Riot API: sliding-window limits and a fixed cooldown."""
import asyncio
import time
from collections import deque
from typing import Awaitable, Callable, Deque, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]

SHORT_WINDOW_S = 1.0
LONG_WINDOW_S = 120.0


class RateLimiter:
    """
    Sliding-window rate limiter with two windows:
      - Short : N requests per 1 second
      - Long  : N requests per 120 seconds (Riot's 2-minute window)

    ``clock`` and ``sleep`` are injectable so the limiter can be driven
    without real wall-clock delay.
    """

    def __init__(
        self,
        requests_per_1_sec: int = 18,
        requests_per_2_min: int = 90,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ):
        self.requests_per_1_sec = requests_per_1_sec
        self.requests_per_2_min = requests_per_2_min
        self._clock = clock
        self._sleep = sleep

        self._times_1s:   Deque[float] = deque()
        self._times_2min: Deque[float] = deque()
        self._lock = asyncio.Lock()

    def _evict(self, now: float) -> None:
        while self._times_1s and now - self._times_1s[0] >= SHORT_WINDOW_S:
            self._times_1s.popleft()
        while self._times_2min and now - self._times_2min[0] >= LONG_WINDOW_S:
            self._times_2min.popleft()

    async def acquire(self) -> None:
        async with self._lock:
            while True:
                now = self._clock()
                self._evict(now)

                ok_1s   = len(self._times_1s)   < self.requests_per_1_sec
                ok_2min = len(self._times_2min) < self.requests_per_2_min

                if ok_1s and ok_2min:
                    self._times_1s.append(now)
                    self._times_2min.append(now)
                    return

                wait = 0.05
                if not ok_1s and self._times_1s:
                    wait = max(wait, SHORT_WINDOW_S - (now - self._times_1s[0]) + 0.01)
                if not ok_2min and self._times_2min:
                    wait = max(wait, LONG_WINDOW_S - (now - self._times_2min[0]) + 0.01)

                logger.debug(f"Rate limit: waiting {wait:.2f}s")
                await self._sleep(wait)

    def get_status(self) -> Tuple[int, int, int, int]:
        now = self._clock()
        used_1s   = sum(1 for t in self._times_1s   if now - t < SHORT_WINDOW_S)
        used_2min = sum(1 for t in self._times_2min if now - t < LONG_WINDOW_S)
        return used_1s, self.requests_per_1_sec, used_2min, self.requests_per_2_min


class EndpointRateLimiter:
    """Per-endpoint rate limiters with a shared default."""

    def __init__(self, *, clock: Clock = time.monotonic, sleep: Sleep = asyncio.sleep):
        self.limiters: dict[str, RateLimiter] = {}
        self._default: Optional[RateLimiter] = None
        self._clock = clock
        self._sleep = sleep

    def set_default_limiter(
        self,
        requests_per_1_sec: int = 18,
        requests_per_2_min: int = 90,
    ) -> None:
        self._default = RateLimiter(
            requests_per_1_sec, requests_per_2_min, clock=self._clock, sleep=self._sleep
        )

    def add_endpoint_limiter(
        self,
        endpoint: str,
        requests_per_1_sec: int,
        requests_per_2_min: int,
    ) -> None:
        self.limiters[endpoint] = RateLimiter(
            requests_per_1_sec, requests_per_2_min, clock=self._clock, sleep=self._sleep
        )

    async def acquire(self, endpoint: str = "default") -> None:
        limiter = self.limiters.get(endpoint, self._default)
        if limiter:
            await limiter.acquire()


class Cooldown:
    """
    A single fixed pause, awaited once before a burst of requests.

    The match history aggregator uses it ahead of the match-detail fan-out.
    A non-positive duration makes ``wait()`` return immediately.
    """

    def __init__(self, seconds: float, *, sleep: Sleep = asyncio.sleep):
        self.seconds = seconds
        self._sleep = sleep

    async def wait(self) -> None:
        if self.seconds <= 0:
            return
        logger.debug(f"Cooldown: pausing {self.seconds:.2f}s before fan-out")
        await self._sleep(self.seconds)
