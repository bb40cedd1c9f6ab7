import random
from typing import Optional, Sequence

from ..config.settings import USER_AGENTS


class UserAgentRotator:
    """Pick one User-Agent per request from a fixed pool."""

    def __init__(self, pool: Sequence[str] = USER_AGENTS, rng: Optional[random.Random] = None) -> None:
        if not pool:
            raise ValueError("user agent pool is empty")
        self.pool = list(pool)
        self.rng = rng or random.Random()

    def choose(self) -> str:
        return self.rng.choice(self.pool)
