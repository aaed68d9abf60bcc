"""
Provider fallback ladder.

Each adapter lists its rungs as ``Attempt`` objects in the order they should
be tried (real -> public mirror -> demo -> fallback). The ladder walks them
until one answers:

- rungs whose ``applies()`` is false are skipped;
- synthetic rungs (demo/fallback) are skipped in production mode;
- an exception from a rung is logged and the next rung is tried.

Outside production the last rung is a constant reading, so a fetch always
resolves. In production an exhausted ladder raises ServiceUnavailable.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence, Tuple

from .. import config
from ..errors import ServiceUnavailable, UpstreamError
from ..models import DataSource, Location

log = logging.getLogger(__name__)


def _always() -> bool:
    return True


@dataclass(frozen=True)
class Attempt:
    source: DataSource
    fetch: Callable[[Location], Any]
    applies: Callable[[], bool] = _always


class ProviderAdapter:
    name: str = "provider"
    credential: str = ""
    emoji: str = "🛰️"

    def attempts(self) -> Sequence[Attempt]:
        raise NotImplementedError

    def unavailable_message(self) -> str:
        return f"{self.name} data unavailable: {self.credential} not configured or failing"

    def fetch(self, location: Location) -> Tuple[Any, DataSource]:
        for attempt in self.attempts():
            if attempt.source.synthetic and config.PRODUCTION:
                continue
            if not attempt.applies():
                continue
            try:
                reading = attempt.fetch(location)
            except Exception as e:
                err = e if isinstance(e, UpstreamError) else UpstreamError(self.name, e)
                log.warning(f"{self.emoji} {self.name} {attempt.source.value} rung failed: {err}")
                continue
            log.info(f"{self.emoji} {self.name} answered from {attempt.source.value} data")
            return reading, attempt.source

        raise ServiceUnavailable([self.credential], self.unavailable_message())
