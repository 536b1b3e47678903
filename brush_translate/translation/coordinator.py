"""
Request supersession

Every logical operation (translation, analysis) gets a strictly increasing
token when it starts. Only the result carrying the latest token is
delivered; older results are dropped when they arrive. The HTTP call of a
superseded operation is never aborted, its result is simply suppressed.
"""
import itertools
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Dict, Optional, TypeVar

from loguru import logger


T = TypeVar("T")


class OperationKind(str, Enum):
    TRANSLATION = "translation"
    ANALYSIS = "analysis"


class OperationState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"


@dataclass(frozen=True)
class RequestToken:
    """Opaque ticket for one started operation"""
    kind: OperationKind
    value: int


class RequestCoordinator:
    """Tracks the latest token per operation kind"""

    def __init__(self):
        self._lock = threading.Lock()
        self._counters = {kind: itertools.count(1) for kind in OperationKind}
        self._current: Dict[OperationKind, Optional[RequestToken]] = {
            kind: None for kind in OperationKind
        }

    def begin(self, kind: OperationKind) -> RequestToken:
        """
        Mint a token and make it the current one for ``kind``.

        Starting a translation also resets any in-flight analysis, since the
        analysis belonged to the previous translation.
        """
        with self._lock:
            token = RequestToken(kind, next(self._counters[kind]))
            self._current[kind] = token
            if kind is OperationKind.TRANSLATION:
                self._current[OperationKind.ANALYSIS] = None
        logger.debug(f"Started {kind.value} #{token.value}")
        return token

    def is_current(self, token: RequestToken) -> bool:
        with self._lock:
            return self._current[token.kind] == token

    def finish(self, token: RequestToken) -> bool:
        """Return to idle if ``token`` is still current; report whether it was"""
        with self._lock:
            if self._current[token.kind] == token:
                self._current[token.kind] = None
                return True
            return False

    def state(self, kind: OperationKind) -> OperationState:
        with self._lock:
            return OperationState.IDLE if self._current[kind] is None else OperationState.IN_FLIGHT

    def current_token(self, kind: OperationKind) -> Optional[RequestToken]:
        with self._lock:
            return self._current[kind]

    def reset(self, kind: OperationKind) -> None:
        with self._lock:
            self._current[kind] = None

    async def complete(
        self,
        token: RequestToken,
        operation: Awaitable[T],
        on_result: Callable[[T], None],
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> bool:
        """
        Await ``operation`` and hand its outcome to the callbacks only if
        ``token`` is still the latest for its kind.

        Returns True when a callback fired. Errors of a superseded operation
        are dropped like its results; errors of the current operation
        propagate when no ``on_error`` is given.
        """
        try:
            result = await operation
        except Exception as e:
            if not self.finish(token):
                logger.debug(f"Dropped error of stale {token.kind.value} #{token.value}: {e}")
                return False
            if on_error is None:
                raise
            on_error(e)
            return True

        if not self.finish(token):
            logger.info(f"Dropped stale {token.kind.value} result #{token.value}")
            return False
        on_result(result)
        return True
