from __future__ import annotations

import logging

from core.rooms.models import DiscoveryState

MAX_ATTEMPTS = 100


class DiscoveryStateMachine:
    """Lifecycle of the single outstanding directory query.

    The attempt counter is diagnostic only and never blocks a retry.
    """

    def __init__(self, max_attempts: int = MAX_ATTEMPTS, logger: logging.Logger | None = None) -> None:
        self._max_attempts = max(1, int(max_attempts))
        self._logger = logger or logging.getLogger("lobbydeck.rooms.state")
        self._state = DiscoveryState.IDLE
        self._attempts = 0

    @property
    def state(self) -> DiscoveryState:
        return self._state

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def in_flight(self) -> bool:
        return self._state is DiscoveryState.SEARCHING

    def start_query(self) -> bool:
        if self._state is DiscoveryState.SEARCHING:
            self._logger.info("Already searching, skipping request")
            return False

        self._attempts += 1
        if self._attempts > self._max_attempts:
            self._attempts = 0

        self._state = DiscoveryState.SEARCHING
        return True

    def complete(self) -> bool:
        return self._finish(DiscoveryState.COMPLETED)

    def fail(self) -> bool:
        return self._finish(DiscoveryState.FAILED)

    def reset(self, clear_attempts: bool = False) -> None:
        self._state = DiscoveryState.IDLE
        if clear_attempts:
            self._attempts = 0

    def _finish(self, target: DiscoveryState) -> bool:
        if self._state is not DiscoveryState.SEARCHING:
            self._logger.debug("Ignoring %s outside of a search (state=%s)", target.value, self._state.value)
            return False
        self._state = target
        return True
