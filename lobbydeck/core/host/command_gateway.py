from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence

LOAD_SLOT_ARGUMENT = "--load-slot"
NEW_SLOT_ARGUMENT = "--new-slot"
CONNECT_LOBBY_ARGUMENT = "+connect_lobby"

Launcher = Callable[[list[str]], object]


def _popen_launcher(arguments: list[str]) -> object:
    return subprocess.Popen(arguments, stdin=subprocess.DEVNULL)


class CommandHostGateway:
    """Hands session requests to the host by launching its command line."""

    def __init__(
        self,
        command: Sequence[str],
        logger: logging.Logger | None = None,
        launcher: Launcher | None = None,
    ) -> None:
        self._command = [str(part) for part in command if str(part).strip() != ""]
        self._logger = logger or logging.getLogger("lobbydeck.host")
        self._launcher = launcher or _popen_launcher

    @property
    def configured(self) -> bool:
        return len(self._command) > 0

    def load_and_create_session(self, slot_id: int) -> bool:
        return self._launch([LOAD_SLOT_ARGUMENT, str(slot_id)], f"load slot {slot_id}")

    def create_session_in_slot(self, slot_id: int) -> bool:
        return self._launch([NEW_SLOT_ARGUMENT, str(slot_id)], f"create slot {slot_id}")

    def join_lobby(self, room_id: str) -> bool:
        return self._launch([CONNECT_LOBBY_ARGUMENT, room_id], f"join lobby {room_id}")

    def _launch(self, extra_arguments: list[str], action: str) -> bool:
        if not self.configured:
            self._logger.warning("No host command configured, cannot %s", action)
            return False

        arguments = [*self._command, *extra_arguments]
        try:
            self._launcher(arguments)
        except (OSError, ValueError, subprocess.SubprocessError) as error:
            self._logger.warning("Host command failed for %s: %s", action, error)
            return False

        self._logger.info("Host command launched: %s", action)
        return True
