"""Map decoded key tokens to navigation commands.

The dispatcher is the only writer of ``NavigationState``. Each recognized key
runs exactly one command; unrecognized keys are ignored and do not redraw.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..runtime.state import NavigationState

logger = logging.getLogger(__name__)


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ACTIVATE = "activate"
    TOGGLE_HIDDEN = "toggle_hidden"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single command."""

    keys: tuple[str, ...]
    command: Command


DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding(("UP",), Command.MOVE_UP),
    KeyBinding(("DOWN",), Command.MOVE_DOWN),
    KeyBinding(("ENTER",), Command.ACTIVATE),
    KeyBinding(("h", "H"), Command.TOGGLE_HIDDEN),
    KeyBinding(("q", "Q", "CTRL_C"), Command.QUIT),
)


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one key: whether to redraw, quit, or flash a message."""

    handled: bool
    quit: bool = False
    message: str | None = None


IGNORED = DispatchResult(handled=False)


class InputDispatcher:
    """Translate key tokens into ``NavigationState`` transitions."""

    def __init__(
        self,
        state: NavigationState,
        bindings: tuple[KeyBinding, ...] = DEFAULT_BINDINGS,
    ) -> None:
        self.state = state
        self._commands: dict[str, Command] = {}
        for binding in bindings:
            for key in binding.keys:
                self._commands[key] = binding.command
        self._handlers: dict[Command, Callable[[], DispatchResult]] = {
            Command.MOVE_UP: self._move_up,
            Command.MOVE_DOWN: self._move_down,
            Command.ACTIVATE: self._activate,
            Command.TOGGLE_HIDDEN: self._toggle_hidden,
            Command.QUIT: self._quit,
        }

    def command_for_key(self, key: str) -> Command | None:
        return self._commands.get(key)

    def handle_key(self, key: str) -> DispatchResult:
        """Run the command bound to ``key``; unbound keys are ``IGNORED``."""
        command = self.command_for_key(key)
        if command is None:
            return IGNORED
        return self._handlers[command]()

    def _move_up(self) -> DispatchResult:
        self.state.move_up()
        return DispatchResult(handled=True)

    def _move_down(self) -> DispatchResult:
        self.state.move_down()
        return DispatchResult(handled=True)

    def _activate(self) -> DispatchResult:
        message = self.state.activate()
        if message is not None:
            logger.debug("navigation rejected in %s: %s", self.state.current_path, message)
        return DispatchResult(handled=True, message=message)

    def _toggle_hidden(self) -> DispatchResult:
        self.state.toggle_hidden()
        return DispatchResult(handled=True)

    def _quit(self) -> DispatchResult:
        return DispatchResult(handled=True, quit=True)


__all__ = [
    "DEFAULT_BINDINGS",
    "IGNORED",
    "Command",
    "DispatchResult",
    "InputDispatcher",
    "KeyBinding",
]
