"""Interactive session: menu loop, template selection, and termination.

State machine:

    MENU_WAIT --1/2--> CONFIGURING --> SENDING --> MENU_WAIT
    MENU_WAIT --3----> TERMINATED (noisy, message shown, connection closed, nothing sent)
    MENU_WAIT --4----> SENDING --> TERMINATED (graceful, disconnect entry sent)

Invalid input at any prompt returns to MENU_WAIT without a state change.
End of input is treated like option 4.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from logclient.console import (
    Console,
    render_level_menu,
    render_main_menu,
    render_template_menu,
)
from logclient.models import (
    AUTO_ENTRIES,
    DEFAULT_TEMPLATE,
    DISCONNECT_ENTRY,
    PRESET_TEMPLATES,
    parse_level,
)
from logclient.sender import LogSender

logger = logging.getLogger(__name__)

NOISY_MESSAGE = "Service abuse prevention system blocked overly noisy client"
EXIT_MESSAGE = "Exiting the program."


class SessionState(Enum):
    MENU_WAIT = "menu_wait"
    CONFIGURING = "configuring"
    SENDING = "sending"
    TERMINATED = "terminated"


class SessionOutcome(Enum):
    GRACEFUL = "graceful"
    NOISY = "noisy"


class MenuOption(Enum):
    AUTO = "1"
    MANUAL = "2"
    NOISY = "3"
    EXIT = "4"
    INVALID = ""

    @classmethod
    def parse(cls, raw: str) -> "MenuOption":
        """Map a menu selection to an option, or INVALID if it matches none."""
        choice = raw.strip()
        for option in cls:
            if option is not cls.INVALID and option.value == choice:
                return option
        return cls.INVALID


@dataclass
class TemplateSettings:
    """The single active format template plus the presets it can switch to."""

    current: str = DEFAULT_TEMPLATE
    presets: tuple[str, ...] = PRESET_TEMPLATES

    def select(self, choice: str) -> bool:
        """Switch to the 1-based preset named by choice. Returns False if invalid."""
        choice = choice.strip()
        if not choice.isdecimal():
            return False
        index = int(choice) - 1
        if not 0 <= index < len(self.presets):
            return False
        self.current = self.presets[index]
        return True


class SessionController:
    """Drives the menu loop over one open connection."""

    def __init__(self, console: Console, sender: LogSender,
                 settings: TemplateSettings, close_connection: Callable[[], None]):
        self._console = console
        self._sender = sender
        self._settings = settings
        self._close_connection = close_connection
        self._state = SessionState.MENU_WAIT

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def settings(self) -> TemplateSettings:
        return self._settings

    def run(self) -> SessionOutcome:
        """Loop until the user exits or triggers noisy termination."""
        while True:
            try:
                outcome = self.step()
            except EOFError:
                logger.info("End of input, exiting session")
                outcome = self._exit()
            if outcome is not None:
                return outcome

    def step(self) -> SessionOutcome | None:
        """Show the menu and handle one selection. Returns an outcome if terminal."""
        self._state = SessionState.MENU_WAIT
        render_main_menu(self._console)
        option = MenuOption.parse(self._console.prompt("Select an option (1-4): "))

        if option is MenuOption.AUTO:
            self._auto()
        elif option is MenuOption.MANUAL:
            self._manual()
        elif option is MenuOption.NOISY:
            return self._noisy()
        elif option is MenuOption.EXIT:
            return self._exit()
        else:
            logger.debug("Rejected menu selection")
            self._console.write("Invalid option. Please try again.")

        self._state = SessionState.MENU_WAIT
        return None

    def configure(self):
        """Let the user pick one of the preset templates."""
        self._state = SessionState.CONFIGURING
        render_template_menu(self._console, self._settings.current, self._settings.presets)
        count = len(self._settings.presets)
        choice = self._console.prompt(f"Select an option (1-{count}): ")
        if self._settings.select(choice):
            logger.info("Log format set to %s", self._settings.current)
        else:
            logger.info("Invalid format selection %r, keeping current", choice)
            self._console.write("Invalid option. Keeping current log format.")

    def _auto(self):
        self.configure()
        self._state = SessionState.SENDING
        for entry in AUTO_ENTRIES:
            self._sender.log_entry(entry, self._settings.current)

    def _manual(self):
        self.configure()
        message = self._console.prompt("Enter log message: ")
        self._console.write("Choose log level:")
        render_level_menu(self._console)
        token = self._console.prompt("Select log level: ")

        level = parse_level(token)
        if level is None:
            logger.info("Unknown log level %r, message discarded", token)
            self._console.write("Invalid log level. Log message not sent.")
            return

        self._state = SessionState.SENDING
        self._sender.log(level, message, self._settings.current)

    def _noisy(self) -> SessionOutcome:
        self._console.write(NOISY_MESSAGE)
        self._close_connection()
        self._state = SessionState.TERMINATED
        return SessionOutcome.NOISY

    def _exit(self) -> SessionOutcome:
        self._state = SessionState.SENDING
        self._sender.log_entry(DISCONNECT_ENTRY, self._settings.current)
        self._console.write(EXIT_MESSAGE)
        self._state = SessionState.TERMINATED
        return SessionOutcome.GRACEFUL
