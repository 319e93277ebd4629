"""
Command layer for the route plotter.

Handles the `.plot` command line:

    .plot help
    .plot clear [NAME]...
    .plot coords [NAME] <STRING>
    .plot route [NAME] <ROUTE>
    .plot [NAME] <ROUTE>
"""

import logging
from typing import Callable, List, Optional

from .config import COMMAND_PREFIX, DEFAULT_SOURCE, HELP_COMMAND_WIDTH, PLUGIN_NAME, PLUGIN_WEBSITE
from .errors import RoutePlotterError
from .models.navdata import NavSource, reiterable
from .parsers.factory import RouteSourceFactory
from .store import RouteStore

logger = logging.getLogger(__name__)

MessageSink = Callable[[str, str, bool], None]


def log_message(sender: str, message: str, urgent: bool = False) -> None:
    """Default message sink: send operator messages to the log."""
    prefix = f"[{PLUGIN_NAME}] {sender + ': ' if sender else ''}"
    if urgent:
        logger.error(f"{prefix}{message}")
    else:
        logger.info(f"{prefix}{message}")


class RoutePlotter:
    """
    Dispatch `.plot` commands to route sources and keep the resulting routes.

    Args:
        navdata: Navigation entities enumerated afresh for every route command:
            a collection, or a zero-argument callable returning the current
            entities. A one-shot iterator is read once into a NavDatabase.
        store: Route store; a new one is created if omitted
        message_sink: Receives (sender, message, urgent) for operator messages
    """

    def __init__(
        self,
        navdata: Optional[NavSource] = None,
        store: Optional[RouteStore] = None,
        message_sink: Optional[MessageSink] = None,
    ):
        self.navdata = reiterable(navdata)
        self.store = store if store is not None else RouteStore()
        self.message_sink = message_sink or log_message
        self._listeners: List[Callable[[], None]] = []

    def add_listener(self, listener: Callable[[], None]) -> None:
        """Register a callback run whenever the stored routes change."""
        self._listeners.append(listener)

    def handle_command(self, command: str) -> bool:
        """
        Handle one command line.

        Returns:
            True if the command was handled successfully; False if it is not a
            plot command or if it failed (the error is sent to the operator)
        """
        parts = command.split()
        if not parts or parts[0] != COMMAND_PREFIX:
            return False

        if len(parts) == 1 or parts[1] == 'help':
            self.show_help()
            return True

        if parts[1] == 'clear':
            if len(parts) > 2:
                self.store.remove(parts[2:])
            else:
                self.store.clear()
            self._notify()
            return True

        if RouteSourceFactory.has_source(parts[1]):
            keyword, offset = parts[1], 2
        else:
            keyword, offset = DEFAULT_SOURCE, 1

        source = RouteSourceFactory.get_source(keyword, self.navdata)
        name = self.store.next_name()
        remainder = command.split(None, offset)
        text = remainder[offset] if len(remainder) > offset else ''

        try:
            parsed_name, route = source.parse(text)
        except RoutePlotterError as e:
            logger.debug(f"'{keyword}' failed for {text!r}: {e}")
            self.message_sink("Error", str(e), True)
            return False

        if parsed_name is not None:
            name = parsed_name
        if route:
            self.store.put(name, route)
            self._notify()
        return True

    def show_help(self) -> None:
        """Send the command summary to the operator."""
        keywords = RouteSourceFactory.get_supported_keywords()
        sources = [(keyword, RouteSourceFactory.get_source(keyword)) for keyword in keywords]

        width = HELP_COMMAND_WIDTH
        for keyword, source in sources:
            width = max(width, len(keyword) + len(source.help_arguments()) + len(" [NAME] "))

        self.message_sink("", "Available commands:", False)
        self._help_line("help", "Display this help text", width)
        self._help_line("clear [NAME]...", "Remove the named plot, or all plots", width)
        for keyword, source in sources:
            self._help_line(f"{keyword} [NAME] {source.help_arguments()}", source.help_description(), width)
        self._help_line(
            "[NAME] <ROUTE>",
            f"Shortcut for \"{COMMAND_PREFIX} {DEFAULT_SOURCE} [NAME] <ROUTE>\"",
            width,
        )
        self.message_sink("", f"See <{PLUGIN_WEBSITE}> for more information.", False)

    def _help_line(self, command: str, description: str, width: int) -> None:
        self.message_sink("", f"  {COMMAND_PREFIX} {command:<{width}} - {description}", False)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()
