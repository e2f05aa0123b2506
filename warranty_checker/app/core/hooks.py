"""
Registry of ajax actions and shortcodes.

Handlers are registered explicitly by ``main.create_app`` at startup
instead of being attached to global hooks at import time.  The ajax
endpoint looks actions up by name and the shortcode endpoint looks up
form renderers by tag.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

ActionHandler = Callable[[Mapping[str, Any]], Awaitable[Any]]
ShortcodeRenderer = Callable[[], Awaitable[str]]


class Dispatcher:
    """Maps action names to handlers and shortcode tags to renderers."""

    def __init__(self) -> None:
        self._actions: Dict[str, ActionHandler] = {}
        self._shortcodes: Dict[str, ShortcodeRenderer] = {}

    def add_action(self, name: str, handler: ActionHandler) -> None:
        if name in self._actions:
            raise ValueError(f"Action {name!r} is already registered")
        self._actions[name] = handler
        logger.debug("Registered action %s", name)

    def add_shortcode(self, tag: str, renderer: ShortcodeRenderer) -> None:
        if tag in self._shortcodes:
            raise ValueError(f"Shortcode {tag!r} is already registered")
        self._shortcodes[tag] = renderer
        logger.debug("Registered shortcode %s", tag)

    def get_action(self, name: str) -> Optional[ActionHandler]:
        return self._actions.get(name)

    def get_shortcode(self, tag: str) -> Optional[ShortcodeRenderer]:
        return self._shortcodes.get(tag)
