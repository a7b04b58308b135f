"""A minimal event-dispatching document over a BeautifulSoup tree.

Components mutate the parsed markup in place and listen for events on its
elements. Focus is document-wide, like in a browser.
"""

from collections import defaultdict
from enum import Enum
from typing import Callable, Dict, List, Optional, Set, Union

from bs4 import BeautifulSoup, Tag


class Key(str, Enum):
    """Keyboard keys the components react to."""

    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    ARROW_DOWN = "ArrowDown"


class Event:
    """A UI event delivered to the listeners of one element."""

    def __init__(self, event_type: str, key: Optional[str] = None):
        self.event_type = event_type
        self.key = key
        self.current_target: Optional[Tag] = None
        self.default_prevented = False

    def prevent_default(self) -> None:
        self.default_prevented = True


Listener = Callable[[Event], None]


class Document:
    """Parsed markup plus focus and event listener state."""

    def __init__(self, markup: Union[str, BeautifulSoup], parser: str = "html.parser"):
        """Parse `markup`, or adopt an already parsed tree."""
        self.soup = markup if isinstance(markup, BeautifulSoup) else BeautifulSoup(markup, parser)
        self.active_element: Optional[Tag] = None
        self.upgraded: Set[int] = set()
        self._listeners: Dict[int, Dict[str, List[Listener]]] = defaultdict(
            lambda: defaultdict(list)
        )

    def add_event_listener(self, element: Tag, event_type: str, listener: Listener) -> None:
        self._listeners[id(element)][event_type].append(listener)

    def dispatch_event(self, target: Tag, event: Event) -> bool:
        """Run the target's listeners for the event.

        Returns:
            False if a listener called ``prevent_default``, True otherwise.
        """
        event.current_target = target
        for listener in list(self._listeners.get(id(target), {}).get(event.event_type, [])):
            listener(event)
        return not event.default_prevented

    def click(self, target: Tag) -> bool:
        """Dispatch a click on `target`."""
        return self.dispatch_event(target, Event("click"))

    def key_down(self, target: Tag, key: Union[Key, str]) -> bool:
        """Dispatch a keydown for `key` on `target`."""
        if isinstance(key, Key):
            key = key.value
        return self.dispatch_event(target, Event("keydown", key=key))

    def focus(self, element: Tag) -> None:
        self.active_element = element

    def render(self) -> str:
        """Serialize the (possibly mutated) markup."""
        return str(self.soup)
