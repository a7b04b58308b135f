# flake8: noqa: F401
"""Server-side models of the gallery's interactive markup components."""

from .document import Document, Event, Key
from .registry import ComponentRegistry, components
from .tabs import TabbedWidget

components.define(TabbedWidget.tag_name, TabbedWidget)
