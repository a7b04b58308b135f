"""Accessible tabbed interface component.

Expected markup::

    <tabbed-ui id="features">
      <ul>
        <li><a href="#one">One</a></li>
        <li><a href="#two">Two</a></li>
      </ul>
      <div>
        <section>...</section>
        <section>...</section>
      </div>
    </tabbed-ui>

On initialization the list becomes a ``tablist``, the links become ``tab``s and
the sections become ``tabpanel``s, with exactly one tab selected and one panel
visible at any time.
"""

from typing import List, Optional

from bs4 import Tag

from themegallery.core.exceptions import TabMarkupError
from themegallery.core.logging import logger
from themegallery.ui.document import Document, Event, Key


class TabbedWidget:
    """Keyboard and pointer driven tab switching over a host element."""

    tag_name = "tabbed-ui"

    def __init__(self, host: Tag, document: Document, instance_index: int = 0):
        """Initialize the widget over `host`.

        Args:
            host: The ``<tabbed-ui>`` element.
            document: Document owning the host; receives focus changes and listeners.
            instance_index: Position of the host among widgets of the document, used
                for generated ids when the host has no ``id``.
        """
        self.host = host
        self.document = document
        self.prefix = host.get("id") or f"tabs-{instance_index + 1}"
        self.tablist: Optional[Tag] = None
        self.tabs: List[Tag] = []
        self.panels: List[Tag] = []
        self.selected_index = 0
        self.initialize()

    def _find_panels(self, tablist: Tag) -> List[Tag]:
        container = tablist.find_next_sibling()
        if container is None:
            return []
        if container.name == "section":
            return tablist.find_next_siblings("section")
        return container.find_all("section", recursive=False)

    def initialize(self) -> None:
        """Assign roles, ids and listeners, then select the first tab."""
        tablist = self.host.find("ul")
        if tablist is None:
            raise TabMarkupError(f"<{self.tag_name}> #{self.prefix} has no tab list")

        tabs = tablist.find_all("a")
        panels = self._find_panels(tablist)
        if len(tabs) != len(panels):
            logger.warning(
                f"<{self.tag_name}> #{self.prefix} has {len(tabs)} tabs and {len(panels)} "
                "panels; extra elements are left untouched"
            )
        count = min(len(tabs), len(panels))
        if count == 0:
            raise TabMarkupError(f"<{self.tag_name}> #{self.prefix} has no tab/panel pairs")

        self.tablist = tablist
        self.tabs = tabs[:count]
        self.panels = panels[:count]

        tablist["role"] = "tablist"
        for index, (tab, panel) in enumerate(zip(self.tabs, self.panels)):
            tab_id = f"{self.prefix}-tab-{index + 1}"
            panel_id = f"{self.prefix}-panel-{index + 1}"

            if isinstance(tab.parent, Tag) and tab.parent.name == "li":
                tab.parent["role"] = "presentation"
            tab["role"] = "tab"
            tab["id"] = tab_id
            tab["href"] = f"#{panel_id}"

            panel["role"] = "tabpanel"
            panel["id"] = panel_id
            panel["tabindex"] = "-1"
            panel["aria-labelledby"] = tab_id

            self.document.add_event_listener(tab, "click", self._on_click)
            self.document.add_event_listener(tab, "keydown", self._on_keydown)

        self._deselect_all()
        self._select(0)

    def _deselect_all(self) -> None:
        for tab in self.tabs:
            tab["tabindex"] = "-1"
            tab["aria-selected"] = "false"
        for panel in self.panels:
            panel["hidden"] = ""

    def _select(self, index: int) -> None:
        tab = self.tabs[index]
        tab.attrs.pop("tabindex", None)
        tab["aria-selected"] = "true"
        self.panels[index].attrs.pop("hidden", None)
        self.selected_index = index

    def switch_tab(self, index: int) -> None:
        """Select the tab at `index`, reveal its panel and focus it.

        Indices outside the tab list are ignored.
        """
        if not 0 <= index < len(self.tabs):
            return
        self._deselect_all()
        self._select(index)
        self.document.focus(self.tabs[index])

    def _index_of(self, tab: Tag) -> int:
        return next(i for i, candidate in enumerate(self.tabs) if candidate is tab)

    def _on_click(self, event: Event) -> None:
        event.prevent_default()
        index = self._index_of(event.current_target)
        if index != self.selected_index:
            self.switch_tab(index)

    def _on_keydown(self, event: Event) -> None:
        index = self._index_of(event.current_target)
        if event.key == Key.ARROW_LEFT:
            target = index - 1
        elif event.key == Key.ARROW_RIGHT:
            target = index + 1
        elif event.key == Key.ARROW_DOWN:
            event.prevent_default()
            self.document.focus(self.panels[self.selected_index])
            return
        else:
            return

        event.prevent_default()
        # No wraparound at either end
        self.switch_tab(target)

    @property
    def selected_tab(self) -> Tag:
        return self.tabs[self.selected_index]

    @property
    def selected_panel(self) -> Tag:
        return self.panels[self.selected_index]
