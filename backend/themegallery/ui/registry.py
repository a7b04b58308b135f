"""Registry of markup components, keyed by their custom tag name."""

from typing import Any, Dict, List, Optional, Type

from themegallery.core.logging import logger
from themegallery.ui.document import Document


class ComponentRegistry:
    """Maps custom tag names to component classes and upgrades matching elements.

    A component class is constructed as ``cls(host, document, instance_index)``.
    """

    def __init__(self) -> None:
        self._components: Dict[str, Type[Any]] = {}

    def define(self, tag_name: str, component_cls: Type[Any]) -> None:
        """Register `component_cls` for `tag_name`; a name can only be defined once."""
        if tag_name in self._components:
            raise ValueError(f"Component '{tag_name}' is already defined")
        self._components[tag_name] = component_cls
        logger.debug(f"Registered component: {tag_name}")

    def get(self, tag_name: str) -> Optional[Type[Any]]:
        return self._components.get(tag_name)

    def list_available(self) -> List[str]:
        return list(self._components.keys())

    def upgrade(self, document: Document) -> List[Any]:
        """Instantiate components for every matching element not yet upgraded.

        Returns:
            The newly created component instances, in document order per tag name.
        """
        instances = []
        for tag_name, component_cls in self._components.items():
            for index, host in enumerate(document.soup.find_all(tag_name)):
                if id(host) in document.upgraded:
                    continue
                instances.append(component_cls(host, document, index))
                document.upgraded.add(id(host))
        return instances


components = ComponentRegistry()
