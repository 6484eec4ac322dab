"""In-memory coordinator for unit-testing modules.

Version: 0.1.0

Modules are written against IModuleContext, so they can be exercised
without a running application. StubApplication plays the coordinator:
it records broadcasts and navigations, serves registered services, and
answers config lookups the way a page-backed application would.

Usage:
    app = StubApplication(global_config={"locale": "en-US"})
    app.dom.add(StubElement("search-box-1", {"pageSize": 20}))

    context = app.create_context("search-box", "search-box-1")
    module = SearchBox(context)
    module.submit("foo")

    assert app.broadcasts == [("search:submitted", {"query": "foo"})]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from modbox.config.config import load_fixture_config
from modbox.core.context import (
    DOM_SERVICE_NAME,
    ELEMENT_SELECTOR_PREFIX,
    ModuleContext,
    create_module_context,
)
from modbox.core.interfaces import ConfigValue
from modbox.core.logging_utils import configure_logging

logger = logging.getLogger(__name__)

# Callback type for broadcast listeners
MessageHandler = Callable[[str, Any], None]


@dataclass(frozen=True)
class StubElement:
    """A module element carrying its own configuration."""

    id: str
    config: Optional[Dict[str, Any]] = None


class StubDomService:
    """Element lookup over a fixed set of elements, by id selector only."""

    def __init__(self, elements: Optional[Iterable[StubElement]] = None) -> None:
        self._elements: Dict[str, StubElement] = {}
        for element in elements or []:
            self.add(element)

    def add(self, element: StubElement) -> None:
        """Register an element, replacing any with the same id."""
        self._elements[element.id] = element

    def query(self, selector: str) -> Optional[StubElement]:
        if not selector.startswith(ELEMENT_SELECTOR_PREFIX):
            return None
        return self._elements.get(selector[len(ELEMENT_SELECTOR_PREFIX):])


class StubApplication:
    """Coordinator stand-in that records what modules ask of it.

    Attributes:
        broadcasts: Every ``(name, data)`` passed to broadcast, in order
        navigations: Every ``(url, state, params)`` passed to navigate
    """

    def __init__(
        self,
        services: Optional[Dict[str, Any]] = None,
        global_config: Optional[Dict[str, Any]] = None,
        dom: Optional[StubDomService] = None,
    ) -> None:
        self.dom = dom if dom is not None else StubDomService()
        self._services: Dict[str, Any] = {DOM_SERVICE_NAME: self.dom}
        self._services.update(services or {})
        self._global_config: Dict[str, Any] = global_config if global_config is not None else {}
        self._handlers: Dict[str, List[MessageHandler]] = {}

        self.broadcasts: List[Tuple[str, Any]] = []
        self.navigations: List[Tuple[Optional[str], Optional[Dict[str, Any]], Optional[Dict[str, Any]]]] = []

    @classmethod
    def from_yaml(cls, path: str | Path) -> "StubApplication":
        """Build an application from a fixture file.

        Args:
            path: YAML file with ``globals``, ``modules`` and optional
                ``logging`` sections

        Raises:
            ConfigLoadError: If the file cannot be parsed
        """
        fixture = load_fixture_config(path)
        if fixture.log_level is not None or fixture.log_file is not None:
            configure_logging(fixture.log_level, fixture.log_file)
        dom = StubDomService(
            StubElement(module_id, module_config)
            for module_id, module_config in fixture.modules.items()
        )
        logger.debug("Loaded %d module element(s) from %s", len(fixture.modules), path)
        return cls(global_config=fixture.global_config, dom=dom)

    # =========================================================================
    # Test setup
    # =========================================================================

    def add_service(self, name: str, service: Any) -> None:
        self._services[name] = service

    def on(self, name: str, handler: MessageHandler) -> None:
        """Register a listener called synchronously on broadcast."""
        self._handlers.setdefault(name, []).append(handler)

    def create_context(self, module_name: str, module_id: str) -> ModuleContext:
        return create_module_context(self, module_name, module_id)

    # =========================================================================
    # Coordinator surface
    # =========================================================================

    def broadcast(self, name: str, data: Any = None) -> None:
        self.broadcasts.append((name, data))
        # Copy so a handler registering another handler does not extend this pass
        for handler in list(self._handlers.get(name, [])):
            handler(name, data)

    def get_service(self, service_name: str) -> Optional[Any]:
        return self._services.get(service_name)

    def get_module_config(self, element: Optional[StubElement], name: Optional[str] = None) -> ConfigValue:
        """Return config attached to ``element``.

        An unresolved element and an element without config both yield None.
        """
        if element is None or element.config is None:
            return None
        if name is None:
            return element.config
        return element.config.get(name)

    def get_global_config(self, name: Optional[str] = None) -> ConfigValue:
        if name is None:
            return self._global_config
        return self._global_config.get(name)

    def navigate(
        self,
        url: Optional[str] = None,
        state: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.navigations.append((url, state, params))
