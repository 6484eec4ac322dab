"""Module context for modbox.

Version: 0.1.0

Every module instance is given a ModuleContext instead of the application
coordinator itself. The context forwards a fixed set of calls to the
coordinator and holds nothing but the three values it was built with.

Usage:
    context = create_module_context(application, "search-box", "search-box-1")

    context.broadcast("search:submitted", {"query": "foo"})
    element = context.get_element()
    page_size = context.get_config("pageSize")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from modbox.core.interfaces import ConfigValue, IApplication, IModuleContext

logger = logging.getLogger(__name__)

# Name of the element-lookup service
DOM_SERVICE_NAME = "dom"

# Prefix turning an element id into a selector
ELEMENT_SELECTOR_PREFIX = "#"


class ModuleContext(IModuleContext):
    """The object modules use to interact with their environment.

    Created by the application once per module instance and dropped when
    that instance is torn down. The coordinator reference is kept private;
    modules only see the operations of IModuleContext.

    Re-entrant calls (a broadcast listener calling back into the same
    context) are fine: there is no mutable state to protect.
    """

    __slots__ = ("_application", "_module_name", "_module_id")

    def __init__(self, application: IApplication, module_name: str, module_id: str) -> None:
        """Initialize the context.

        Args:
            application: Coordinator to delegate to
            module_name: Name of the module that will use this object
            module_id: ID of the module's element
        """
        self._application = application
        self._module_name = module_name
        self._module_id = module_id

    @property
    def module_name(self) -> str:
        return self._module_name

    @property
    def module_id(self) -> str:
        return self._module_id

    def __repr__(self) -> str:
        return f"ModuleContext(module_name={self._module_name!r}, module_id={self._module_id!r})"

    # =========================================================================
    # Passthrough Methods
    # =========================================================================

    def broadcast(self, name: str, data: Any = None) -> None:
        logger.debug("[%s] broadcast %s", self._module_id, name)
        self._application.broadcast(name, data)

    def get_service(self, service_name: str) -> Optional[Any]:
        logger.debug("[%s] get_service %s", self._module_id, service_name)
        return self._application.get_service(service_name)

    def get_config(self, name: Optional[str] = None) -> ConfigValue:
        """Return config that was attached to this module's element.

        The element is resolved on every call and passed through even when
        it could not be found.
        """
        element = self.get_element()
        logger.debug("[%s] get_config %s", self._module_id, "<all>" if name is None else name)
        return self._application.get_module_config(element, name)

    def get_global_config(self, name: Optional[str] = None) -> ConfigValue:
        logger.debug("[%s] get_global_config %s", self._module_id, "<all>" if name is None else name)
        return self._application.get_global_config(name)

    # =========================================================================
    # Service Shortcuts
    # =========================================================================

    def get_element(self) -> Optional[Any]:
        """Return the element whose id is this module's id.

        A missing ``dom`` service surfaces as AttributeError from the lookup.
        """
        dom = self.get_service(DOM_SERVICE_NAME)
        return dom.query(ELEMENT_SELECTOR_PREFIX + self._module_id)

    def navigate(
        self,
        url: Optional[str] = None,
        state: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> None:
        logger.debug("[%s] navigate %s", self._module_id, url)
        self._application.navigate(url, state, params)


def create_module_context(
    application: IApplication,
    module_name: str,
    module_id: str,
) -> ModuleContext:
    """Factory function used by the application to create a module context.

    Args:
        application: Coordinator that owns the module instance
        module_name: Module name
        module_id: ID of the module's element

    Returns:
        ModuleContext bound to ``application``
    """
    return ModuleContext(application, module_name, module_id)
