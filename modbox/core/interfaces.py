"""Interface definitions for the modbox module context.

Version: 0.1.0

This module defines the boundary between a module context and the
application coordinator that owns it.

Key interfaces:
- IApplication: Coordinator surface the context delegates to
- IDomService: Element-lookup service registered as ``"dom"``
- IModuleContext: The six operations a module is allowed to use
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Protocol, runtime_checkable


# =============================================================================
# TYPE ALIASES
# =============================================================================

# A config lookup yields the named value, the whole mapping when no name is
# given, or None when the module/key has no configuration.
ConfigValue = Any

# Config mapping as held by the coordinator
ConfigMapping = Dict[str, Any]


# =============================================================================
# PROTOCOLS (coordinator-side collaborators)
# =============================================================================

@runtime_checkable
class IDomService(Protocol):
    """Protocol for the element-lookup service."""

    def query(self, selector: str) -> Optional[Any]:
        """Return the first element matching ``selector``, or None."""
        ...


@runtime_checkable
class IApplication(Protocol):
    """Protocol matching the application coordinator.

    The coordinator owns module instances, services, configuration and
    navigation. Module contexts only ever call the methods below.

    ``get_module_config`` must report an unresolved element (``None``) the
    same way as a module without configuration: by returning ``None``.
    """

    def broadcast(self, name: str, data: Any = None) -> None:
        """Fan an event out to every listener."""
        ...

    def get_service(self, service_name: str) -> Optional[Any]:
        """Return a registered service, or None."""
        ...

    def get_module_config(self, element: Optional[Any], name: Optional[str] = None) -> ConfigValue:
        """Return config attached to a module element."""
        ...

    def get_global_config(self, name: Optional[str] = None) -> ConfigValue:
        """Return application-wide config."""
        ...

    def navigate(
        self,
        url: Optional[str] = None,
        state: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Change the current location."""
        ...


# =============================================================================
# ABSTRACT BASE CLASSES
# =============================================================================

class IModuleContext(ABC):
    """Interface handed to every module instance.

    This is everything a module may do with its environment. Implementations
    must not expose the coordinator they wrap.
    """

    __slots__ = ()

    @abstractmethod
    def broadcast(self, name: str, data: Any = None) -> None:
        """Broadcast a message to the application.

        Args:
            name: Name of the message event
            data: Optional payload, forwarded unchanged
        """
        ...

    @abstractmethod
    def get_service(self, service_name: str) -> Optional[Any]:
        """Look up a service by name.

        Returns:
            The service, or None if it is not registered
        """
        ...

    @abstractmethod
    def get_config(self, name: Optional[str] = None) -> ConfigValue:
        """Return configuration for this module instance.

        Args:
            name: Specific config key; the whole mapping if omitted

        Returns:
            Config value, full config mapping, or None if either is absent
        """
        ...

    @abstractmethod
    def get_global_config(self, name: Optional[str] = None) -> ConfigValue:
        """Return application-wide configuration.

        Args:
            name: Specific config key; the whole mapping if omitted

        Returns:
            Config value, full config mapping, or None if either is absent
        """
        ...

    @abstractmethod
    def get_element(self) -> Optional[Any]:
        """Return the element backing this module instance, or None."""
        ...

    @abstractmethod
    def navigate(
        self,
        url: Optional[str] = None,
        state: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Ask the application to navigate.

        Args:
            url: Target URL. If omitted, the new page state must already
                have been arranged with the navigation service.
            state: Additional state to store for the URL change
            params: Legacy load parameters
        """
        ...
