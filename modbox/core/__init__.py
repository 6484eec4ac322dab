"""modbox core: the module context and its collaborator interfaces.

This package contains:
- interfaces.py: Coordinator/DOM protocols and the IModuleContext ABC
- context.py: ModuleContext, the per-module access object
- exceptions.py: Dedicated exception classes
- logging_utils.py: Logging configuration helpers
"""

from modbox.core.context import (
    DOM_SERVICE_NAME,
    ELEMENT_SELECTOR_PREFIX,
    ModuleContext,
    create_module_context,
)
from modbox.core.exceptions import (
    BridgeError,
    ConfigLoadError,
)
from modbox.core.interfaces import (
    ConfigMapping,
    ConfigValue,
    IApplication,
    IDomService,
    IModuleContext,
)

__all__ = [
    "DOM_SERVICE_NAME",
    "ELEMENT_SELECTOR_PREFIX",
    "ModuleContext",
    "create_module_context",
    "BridgeError",
    "ConfigLoadError",
    "ConfigMapping",
    "ConfigValue",
    "IApplication",
    "IDomService",
    "IModuleContext",
]
