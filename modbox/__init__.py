"""modbox package bootstrap."""

from modbox.core import (
    IApplication,
    IModuleContext,
    ModuleContext,
    create_module_context,
)

__all__ = [
    "__version__",
    "IApplication",
    "IModuleContext",
    "ModuleContext",
    "create_module_context",
]

__version__ = "0.1.0"
