"""Exception classes for modbox.

Version: 0.2.0

The module context never raises errors of its own: unregistered services,
absent configuration and missing elements are reported as ``None``, and
collaborator failures pass through untouched. The classes below belong to
the configuration layer that feeds the in-memory coordinators.
"""

from __future__ import annotations

from typing import Any, Optional


class BridgeError(Exception):
    """Base exception for all modbox errors.

    Attributes:
        message: What went wrong
        details: Context for the failure, rendered as ``key=value`` pairs
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in sorted(self.details.items()))
        return f"{self.message} [{context}]"


class ConfigLoadError(BridgeError):
    """Error reading a configuration file.

    Raised when:
    - YAML syntax is invalid
    - The document root is not a mapping
    - A known section has the wrong shape
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, details)
        self.path = path
        if path:
            self.details["path"] = path
