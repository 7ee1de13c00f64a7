from .manager import PermissionManager
from .result import ALLOWED, DENIED, Allowed, Denied, DeniedWithMessage, PermissionResult

__all__ = [
    "PermissionManager",
    "PermissionResult",
    "Allowed",
    "Denied",
    "DeniedWithMessage",
    "ALLOWED",
    "DENIED",
]
