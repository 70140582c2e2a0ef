"""
Access policy module.

Pure authorization rules over roles, access levels and ownership.

Public API:
- decide / require: Evaluate / enforce a decision
- Operation, Principal, Allow, Deny, Decision: Policy types
- AccessDeniedError: Raised by require() on Deny
"""

from .models import Operation, Principal, OwnedResource, EmailScope, Allow, Deny, Decision
from .policy import decide, require, ALLOW
from .exceptions import AccessDeniedError

__all__ = [
    "Operation",
    "Principal",
    "OwnedResource",
    "EmailScope",
    "Allow",
    "Deny",
    "Decision",
    "decide",
    "require",
    "ALLOW",
    "AccessDeniedError",
]
