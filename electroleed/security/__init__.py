"""Request authentication (token gate) and path-based authorization."""

from electroleed.security.gate import authenticate_request, enforce_access, get_principal, require_principal
from electroleed.security.policy import ACCESS_RULES, AccessRule, check_access, match_rule

__all__ = [
    "ACCESS_RULES",
    "AccessRule",
    "authenticate_request",
    "check_access",
    "enforce_access",
    "get_principal",
    "match_rule",
    "require_principal",
]
