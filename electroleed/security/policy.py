"""
Path-based authorization: a fixed table of URL patterns and the role each one requires.

Patterns ending in "/**" cover the prefix itself and everything below it;
other patterns match one exact path. The longest matching pattern wins.
Paths matched by no rule need an authenticated principal of any role.
"""

from dataclasses import dataclass

from electroleed.core.errors import Forbidden, Unauthorized
from electroleed.models.role import Role
from electroleed.schemas.auth import Principal


@dataclass(frozen=True)
class AccessRule:
    """pattern -> required role; role None means public."""

    pattern: str
    role: Role | None = None

    @property
    def is_public(self) -> bool:
        return self.role is None

    @property
    def is_prefix(self) -> bool:
        return self.pattern.endswith("/**")

    def matches(self, path: str) -> bool:
        if self.is_prefix:
            base = self.pattern[:-3]
            return path == base or path.startswith(base + "/")
        return path == self.pattern

    @property
    def specificity(self) -> int:
        return len(self.pattern[:-3]) if self.is_prefix else len(self.pattern) + 1


ACCESS_RULES: tuple[AccessRule, ...] = (
    AccessRule("/"),
    AccessRule("/favicon.ico"),
    AccessRule("/icons/**"),
    AccessRule("/static/**"),
    AccessRule("/web/auth/login"),
    AccessRule("/web/auth/about_author"),
    AccessRule("/auth/login"),
    AccessRule("/health/**"),
    AccessRule("/docs"),
    AccessRule("/redoc"),
    AccessRule("/openapi.json"),
    AccessRule("/admin/**", Role.ADMIN),
    AccessRule("/estimator/**", Role.ESTIMATOR),
    AccessRule("/scheduler/**", Role.SCHEDULER),
    AccessRule("/project_manager/**", Role.PROJECT_MANAGER),
    AccessRule("/project_member/**", Role.PROJECT_MEMBER),
)


def match_rule(path: str, rules: tuple[AccessRule, ...] = ACCESS_RULES) -> AccessRule | None:
    """Return the most specific rule matching path, or None."""
    matching = [rule for rule in rules if rule.matches(path)]
    if not matching:
        return None
    return max(matching, key=lambda rule: rule.specificity)


def check_access(
    path: str,
    principal: Principal | None,
    rules: tuple[AccessRule, ...] = ACCESS_RULES,
) -> None:
    """
    Allow or deny a request for path.
    Raises Unauthorized when a principal is needed but absent, Forbidden on role mismatch.
    """
    rule = match_rule(path, rules)
    if rule is not None and rule.is_public:
        return
    if principal is None:
        raise Unauthorized()
    if rule is not None and principal.role != rule.role:
        raise Forbidden(f"Access to {rule.pattern} requires role {rule.role.value}")
