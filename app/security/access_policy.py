"""Role-directional access control between school members. No FastAPI."""

from enum import Enum

from app.domain.exceptions import ForbiddenError
from app.domain.models.user import ROLE_RESOURCE_KIND, Caller, ResourceKind, Role


class AccessDecision(str, Enum):
    ALLOWED = "ALLOWED"
    FORBIDDEN = "FORBIDDEN"


class AccessRule(Enum):
    SELF_ONLY = "SELF_ONLY"
    ANY = "ANY"


# Access matrix:
# Caller    Student record   Teacher record
# STUDENT   self only        ✗
# TEACHER   any              self only
#
# Pairs absent from the table are denied.

_ACCESS_RULES: dict[tuple[Role, ResourceKind], AccessRule] = {
    (Role.STUDENT, ResourceKind.STUDENT): AccessRule.SELF_ONLY,
    (Role.TEACHER, ResourceKind.TEACHER): AccessRule.SELF_ONLY,
    (Role.TEACHER, ResourceKind.STUDENT): AccessRule.ANY,
}


class AccessPolicy:
    """Decide whether a caller may read a student or teacher record."""

    def __init__(self, rules: dict[tuple[Role, ResourceKind], AccessRule] | None = None) -> None:
        self._rules = dict(_ACCESS_RULES if rules is None else rules)

    def decide(self, caller: Caller, kind: ResourceKind, target_id: str) -> AccessDecision:
        rule = self._rules.get((caller.role, kind))
        if rule is AccessRule.ANY:
            return AccessDecision.ALLOWED
        if rule is AccessRule.SELF_ONLY:
            owns_kind = ROLE_RESOURCE_KIND.get(caller.role) is kind
            if owns_kind and caller.user_id == target_id:
                return AccessDecision.ALLOWED
        return AccessDecision.FORBIDDEN

    def check_access(self, caller: Caller, kind: ResourceKind, target_id: str) -> None:
        """Raises ForbiddenError if caller may not read the target record."""
        if self.decide(caller, kind, target_id) is not AccessDecision.ALLOWED:
            raise ForbiddenError("Access is denied")
