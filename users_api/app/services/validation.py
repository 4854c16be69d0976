"""
Field validation for user payloads.

Rules are an explicit, ordered list of ``(field, predicate, message)``
entries.  Every rule is evaluated, so a payload with several problems
reports all of them, Email rules first and then Name.
"""

import re
from typing import Callable, List, NamedTuple, Optional

from ..schemas.user import UserPayload

# local-part@domain, no whitespace, at least one dot in the domain and
# no empty domain labels.
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s.]+(?:\.[^@\s.]+)+$")

EMAIL_REQUIRED = "Email is required."
EMAIL_INVALID = "Email is not valid."
NAME_REQUIRED = "Name is required."


def is_present(value: Optional[str]) -> bool:
    """Return True for a string that is not empty or whitespace-only."""
    return value is not None and value.strip() != ""


def is_email(value: Optional[str]) -> bool:
    # An absent email is reported by the required rule only.
    if not is_present(value):
        return True
    return EMAIL_PATTERN.match(value) is not None


class ValidationRule(NamedTuple):
    field: str
    check: Callable[[Optional[str]], bool]
    message: str


USER_RULES = (
    ValidationRule("email", is_present, EMAIL_REQUIRED),
    ValidationRule("email", is_email, EMAIL_INVALID),
    ValidationRule("name", is_present, NAME_REQUIRED),
)


def validate_user(payload: UserPayload) -> List[str]:
    """Apply :data:`USER_RULES` to ``payload``.

    Returns the messages of the failed rules in rule order; an empty
    list means the payload is valid.  Has no side effects.
    """
    return [rule.message for rule in USER_RULES if not rule.check(getattr(payload, rule.field))]
