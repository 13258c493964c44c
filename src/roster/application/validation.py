"""Field rules for Person mutation requests.

Rules are checked before any domain object is built. Every violation is
collected; ValidationError exposes the first one as field/message.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

from roster.application.dto import PersonAddRequest, PersonUpdateRequest
from roster.application.errors import FieldError, ValidationError
from roster.domain import GenderOptions


def is_valid_email(value: str | None) -> bool:
    """True when value has a syntactically valid local@domain shape. Deliverability is not checked."""
    if not value or not str(value).strip():
        return False
    try:
        validate_email(str(value).strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _blank_or_valid_email(value: Any) -> bool:
    # Blank emails are reported by the required rule only.
    return not _present(value) or is_valid_email(value)


def _blank_or_known_gender(value: Any) -> bool:
    # Blank genders are reported by the required rule only.
    return not _present(value) or GenderOptions.parse(value) is not None


@dataclass(frozen=True)
class FieldRule:
    field: str
    check: Callable[[Any], bool]
    message: str


_COMMON_RULES = (
    FieldRule("name", _present, "Person name can't be blank"),
    FieldRule("email", _present, "Email can't be blank"),
    FieldRule("email", _blank_or_valid_email, "Email value should be a valid email"),
)

ADD_RULES = _COMMON_RULES + (
    FieldRule("gender", _present, "Gender can't be blank"),
    FieldRule("gender", _blank_or_known_gender, "Gender should be one of Male, Female, Other"),
    FieldRule("country_id", _present, "Please select a country"),
)

UPDATE_RULES = _COMMON_RULES


def collect_errors(request: object, rules: tuple[FieldRule, ...]) -> list[FieldError]:
    """Return every rule the request breaks, in rule order."""
    return [
        FieldError(field=rule.field, message=rule.message)
        for rule in rules
        if not rule.check(getattr(request, rule.field, None))
    ]


def _raise_if_invalid(request: object, rules: tuple[FieldRule, ...]) -> None:
    errors = collect_errors(request, rules)
    if errors:
        raise ValidationError(errors)


def validate_add_request(request: PersonAddRequest) -> None:
    _raise_if_invalid(request, ADD_RULES)


def validate_update_request(request: PersonUpdateRequest) -> None:
    _raise_if_invalid(request, UPDATE_RULES)
