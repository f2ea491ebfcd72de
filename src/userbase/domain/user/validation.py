"""Field validation for user data.

Each validator inspects a single field and returns a ``FieldViolation`` or
``None``. Validators never raise; ``ensure_valid`` composes them and raises
``UserValidationError`` for the first violation found, before any
persistence call is attempted.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from userbase.domain.user.exceptions import UserValidationError

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100

# local@label.label.tld; the TLD is alphabetic or an IDNA (xn--) label.
# Used with fullmatch, so trailing newlines are rejected.
_EMAIL_LOCAL = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~.-]+"
_EMAIL_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
_EMAIL_TLD = r"(?:[A-Za-z]{2,}|xn--[A-Za-z0-9-]+)"
EMAIL_PATTERN = re.compile(rf"{_EMAIL_LOCAL}@(?:{_EMAIL_LABEL}\.)+{_EMAIL_TLD}")


@dataclass(frozen=True)
class FieldViolation:
    """A single failed field constraint."""

    field: str
    reason: str

    def to_error(self) -> UserValidationError:
        return UserValidationError(self.field, self.reason)


def _check_text(field: str, value: object, max_length: int) -> FieldViolation | None:
    if value is None:
        return FieldViolation(field, "is required")
    if not isinstance(value, str):
        return FieldViolation(field, "must be a string")
    if not value.strip():
        return FieldViolation(field, "must not be empty")
    if len(value) > max_length:
        return FieldViolation(
            field,
            f"must be at most {max_length} characters",
        )
    return None


def validate_name(value: object) -> FieldViolation | None:
    """Check that a name is a non-empty string of at most 100 characters."""
    return _check_text("name", value, NAME_MAX_LENGTH)


def validate_email(value: object) -> FieldViolation | None:
    """Check that an email is non-empty, at most 100 chars and well-formed."""
    violation = _check_text("email", value, EMAIL_MAX_LENGTH)
    if violation is not None:
        return violation
    if not EMAIL_PATTERN.fullmatch(value):  # type: ignore[arg-type]
        return FieldViolation("email", "must be a valid email address")
    return None


FIELD_VALIDATORS: dict[str, Callable[[object], FieldViolation | None]] = {
    "name": validate_name,
    "email": validate_email,
}


def collect_violations(fields: Mapping[str, object]) -> list[FieldViolation]:
    """Run the validator of every supplied field, in declaration order."""
    violations = []
    for field, validator in FIELD_VALIDATORS.items():
        if field not in fields:
            continue
        violation = validator(fields[field])
        if violation is not None:
            violations.append(violation)
    return violations


def ensure_valid(fields: Mapping[str, object]) -> None:
    """Raise ``UserValidationError`` for the first invalid field, if any."""
    violations = collect_violations(fields)
    if violations:
        raise violations[0].to_error()
