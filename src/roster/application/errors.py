"""Failures raised by the directories. "Not found" on lookups is a None result, not an error."""

from dataclasses import dataclass


class RosterError(Exception):
    """Base class for directory failures."""


class NullArgumentError(RosterError, ValueError):
    """A required request object or id was not supplied."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None.")
        self.argument = argument


class InvalidArgumentError(RosterError, ValueError):
    """An argument was supplied but is not acceptable."""


@dataclass(frozen=True)
class FieldError:
    """One violated field rule."""

    field: str
    message: str


class ValidationError(InvalidArgumentError):
    """A request broke one or more field rules. field/message describe the first one."""

    def __init__(self, errors: list[FieldError]) -> None:
        if not errors:
            raise ValueError("ValidationError needs at least one FieldError.")
        super().__init__("; ".join(e.message for e in errors))
        self.errors = list(errors)

    @property
    def field(self) -> str:
        return self.errors[0].field

    @property
    def message(self) -> str:
        return self.errors[0].message


class DuplicateKeyError(InvalidArgumentError):
    """A Country with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Country name {name!r} already exists.")
        self.name = name


class NotFoundError(RosterError, LookupError):
    """An update targeted a record that does not exist."""

    def __init__(self, person_id: str | None) -> None:
        super().__init__(f"Person {person_id!r} does not exist.")
        self.person_id = person_id
