"""Validation behaviour shared by every record."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from cloud_records.enums import Choices
from cloud_records.errors import RecordValidationError
from cloud_records.models import Violation

logger = logging.getLogger(__name__)


class Record(ABC):
    """Base class for records that report their own invariant violations.

    Subclasses implement ``violations``; ``validate`` and ``ensure_valid`` are
    derived from it and never mutate the record.
    """

    name: str

    @abstractmethod
    def violations(self) -> list[Violation]:
        """Return every invariant the record currently breaks."""
        raise NotImplementedError

    def validate(self) -> bool:
        """Return true when the record satisfies all of its invariants."""
        violations = self.violations()
        if violations:
            logger.debug(
                f"{type(self).__name__} {self.name!r} failed validation: "
                + "; ".join(str(violation) for violation in violations)
            )
        return not violations

    def ensure_valid(self) -> None:
        """Raise when the record is not valid.

        Raises:
            RecordValidationError: The record breaks at least one invariant.
        """
        violations = self.violations()
        if violations:
            raise RecordValidationError(self.name, violations)

    def _set_choice(self, attribute: str, value: Any, choices: type[Choices]) -> bool:
        if value not in choices.values():
            logger.warning(
                f"Rejected {attribute}={value!r} for {self.name!r}; "
                f"expected one of {', '.join(choices.values())}"
            )
            return False
        setattr(self, attribute, choices(value))
        return True


def require_name(violations: list[Violation], attribute: str, value: str) -> None:
    """Record a violation when a name-like field is empty."""
    if not value:
        violations.append(Violation(field=attribute, message="must not be empty", value=value))


def require_choice(
    violations: list[Violation], attribute: str, value: Any, choices: type[Choices]
) -> None:
    """Record a violation when a field is outside its allowed values."""
    if value not in choices.values():
        violations.append(
            Violation(
                field=attribute,
                message=f"must be one of {', '.join(choices.values())}",
                value=value,
            )
        )
