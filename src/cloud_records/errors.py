"""Exceptions raised by cloud records."""

from cloud_records.models import Violation


class RecordValidationError(ValueError):
    """Raised by ``ensure_valid`` when a record breaks one of its invariants."""

    def __init__(self, record_name: str, violations: list[Violation]) -> None:
        """Build the error from the failing record.

        Args:
            record_name: Name of the record that failed validation.
            violations: Every invariant the record breaks.
        """
        self.record_name = record_name
        self.violations = violations
        details = "; ".join(str(violation) for violation in violations)
        super().__init__(f"Invalid record {record_name!r}: {details}")
