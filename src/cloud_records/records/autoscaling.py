"""Autoscaling group record."""

import logging
from dataclasses import dataclass

from cloud_records.enums import HealthCheckType
from cloud_records.models import Violation
from cloud_records.records.base import Record
from cloud_records.settings import AutoscalingDefaults, get_settings

logger = logging.getLogger(__name__)


@dataclass
class AutoscalingGroupRecord(Record):
    """A simplified EC2 autoscaling group."""

    name: str
    min_size: int
    max_size: int
    desired_capacity: int
    health_check_type: str = HealthCheckType.ELB
    health_check_grace_period: int = 300

    @classmethod
    def from_settings(
        cls,
        name: str,
        min_size: int,
        max_size: int,
        desired_capacity: int,
        defaults: AutoscalingDefaults | None = None,
    ) -> "AutoscalingGroupRecord":
        """Create a group using configured defaults instead of the built-in ones.

        Args:
            name: Group name.
            min_size: Minimum number of instances.
            max_size: Maximum number of instances.
            desired_capacity: Instances the group should run.
            defaults: Defaults to apply; loaded with ``get_settings`` when omitted.

        Raises:
            pydantic.ValidationError: The configured defaults are invalid.
        """
        if defaults is None:
            defaults = get_settings().autoscaling
        return cls(
            name,
            min_size,
            max_size,
            desired_capacity,
            health_check_type=defaults.health_check_type,
            health_check_grace_period=defaults.health_check_grace_period,
        )

    def set_desired_capacity(self, count: int) -> bool:
        """Move the desired capacity within the current size bounds.

        Args:
            count: New desired capacity.

        Returns:
            True when the capacity was updated, false when it lies outside
            ``[min_size, max_size]`` and the record was left unchanged.
        """
        if not self.min_size <= count <= self.max_size:
            logger.warning(
                f"Rejected desired_capacity={count} for {self.name!r}; "
                f"bounds are {self.min_size}..{self.max_size}"
            )
            return False
        self.desired_capacity = count
        return True

    def violations(self) -> list[Violation]:
        """Return the capacity and health check invariants the group breaks."""
        violations: list[Violation] = []
        if self.min_size < 0:
            violations.append(
                Violation(field="min_size", message="must be at least 0", value=self.min_size)
            )
        if self.max_size <= self.min_size:
            violations.append(
                Violation(
                    field="max_size",
                    message=f"must be greater than min_size ({self.min_size})",
                    value=self.max_size,
                )
            )
        if self.desired_capacity < self.min_size:
            violations.append(
                Violation(
                    field="desired_capacity",
                    message=f"must be at least min_size ({self.min_size})",
                    value=self.desired_capacity,
                )
            )
        if self.desired_capacity > self.max_size:
            violations.append(
                Violation(
                    field="desired_capacity",
                    message=f"must be at most max_size ({self.max_size})",
                    value=self.desired_capacity,
                )
            )
        if self.health_check_grace_period <= 0:
            violations.append(
                Violation(
                    field="health_check_grace_period",
                    message="must be positive",
                    value=self.health_check_grace_period,
                )
            )
        return violations
