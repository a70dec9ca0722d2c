"""Container service record."""

import logging
from dataclasses import dataclass

from cloud_records.enums import LaunchType, NetworkMode
from cloud_records.models import Violation
from cloud_records.records.base import Record, require_choice, require_name
from cloud_records.settings import ServiceDefaults, get_settings

logger = logging.getLogger(__name__)


@dataclass
class ServiceRecord(Record):
    """A simplified ECS service.

    A disabled service is never valid, whatever its other fields hold.
    """

    name: str
    cluster: str
    desired_count: int
    launch_type: str = LaunchType.FARGATE
    network_mode: str = NetworkMode.AWSVPC
    health_check_path: str = "/health"
    enabled: bool = True

    @classmethod
    def from_settings(
        cls,
        name: str,
        cluster: str,
        desired_count: int,
        defaults: ServiceDefaults | None = None,
    ) -> "ServiceRecord":
        """Create an enabled service using configured defaults instead of the built-in ones."""
        if defaults is None:
            defaults = get_settings().service
        return cls(
            name,
            cluster,
            desired_count,
            launch_type=defaults.launch_type,
            network_mode=defaults.network_mode,
            health_check_path=defaults.health_check_path,
        )

    def scale(self, count: int) -> bool:
        """Update the desired task count.

        Args:
            count: New desired count; zero is allowed.

        Returns:
            False for a negative count, in which case nothing changes.
        """
        if count < 0:
            logger.warning(f"Rejected scale to {count} for service {self.name!r}")
            return False
        self.desired_count = count
        return True

    def set_launch_type(self, launch_type: str) -> bool:
        """Set the launch type, rejecting anything but FARGATE, EC2 or EXTERNAL."""
        return self._set_choice("launch_type", launch_type, LaunchType)

    def set_network_mode(self, network_mode: str) -> bool:
        """Set the network mode, rejecting unknown modes."""
        return self._set_choice("network_mode", network_mode, NetworkMode)

    def violations(self) -> list[Violation]:
        """Return the naming, count, enum and enablement invariants the service breaks."""
        violations: list[Violation] = []
        require_name(violations, "name", self.name)
        require_name(violations, "cluster", self.cluster)
        if self.desired_count < 0:
            violations.append(
                Violation(
                    field="desired_count", message="must be at least 0", value=self.desired_count
                )
            )
        require_choice(violations, "launch_type", self.launch_type, LaunchType)
        require_choice(violations, "network_mode", self.network_mode, NetworkMode)
        if not self.enabled:
            violations.append(
                Violation(field="enabled", message="service must be enabled", value=self.enabled)
            )
        return violations
