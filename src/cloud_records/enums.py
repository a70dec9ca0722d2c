"""Allowed values for enumerated record fields."""

from enum import StrEnum


class Choices(StrEnum):
    """Base for enumerated field values."""

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """Return the accepted raw string values."""
        return tuple(member.value for member in cls)


class HealthCheckType(Choices):
    """Health check source for an autoscaling group."""

    EC2 = "EC2"
    ELB = "ELB"


class ImageTagMutability(Choices):
    """Whether an image tag can be overwritten after push."""

    MUTABLE = "MUTABLE"
    IMMUTABLE = "IMMUTABLE"


class EncryptionType(Choices):
    """Encryption at rest for a registry repository."""

    AES256 = "AES256"
    KMS = "KMS"


class LaunchType(Choices):
    """Where the tasks of a service run."""

    FARGATE = "FARGATE"
    EC2 = "EC2"
    EXTERNAL = "EXTERNAL"


class NetworkMode(Choices):
    """Container networking strategy of a service."""

    AWSVPC = "awsvpc"
    BRIDGE = "bridge"
    HOST = "host"
    NONE = "none"
