"""Configurable defaults for records built with ``from_settings``."""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cloud_records.config.paths import env_path
from cloud_records.enums import (
    EncryptionType,
    HealthCheckType,
    ImageTagMutability,
    LaunchType,
    NetworkMode,
)

ENV_FILE_PATH = str(env_path())


class AutoscalingDefaults(BaseSettings):
    """Defaults applied to new autoscaling group records."""

    model_config = SettingsConfigDict(env_prefix="ASG_", env_file=ENV_FILE_PATH, extra="ignore")

    health_check_type: HealthCheckType = Field(
        default=HealthCheckType.ELB, description="Health check source"
    )
    health_check_grace_period: int = Field(
        default=300, gt=0, description="Seconds before the first health check"
    )


class RepositoryDefaults(BaseSettings):
    """Defaults applied to new registry repository records."""

    model_config = SettingsConfigDict(env_prefix="ECR_", env_file=ENV_FILE_PATH, extra="ignore")

    image_scanning_enabled: bool = Field(default=False, description="Scan images on push")
    image_tag_mutability: ImageTagMutability = Field(
        default=ImageTagMutability.MUTABLE, description="Tag mutability"
    )
    encryption_type: EncryptionType = Field(
        default=EncryptionType.AES256, description="Encryption at rest"
    )


class ServiceDefaults(BaseSettings):
    """Defaults applied to new container service records."""

    model_config = SettingsConfigDict(env_prefix="ECS_", env_file=ENV_FILE_PATH, extra="ignore")

    launch_type: LaunchType = Field(default=LaunchType.FARGATE, description="Launch type")
    network_mode: NetworkMode = Field(default=NetworkMode.AWSVPC, description="Network mode")
    health_check_path: str = Field(default="/health", description="Health check HTTP path")


class RecordSettings(BaseModel):
    """All record defaults."""

    autoscaling: AutoscalingDefaults
    repository: RepositoryDefaults
    service: ServiceDefaults


@lru_cache(maxsize=1)
def get_settings() -> RecordSettings:
    """Load and return the record defaults.

    Each section is populated from its own environment prefix and the user
    env file. The result is cached; call ``get_settings.cache_clear()`` to
    pick up environment changes.
    """
    return RecordSettings(
        autoscaling=AutoscalingDefaults(),
        repository=RepositoryDefaults(),
        service=ServiceDefaults(),
    )
