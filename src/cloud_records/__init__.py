"""In-memory models and validation for cloud resource descriptors."""

from cloud_records.enums import (
    EncryptionType,
    HealthCheckType,
    ImageTagMutability,
    LaunchType,
    NetworkMode,
)
from cloud_records.errors import RecordValidationError
from cloud_records.models import Violation
from cloud_records.records import (
    AutoscalingGroupRecord,
    Record,
    RepositoryRecord,
    ServiceRecord,
)
from cloud_records.settings import RecordSettings, get_settings

__all__ = [
    "AutoscalingGroupRecord",
    "EncryptionType",
    "HealthCheckType",
    "ImageTagMutability",
    "LaunchType",
    "NetworkMode",
    "Record",
    "RecordSettings",
    "RecordValidationError",
    "RepositoryRecord",
    "ServiceRecord",
    "Violation",
    "get_settings",
]
