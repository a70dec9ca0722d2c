"""Cloud resource records."""

from cloud_records.records.autoscaling import AutoscalingGroupRecord
from cloud_records.records.base import Record
from cloud_records.records.repository import RepositoryRecord
from cloud_records.records.service import ServiceRecord

__all__ = [
    "AutoscalingGroupRecord",
    "Record",
    "RepositoryRecord",
    "ServiceRecord",
]
