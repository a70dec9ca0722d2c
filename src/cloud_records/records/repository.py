"""Container registry repository record."""

from dataclasses import dataclass

from cloud_records.enums import EncryptionType, ImageTagMutability
from cloud_records.models import Violation
from cloud_records.records.base import Record, require_choice, require_name
from cloud_records.settings import RepositoryDefaults, get_settings


@dataclass
class RepositoryRecord(Record):
    """A simplified ECR repository."""

    name: str
    image_scanning_enabled: bool = False
    image_tag_mutability: str = ImageTagMutability.MUTABLE
    encryption_type: str = EncryptionType.AES256

    @classmethod
    def from_settings(
        cls, name: str, defaults: RepositoryDefaults | None = None
    ) -> "RepositoryRecord":
        """Create a repository using configured defaults instead of the built-in ones."""
        if defaults is None:
            defaults = get_settings().repository
        return cls(
            name,
            image_scanning_enabled=defaults.image_scanning_enabled,
            image_tag_mutability=defaults.image_tag_mutability,
            encryption_type=defaults.encryption_type,
        )

    def enable_image_scanning(self) -> None:
        """Turn on scan-on-push for the repository."""
        self.image_scanning_enabled = True

    def set_image_tag_mutability(self, mutability: str) -> bool:
        """Set the tag mutability, rejecting anything but MUTABLE or IMMUTABLE."""
        return self._set_choice("image_tag_mutability", mutability, ImageTagMutability)

    def set_encryption_type(self, encryption_type: str) -> bool:
        """Set the encryption type, rejecting anything but AES256 or KMS."""
        return self._set_choice("encryption_type", encryption_type, EncryptionType)

    def violations(self) -> list[Violation]:
        violations: list[Violation] = []
        require_name(violations, "name", self.name)
        require_choice(
            violations, "image_tag_mutability", self.image_tag_mutability, ImageTagMutability
        )
        require_choice(violations, "encryption_type", self.encryption_type, EncryptionType)
        return violations
