"""Tests for the container registry repository record."""

import logging

import pytest

from cloud_records import RecordValidationError, RepositoryRecord


def test_create_repository() -> None:
    """New repositories are unscanned, mutable and AES256 encrypted."""
    repo = RepositoryRecord("test-repo")

    assert repo.name == "test-repo"
    assert repo.image_scanning_enabled is False
    assert repo.image_tag_mutability == "MUTABLE"
    assert repo.encryption_type == "AES256"
    assert repo.validate() is True


def test_enable_image_scanning() -> None:
    """Enabling scanning flips the flag on."""
    repo = RepositoryRecord("test-repo")
    assert repo.image_scanning_enabled is False

    repo.enable_image_scanning()

    assert repo.image_scanning_enabled is True


@pytest.mark.parametrize(
    ("mutability", "should_succeed"),
    [
        pytest.param("MUTABLE", True, id="mutable"),
        pytest.param("IMMUTABLE", True, id="immutable"),
        pytest.param("INVALID", False, id="unknown value"),
        pytest.param("", False, id="empty string"),
        pytest.param("immutable", False, id="wrong case"),
    ],
)
def test_set_image_tag_mutability(mutability: str, should_succeed: bool) -> None:
    """Only the two known mutability values are accepted."""
    repo = RepositoryRecord("test-repo")
    repo.image_tag_mutability = "IMMUTABLE" if mutability == "MUTABLE" else "MUTABLE"
    original = repo.image_tag_mutability

    assert repo.set_image_tag_mutability(mutability) is should_succeed
    assert repo.image_tag_mutability == (mutability if should_succeed else original)


def test_rejected_mutability_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Rejected values are reported at warning level."""
    repo = RepositoryRecord("test-repo")

    with caplog.at_level(logging.WARNING, logger="cloud_records"):
        repo.set_image_tag_mutability("INVALID")

    assert "image_tag_mutability='INVALID'" in caplog.text


@pytest.mark.parametrize(
    ("encryption_type", "should_succeed"),
    [("KMS", True), ("AES256", True), ("INVALID", False), ("", False)],
)
def test_set_encryption_type(encryption_type: str, should_succeed: bool) -> None:
    """Only AES256 and KMS are accepted as encryption types."""
    repo = RepositoryRecord("test-repo")

    assert repo.set_encryption_type(encryption_type) is should_succeed
    assert repo.encryption_type == (encryption_type if should_succeed else "AES256")


@pytest.mark.parametrize(
    ("name", "mutability", "encryption_type", "is_valid"),
    [
        pytest.param("valid-repo", "MUTABLE", "AES256", True, id="valid"),
        pytest.param("kms-repo", "IMMUTABLE", "KMS", True, id="valid with KMS"),
        pytest.param("", "MUTABLE", "AES256", False, id="empty name"),
        pytest.param("invalid-repo", "MUTABLE", "INVALID", False, id="bad encryption"),
        pytest.param("invalid-repo", "SOMETIMES", "AES256", False, id="bad mutability"),
    ],
)
def test_repository_validation(
    name: str, mutability: str, encryption_type: str, is_valid: bool
) -> None:
    """Validation checks the name and both enumerated fields."""
    repo = RepositoryRecord(
        name, image_tag_mutability=mutability, encryption_type=encryption_type
    )

    assert repo.validate() is is_valid


def test_ensure_valid_reports_every_violation() -> None:
    """All failing fields are carried on the raised error."""
    repo = RepositoryRecord("", image_tag_mutability="SOMETIMES", encryption_type="NONE")

    with pytest.raises(RecordValidationError) as exc_info:
        repo.ensure_valid()

    assert [violation.field for violation in exc_info.value.violations] == [
        "name",
        "image_tag_mutability",
        "encryption_type",
    ]
