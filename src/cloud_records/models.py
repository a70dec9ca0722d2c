"""Data models shared by the records."""

from typing import Any

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """A single failed invariant on a record."""

    field: str = Field(description="Name of the offending field")
    message: str = Field(description="What the field must satisfy")
    value: Any = Field(default=None, description="The value that was rejected")

    def __str__(self) -> str:
        return f"{self.field}: {self.message} (got {self.value!r})"
