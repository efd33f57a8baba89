"""Task data models."""

from pydantic import BaseModel, Field

STATUS_COMPLETED = "Completed"
STATUS_PENDING = "Pending"


class Task(BaseModel):
    """A single tracked task.

    Attributes:
        id: Positive identifier, unique within the task file
        description: Free-form task text
        completed: Whether the task has been done
    """

    id: int = Field(gt=0)
    description: str
    completed: bool = Field(default=False)

    @property
    def status(self) -> str:
        """Human-readable completion status."""
        return STATUS_COMPLETED if self.completed else STATUS_PENDING

    @property
    def search_text(self) -> str:
        """Subject string the fuzzy search matches against."""
        return f"{self.id} {self.description} {self.status}"
