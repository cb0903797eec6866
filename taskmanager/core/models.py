"""
Domain models for task tracking.

These models represent tasks and paginated task listings independent of
how they are stored or transported.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Dict, Any
from enum import Enum


class TaskStatus(str, Enum):
    """Task workflow states."""
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @classmethod
    def from_db(cls, value: Optional[str]) -> Optional["TaskStatus"]:
        """Map a stored status column back to the enum (NULL stays None)."""
        if value is None:
            return None
        return cls(value)


@dataclass
class Task:
    """Represents a single active task."""
    id: str = ""
    title: str = ""
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[date] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value if self.status else None,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
        }


@dataclass
class TaskPage:
    """One page of active tasks ordered by due date."""
    items: List[Task] = field(default_factory=list)
    page: int = 0
    size: int = 0
    total: int = 0
    has_more: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        return {
            "tasks": [task.to_dict() for task in self.items],
            "hasMore": self.has_more,
            "total": self.total,
            "page": self.page,
            "size": self.size,
        }
