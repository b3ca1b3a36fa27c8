# taskboard_app/models.py
from dataclasses import dataclass, field, replace
from typing import Optional

DEFAULT_CONTEXT_COLOR = '#3b82f6'


class _Missing:
    """Marks an update field that was not supplied by the client."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'MISSING'


MISSING = _Missing()


@dataclass(frozen=True)
class Context:
    id: int
    name: str
    color: str = DEFAULT_CONTEXT_COLOR


@dataclass(frozen=True)
class Task:
    id: int
    name: str
    description: str
    comments: Optional[str] = None
    context_id: Optional[int] = None


@dataclass(frozen=True)
class TaskWithContext:
    """A task together with its resolved context (None when unset or dangling)."""

    id: int
    name: str
    description: str
    comments: Optional[str]
    context_id: Optional[int]
    context: Optional[Context] = None

    @classmethod
    def from_task(cls, task, context=None):
        return cls(
            id=task.id,
            name=task.name,
            description=task.description,
            comments=task.comments,
            context_id=task.context_id,
            context=context,
        )


@dataclass(frozen=True)
class TaskUpdate:
    """
    Partial update for a task.

    Each field either holds the new value or MISSING, which leaves the stored
    value untouched. None is a real value for comments and context_id and
    clears them.
    """

    name: object = field(default=MISSING)
    description: object = field(default=MISSING)
    comments: object = field(default=MISSING)
    context_id: object = field(default=MISSING)

    @classmethod
    def from_data(cls, data):
        return cls(**{k: data[k] for k in ('name', 'description', 'comments', 'context_id') if k in data})

    def is_empty(self):
        return all(getattr(self, name) is MISSING for name in self.__dataclass_fields__)

    def apply_to(self, task):
        changes = {
            name: getattr(self, name)
            for name in self.__dataclass_fields__
            if getattr(self, name) is not MISSING
        }
        return replace(task, **changes)
