from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator, model_validator


MAX_TAGS = 12
MAX_TAG_LABEL_LEN = 12


class Category(str, Enum):
    """Canonical categories produced by automatic classification."""

    LIFE = "生活/购物"
    WORK = "本业工作"
    VENTURE = "拉面店创业"
    TECH = "Web开发学习"


DEFAULT_CATEGORY = Category.WORK


class TaskKind(str, Enum):
    ACTIONABLE = "actionable"
    IDEA = "idea"


class TaskCandidate(BaseModel):
    id: str = Field(..., min_length=1)
    kind: TaskKind = TaskKind.ACTIONABLE
    text: str = Field(..., min_length=1)
    category: Optional[str] = None
    anchor_timestamp: datetime

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("text must not be blank")
        return v2

    @model_validator(mode="after")
    def ideas_have_no_category(self) -> "TaskCandidate":
        # only actionable items carry a category
        if self.kind == TaskKind.IDEA and self.category is not None:
            self.category = None
        return self

    def with_kind(self, kind: TaskKind) -> TaskCandidate:
        if kind == TaskKind.IDEA:
            return self.model_copy(update={"kind": kind, "category": None})
        return self.model_copy(
            update={"kind": kind, "category": self.category or DEFAULT_CATEGORY.value}
        )

    def with_category(self, label: str) -> TaskCandidate:
        label = label.strip()
        if not label:
            raise ValueError("category label must not be blank")
        return self.model_copy(update={"kind": TaskKind.ACTIONABLE, "category": label})


class Task(BaseModel):
    """A confirmed item. Only actionable tasks carry a category and a completed flag."""
    id: str = Field(..., min_length=1)
    kind: TaskKind = TaskKind.ACTIONABLE
    text: str = Field(..., min_length=1)
    category: Optional[str] = None
    completed: Optional[bool] = None
    created_at: datetime

    @model_validator(mode="after")
    def ideas_are_bare(self) -> "Task":
        if self.kind == TaskKind.IDEA:
            self.category = None
            self.completed = None
        elif self.completed is None:
            self.completed = False
        return self

    @property
    def date_key(self) -> str:
        return self.created_at.date().isoformat()

    @classmethod
    def from_candidate(cls, candidate: TaskCandidate) -> Task:
        return cls(
            id=candidate.id,
            kind=candidate.kind,
            text=candidate.text,
            category=candidate.category,
            completed=False if candidate.kind == TaskKind.ACTIONABLE else None,
            created_at=candidate.anchor_timestamp,
        )

    def toggled(self) -> Task:
        if self.kind != TaskKind.ACTIONABLE:
            raise ValueError("only actionable tasks can be completed")
        return self.model_copy(update={"completed": not self.completed})


class UserTag(BaseModel):
    id: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1, max_length=MAX_TAG_LABEL_LEN)
    builtin: bool = False

    @field_validator("label", mode="before")
    @classmethod
    def label_stripped(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


BUILTIN_TAG_IDS = {
    Category.LIFE: "life",
    Category.WORK: "work",
    Category.VENTURE: "ramen",
    Category.TECH: "webdev",
}


def default_tags() -> List[UserTag]:
    return [
        UserTag(id=tag_id, label=category.value, builtin=True)
        for category, tag_id in BUILTIN_TAG_IDS.items()
    ]


class TagSetError(ValueError):
    pass


class TagSet(BaseModel):
    """
    User-editable category labels. Starts with the four built-ins,
    holds at most MAX_TAGS and never becomes empty.
    """
    tags: List[UserTag] = Field(default_factory=default_tags)

    @field_validator("tags")
    @classmethod
    def tags_within_bounds(cls, v: List[UserTag]) -> List[UserTag]:
        if not v:
            raise ValueError("tag set must not be empty")
        if len(v) > MAX_TAGS:
            raise ValueError(f"tag set holds at most {MAX_TAGS} labels")
        return v

    def labels(self) -> List[str]:
        return [t.label for t in self.tags]

    def get(self, tag_id: str) -> UserTag:
        for t in self.tags:
            if t.id == tag_id:
                return t
        raise TagSetError(f"unknown tag id: {tag_id}")

    def add(self, label: str) -> UserTag:
        label = label.strip()
        if not label:
            raise TagSetError("label must not be blank")
        for t in self.tags:
            if t.label == label:
                return t
        if len(self.tags) >= MAX_TAGS:
            raise TagSetError(f"tag set is full ({MAX_TAGS} labels)")
        tag = UserTag(id=f"custom-{uuid.uuid4().hex[:12]}", label=label)
        self.tags.append(tag)
        return tag

    def rename(self, tag_id: str, label: str) -> UserTag:
        current = self.get(tag_id)
        label = label.strip()
        if not label:
            raise TagSetError("label must not be blank")
        if any(t.label == label and t.id != tag_id for t in self.tags):
            raise TagSetError(f"label already exists: {label}")
        renamed = UserTag(id=current.id, label=label, builtin=current.builtin)
        self.tags[self.tags.index(current)] = renamed
        return renamed

    def remove(self, tag_id: str) -> UserTag:
        current = self.get(tag_id)
        if len(self.tags) <= 1:
            raise TagSetError("at least one label must remain")
        self.tags.remove(current)
        return current

    def resolve(self, category: Category | str) -> UserTag:
        """Map a canonical category to the user's label with the same display string.

        Falls back to the first label when the user renamed or removed it.
        """
        label = category.value if isinstance(category, Category) else category
        for t in self.tags:
            if t.label == label:
                return t
        return self.tags[0]


CANONICAL_LABELS = frozenset(c.value for c in Category)


def confirm(
    candidates: List[TaskCandidate], tag_set: Optional[TagSet] = None
) -> List[Task]:
    """Turn a reviewed batch into committed tasks.

    Ideas lose any category; actionable items without one get the default.
    With a tag set, every category must be one of its labels. A canonical
    category the user renamed or removed is mapped through `TagSet.resolve`.
    """
    tasks = []
    for c in candidates:
        c = c.with_kind(c.kind)
        if tag_set is not None and c.category is not None and c.category not in tag_set.labels():
            if c.category not in CANONICAL_LABELS:
                raise TagSetError(f"unknown category label: {c.category}")
            c = c.with_category(tag_set.resolve(c.category).label)
        tasks.append(Task.from_candidate(c))
    return tasks
