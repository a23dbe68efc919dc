"""
Plan data models.

A plan is an ordered, non-empty tuple of entries plus a cursor marking the
current one. The cursor is a tagged value: either an index into the entries
or one of the two sentinels an acyclic plan can fall into when it is moved
past either end.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..errors import EmptyPlanError, PlanStateError


class CursorKind(str, Enum):
    """Cursor variants."""
    INDEX = "index"
    BEFORE_START = "before_start"
    AFTER_END = "after_end"


class Direction(str, Enum):
    """Direction of a cursor move."""
    ADVANCE = "advance"
    RETREAT = "retreat"


@dataclass(frozen=True)
class Entry:
    """A single titled entry in a plan."""
    title: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("entry title must not be empty")


@dataclass(frozen=True)
class Cursor:
    """Position of a plan: Index(i), BeforeStart or AfterEnd."""

    kind: CursorKind
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind == CursorKind.INDEX:
            if not isinstance(self.index, int) or isinstance(self.index, bool) or self.index < 0:
                raise PlanStateError(
                    f"index cursor needs a non-negative integer, got {self.index!r}",
                    cursor=repr(self.index)
                )
        elif self.index is not None:
            raise PlanStateError(
                f"{self.kind.value} cursor cannot carry an index",
                cursor=self.kind.value
            )

    @classmethod
    def at(cls, index: int) -> "Cursor":
        return cls(CursorKind.INDEX, index)

    @classmethod
    def before_start(cls) -> "Cursor":
        return cls(CursorKind.BEFORE_START)

    @classmethod
    def after_end(cls) -> "Cursor":
        return cls(CursorKind.AFTER_END)

    @property
    def is_index(self) -> bool:
        return self.kind == CursorKind.INDEX

    @property
    def is_before_start(self) -> bool:
        return self.kind == CursorKind.BEFORE_START

    @property
    def is_after_end(self) -> bool:
        return self.kind == CursorKind.AFTER_END

    def label(self) -> str:
        """Short human label: 1-based entry number, "start" or "end"."""
        if self.kind == CursorKind.BEFORE_START:
            return "start"
        if self.kind == CursorKind.AFTER_END:
            return "end"
        return str(self.index + 1)

    def __str__(self) -> str:
        if self.kind == CursorKind.INDEX:
            return f"Index({self.index})"
        if self.kind == CursorKind.BEFORE_START:
            return "BeforeStart"
        return "AfterEnd"


@dataclass
class Plan:
    """
    An ordered list of entries with a cyclicity flag and a cursor.

    Entries are fixed at construction. Only the cursor, and through
    ``navigator.set_cyclic`` the cyclic flag, change afterwards.
    """

    name: str
    entries: tuple[Entry, ...]
    cyclic: bool = False
    cursor: Cursor = field(default_factory=lambda: Cursor.at(0))

    def __post_init__(self) -> None:
        self.entries = tuple(self.entries)
        if not self.entries:
            raise EmptyPlanError(context={"plan_name": self.name})
        self.check_cursor(self.cursor)

    def __len__(self) -> int:
        return len(self.entries)

    def check_cursor(self, cursor: Cursor) -> None:
        """Raise PlanStateError if the cursor is not valid for this plan."""
        if cursor.is_index:
            if cursor.index >= len(self.entries):
                raise PlanStateError(
                    f"cursor {cursor} is out of range for {len(self.entries)} entries",
                    cursor=str(cursor),
                    cyclic=self.cyclic
                )
        elif self.cyclic:
            raise PlanStateError(
                f"cyclic plan cannot sit at {cursor}",
                cursor=str(cursor),
                cyclic=self.cyclic
            )

    @property
    def current_entry(self) -> Optional[Entry]:
        """Entry under the cursor, or None at a sentinel."""
        if self.cursor.is_index:
            return self.entries[self.cursor.index]
        return None

    @property
    def is_ended(self) -> bool:
        return self.cursor.is_after_end

    @property
    def is_before_start(self) -> bool:
        return self.cursor.is_before_start

    def upcoming(self, count: int) -> list[Entry]:
        """
        The current entry followed by up to ``count - 1`` entries after it.

        Cyclic plans wrap around, but no entry is returned twice. Empty when
        the cursor is at a sentinel.
        """
        if not self.cursor.is_index or count <= 0:
            return []

        start = self.cursor.index
        if self.cyclic:
            limit = min(count, len(self.entries))
            return [self.entries[(start + n) % len(self.entries)] for n in range(limit)]
        return list(self.entries[start:start + count])

    def position_label(self) -> str:
        """Progress summary such as "entry 2 of 5" or "end of plan"."""
        if self.cursor.is_after_end:
            return "end of plan"
        if self.cursor.is_before_start:
            return "before start"
        return f"entry {self.cursor.index + 1} of {len(self.entries)}"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one advance or retreat call."""

    plan_name: str
    direction: Direction
    steps: int
    previous: Cursor
    current: Cursor
    entry: Optional[Entry] = None

    @property
    def changed(self) -> bool:
        return self.previous != self.current

    def describe(self) -> str:
        if self.current.is_after_end:
            return "now at AfterEnd"
        if self.current.is_before_start:
            return "now at BeforeStart"
        return f"now at entry titled {self.entry.title} (index {self.current.index})"
