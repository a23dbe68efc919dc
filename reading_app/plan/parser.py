"""
Plain text plan format.

A plan file is a series of unindented lines, each the title of an entry.
A title may be followed directly by indented lines (any mix of spaces and
tabs) that form the entry's description:

    Genesis 1-3
        Creation and the fall
    Genesis 4-7
    Genesis 8-11
        The flood
        and Babel

Description lines are trimmed and joined with a single space. A blank line
closes the current entry, so a description must follow its title (or an
earlier description line) without a gap.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Optional

from ..errors import EmptyPlanError, LeadingDescriptionError
from ..logging.config import get_logger
from .models import Entry, Plan

logger = get_logger(__name__)

DESCRIPTION_SEPARATOR = " "
EXPORT_INDENT = "    "


class LineKind(str, Enum):
    """Classification of a single line of plan text."""
    BLANK = "blank"
    TITLE = "title"
    DESCRIPTION = "description"


def classify_line(line: str) -> LineKind:
    """Classify a line (trailing whitespace is ignored)."""
    stripped = line.rstrip()
    if not stripped:
        return LineKind.BLANK
    if stripped[0].isspace():
        return LineKind.DESCRIPTION
    return LineKind.TITLE


class _EntryBuilder:
    """Accumulates a title and its description lines."""

    def __init__(self, title: str):
        self.title = title
        self.description_parts: list[str] = []

    def add_description(self, text: str) -> None:
        self.description_parts.append(text)

    def build(self) -> Entry:
        return Entry(self.title, DESCRIPTION_SEPARATOR.join(self.description_parts))


def parse_plan_lines(lines: Iterable[str], name: str = "plan", cyclic: bool = False) -> Plan:
    """
    Build a plan from an iterable of text lines.

    Args:
        lines: Lines of plan text, with or without line terminators
        name: Name given to the resulting plan
        cyclic: Whether the plan wraps around; never inferred from the text

    Returns:
        Plan with its cursor on the first entry

    Raises:
        LeadingDescriptionError: An indented line has no entry to attach to
        EmptyPlanError: The text holds no entries
    """
    entries: list[Entry] = []
    current: Optional[_EntryBuilder] = None

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip()
        kind = classify_line(line)

        if kind == LineKind.BLANK:
            if current is not None:
                entries.append(current.build())
                current = None
            continue

        if kind == LineKind.DESCRIPTION:
            if current is None:
                raise LeadingDescriptionError(
                    line_number=line_number,
                    line=line,
                    context={"plan_name": name}
                )
            current.add_description(line.strip())
            continue

        if current is not None:
            entries.append(current.build())
        current = _EntryBuilder(line)

    if current is not None:
        entries.append(current.build())

    if not entries:
        raise EmptyPlanError(context={"plan_name": name})

    logger.debug("Plan parsed", plan_name=name, entry_count=len(entries), cyclic=cyclic)
    return Plan(name=name, entries=tuple(entries), cyclic=cyclic)


def parse_plan_text(text: str, name: str = "plan", cyclic: bool = False) -> Plan:
    """
    Build a plan from a block of text. See parse_plan_lines.

    Only "\n" ends a line; a trailing "\r" is dropped with the other
    trailing whitespace. Form feeds and other Unicode line separators stay
    inside the line.
    """
    return parse_plan_lines(text.split("\n"), name=name, cyclic=cyclic)


def render_plan_text(plan: Plan) -> str:
    """Write a plan back out in the plain text format."""
    lines = []
    for entry in plan.entries:
        lines.append(entry.title)
        if entry.description:
            lines.append(f"{EXPORT_INDENT}{entry.description}")
    return "\n".join(lines) + "\n"
