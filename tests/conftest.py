"""Pytest configuration and shared fixtures."""

import pytest

from reading_app.persistence.plan_store import PlanStore
from reading_app.plan.models import Entry, Plan
from reading_app.plan.parser import parse_plan_text


SAMPLE_PLAN_TEXT = """\
Genesis 1-3
    Creation and the fall
Genesis 4-7
Genesis 8-11
    The flood
    and the tower of Babel
"""


@pytest.fixture
def sample_plan_text() -> str:
    """Indented plan text with three entries."""
    return SAMPLE_PLAN_TEXT


@pytest.fixture
def three_entries() -> tuple[Entry, ...]:
    """Entries A, B, C with a description on A only."""
    return (Entry("A", "desc"), Entry("B"), Entry("C"))


@pytest.fixture
def acyclic_plan(three_entries) -> Plan:
    """Acyclic plan A, B, C at index 0."""
    return Plan(name="abc", entries=three_entries)


@pytest.fixture
def cyclic_plan(three_entries) -> Plan:
    """Cyclic plan A, B, C at index 0."""
    return Plan(name="abc-cycle", entries=three_entries, cyclic=True)


@pytest.fixture
def genesis_plan(sample_plan_text) -> Plan:
    """Plan parsed from the sample text."""
    return parse_plan_text(sample_plan_text, name="genesis")


@pytest.fixture
def plan_store(tmp_path) -> PlanStore:
    """Plan store rooted in a temporary plans directory."""
    return PlanStore(tmp_path / "plans")
