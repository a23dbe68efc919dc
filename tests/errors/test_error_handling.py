"""
Error handling tests.

Tests cover the error hierarchy and the guarantee that a failed operation
leaves no partial state behind.
"""

import pytest

from reading_app.errors import (
    ConfigurationError,
    CorruptPlanError,
    EmptyPlanError,
    InvalidPlanNameError,
    InvalidStepError,
    LeadingDescriptionError,
    NavigatorError,
    ParseError,
    PlanAlreadyExistsError,
    PlanNotFoundError,
    PlanStateError,
    ReadingError,
    StorageDirectoryMissingError,
    StorageError,
)
from reading_app.plan.models import Cursor
from reading_app.plan.navigator import advance, retreat
from reading_app.plan.parser import parse_plan_text


class TestErrorClassification:
    """Test error classification system."""

    def test_everything_derives_from_reading_error(self):
        for error_type in (
            ParseError, EmptyPlanError, LeadingDescriptionError,
            NavigatorError, InvalidStepError, PlanStateError,
            StorageError, StorageDirectoryMissingError, PlanNotFoundError,
            PlanAlreadyExistsError, CorruptPlanError, InvalidPlanNameError,
            ConfigurationError,
        ):
            assert issubclass(error_type, ReadingError)

    def test_parse_error_hierarchy(self):
        empty = EmptyPlanError()
        assert isinstance(empty, ParseError)
        assert empty.recoverable is True
        assert str(empty) == "cannot construct an empty plan"

        leading = LeadingDescriptionError(line_number=4, line="    text")
        assert isinstance(leading, ParseError)
        assert leading.line_number == 4
        assert leading.line == "    text"

    def test_navigation_error_hierarchy(self):
        step_error = InvalidStepError("negative", steps=-3, direction="advance")
        assert isinstance(step_error, NavigatorError)
        assert step_error.steps == -3
        assert step_error.direction == "advance"

    def test_storage_errors_are_not_recoverable(self):
        missing = PlanNotFoundError("psalms", operation="load", target="/tmp/psalms.plan.json")
        assert isinstance(missing, StorageError)
        assert missing.recoverable is False
        assert missing.operation == "load"
        assert missing.name == "psalms"

        exists = PlanAlreadyExistsError("psalms")
        assert str(exists) == "plan 'psalms' already exists"

    def test_context_defaults_to_empty_dict(self):
        assert ReadingError("boom").context == {}
        assert EmptyPlanError(context={"plan_name": "x"}).context == {"plan_name": "x"}

    def test_parser_attaches_plan_name(self):
        with pytest.raises(EmptyPlanError) as exc_info:
            parse_plan_text("", name="psalms")

        assert exc_info.value.context["plan_name"] == "psalms"


class TestNoPartialState:
    """Failed operations leave the plan untouched."""

    @pytest.mark.parametrize("cursor", [Cursor.at(1), Cursor.before_start(), Cursor.after_end()])
    def test_rejected_step_leaves_cursor(self, acyclic_plan, cursor):
        acyclic_plan.cursor = cursor

        for operation in (advance, retreat):
            with pytest.raises(InvalidStepError):
                operation(acyclic_plan, -2)
            assert acyclic_plan.cursor == cursor

    def test_failed_parse_returns_nothing(self):
        result = None
        with pytest.raises(LeadingDescriptionError):
            result = parse_plan_text("A\nB\n\n  orphan\nC")
        assert result is None
