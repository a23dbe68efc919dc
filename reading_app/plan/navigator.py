"""
Cursor navigation for plans.

Acyclic plans move along the chain

    BeforeStart, Index(0), ..., Index(N-1), AfterEnd

and saturate at either end; a sentinel only blocks further moves in the
same direction. Cyclic plans form a ring of indexes and never reach a
sentinel.
"""

from typing import Any

from ..errors import InvalidStepError
from ..logging.config import get_navigator_logger, log_cursor_move
from .models import Cursor, Direction, MoveResult, Plan

navigator_logger = get_navigator_logger(__name__)


def _validate_steps(steps: Any, direction: Direction) -> None:
    if not isinstance(steps, int) or isinstance(steps, bool):
        raise InvalidStepError(
            f"step count must be an integer, got {steps!r}",
            steps=steps,
            direction=direction.value
        )
    if steps < 0:
        raise InvalidStepError(
            f"step count must not be negative, got {steps}",
            steps=steps,
            direction=direction.value
        )


class PlanNavigator:
    """Moves plan cursors and reports what changed."""

    def __init__(self):
        self.logger = navigator_logger

    def _position(self, plan: Plan) -> int:
        """Linear position on the acyclic chain: -1 .. len(plan)."""
        cursor = plan.cursor
        if cursor.is_before_start:
            return -1
        if cursor.is_after_end:
            return len(plan)
        return cursor.index

    def _resolve(self, plan: Plan, position: int) -> Cursor:
        if position < 0:
            return Cursor.before_start()
        if position >= len(plan):
            return Cursor.after_end()
        return Cursor.at(position)

    def _target(self, plan: Plan, direction: Direction, steps: int) -> Cursor:
        delta = steps if direction == Direction.ADVANCE else -steps

        if plan.cyclic:
            # Python's modulo already normalises negative results into [0, len)
            return Cursor.at((plan.cursor.index + delta) % len(plan))

        if direction == Direction.ADVANCE and plan.cursor.is_after_end:
            return plan.cursor
        if direction == Direction.RETREAT and plan.cursor.is_before_start:
            return plan.cursor
        return self._resolve(plan, self._position(plan) + delta)

    def move(self, plan: Plan, direction: Direction, steps: int) -> MoveResult:
        """
        Move the plan's cursor by ``steps`` in ``direction``.

        The step count is validated before anything is touched, so a
        rejected call leaves the plan exactly as it was.

        Raises:
            InvalidStepError: steps is negative or not an integer
        """
        direction = Direction(direction)
        _validate_steps(steps, direction)

        previous = plan.cursor
        current = self._target(plan, direction, steps)
        plan.cursor = current

        if current != previous:
            log_cursor_move(
                self.logger,
                plan_name=plan.name,
                direction=direction.value,
                steps=steps,
                from_cursor=str(previous),
                to_cursor=str(current),
                context={"cyclic": plan.cyclic, "entry_count": len(plan)}
            )

        return MoveResult(
            plan_name=plan.name,
            direction=direction,
            steps=steps,
            previous=previous,
            current=current,
            entry=plan.current_entry,
        )

    def advance(self, plan: Plan, steps: int = 1) -> MoveResult:
        return self.move(plan, Direction.ADVANCE, steps)

    def retreat(self, plan: Plan, steps: int = 1) -> MoveResult:
        return self.move(plan, Direction.RETREAT, steps)

    def set_cyclic(self, plan: Plan, cyclic: bool) -> Cursor:
        """
        Change whether the plan wraps around.

        A plan parked at BeforeStart or AfterEnd is put back on its first
        entry when it becomes cyclic, since cyclic plans have no sentinels.
        Returns the resulting cursor.
        """
        previous = plan.cursor
        if cyclic and not previous.is_index:
            plan.cursor = Cursor.at(0)
        plan.cyclic = cyclic

        self.logger.info(
            "Cyclicity changed",
            plan_name=plan.name,
            cyclic=cyclic,
            from_cursor=str(previous),
            to_cursor=str(plan.cursor)
        )
        return plan.cursor


# Global navigator instance
navigator = PlanNavigator()


def move(plan: Plan, direction: Direction, steps: int) -> MoveResult:
    return navigator.move(plan, direction, steps)


def advance(plan: Plan, steps: int = 1) -> MoveResult:
    """Move forward ``steps`` entries. See PlanNavigator.move."""
    return navigator.advance(plan, steps)


def retreat(plan: Plan, steps: int = 1) -> MoveResult:
    """Move backward ``steps`` entries. See PlanNavigator.move."""
    return navigator.retreat(plan, steps)


def set_cyclic(plan: Plan, cyclic: bool) -> Cursor:
    return navigator.set_cyclic(plan, cyclic)
