"""Plan persistence: one JSON document per plan in a plans directory."""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import orjson
import structlog

from ..errors import (
    CorruptPlanError,
    InvalidPlanNameError,
    PlanAlreadyExistsError,
    PlanNotFoundError,
    ReadingError,
    StorageDirectoryMissingError,
    StorageError,
)
from ..plan.models import Cursor, CursorKind, Entry, Plan

DEFAULT_EXTENSION = ".plan.json"


def plan_to_dict(plan: Plan) -> dict[str, Any]:
    """Serialize a plan into its stored document form."""
    cursor: dict[str, Any] = {"kind": plan.cursor.kind.value}
    if plan.cursor.is_index:
        cursor["index"] = plan.cursor.index

    return {
        "name": plan.name,
        "cyclic": plan.cyclic,
        "cursor": cursor,
        "entries": [
            {"title": entry.title, "description": entry.description}
            for entry in plan.entries
        ],
    }


def plan_from_dict(data: dict[str, Any]) -> Plan:
    """
    Rebuild a plan from its stored document form.

    Raises:
        CorruptPlanError: Missing fields, wrong types or an invalid cursor
    """
    try:
        cursor_data = data["cursor"]
        kind = CursorKind(cursor_data["kind"])
        cursor = Cursor(kind, cursor_data.get("index"))

        entries = tuple(
            Entry(title=item["title"], description=item.get("description", ""))
            for item in data["entries"]
        )
        cyclic = data.get("cyclic", False)
        if not isinstance(cyclic, bool):
            raise TypeError(f"cyclic must be a boolean, got {cyclic!r}")

        return Plan(name=data["name"], entries=entries, cyclic=cyclic, cursor=cursor)
    except (KeyError, TypeError, ValueError, AttributeError, ReadingError) as e:
        raise CorruptPlanError(f"invalid plan document: {e}") from e


@dataclass
class PlanLoadResult:
    """One item of a directory listing: a plan, or why it could not be read."""
    name: str
    plan: Optional[Plan] = None
    error: Optional[ReadingError] = None

    @property
    def success(self) -> bool:
        return self.plan is not None


class PlanStore:
    """
    Directory-backed plan repository.

    Each plan lives in ``<plans_dir>/<name><extension>``. Read operations
    require the directory to exist; write operations create it.
    """

    def __init__(self, plans_dir: Union[str, Path], extension: str = DEFAULT_EXTENSION):
        self.plans_dir = Path(plans_dir).expanduser()
        self.extension = extension
        self.logger = structlog.get_logger("plan.store")

    def path_for(self, name: str) -> Path:
        """
        File holding the named plan.

        Raises:
            InvalidPlanNameError: The name is empty, a dot name, or holds a path separator
        """
        if not name or name in (".", ".."):
            raise InvalidPlanNameError(name, "names must not be empty or a dot name", target=name)
        if "/" in name or "\\" in name:
            raise InvalidPlanNameError(name, "names cannot contain path separators", target=name)
        return self.plans_dir / f"{name}{self.extension}"

    def _require_dir(self) -> Path:
        if not self.plans_dir.is_dir():
            raise StorageDirectoryMissingError(
                "plan storage directory does not exist yet (you need to add some plans first)",
                operation="read",
                target=str(self.plans_dir)
            )
        return self.plans_dir

    def _ensure_dir(self) -> Path:
        try:
            self.plans_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"could not create plans directory: {e}",
                operation="mkdir",
                target=str(self.plans_dir)
            ) from e
        return self.plans_dir

    def _read(self, path: Path) -> Plan:
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise StorageError(f"could not read {path}: {e}", operation="read", target=str(path)) from e

        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise CorruptPlanError(f"invalid JSON in {path}: {e}", path=str(path),
                                   operation="read", target=str(path)) from e

        if not isinstance(data, dict):
            raise CorruptPlanError(f"{path} does not hold a plan object", path=str(path),
                                   operation="read", target=str(path))
        try:
            return plan_from_dict(data)
        except CorruptPlanError as e:
            raise CorruptPlanError(f"{path}: {e}", path=str(path),
                                   operation="read", target=str(path)) from e

    def _write(self, plan: Plan) -> Path:
        path = self.path_for(plan.name)
        try:
            path.write_bytes(orjson.dumps(plan_to_dict(plan), option=orjson.OPT_INDENT_2))
        except OSError as e:
            raise StorageError(f"could not write {path}: {e}", operation="write", target=str(path)) from e
        return path

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def load(self, name: str) -> Plan:
        """
        Read the plan with the given name.

        Raises:
            StorageDirectoryMissingError: No plans directory yet
            PlanNotFoundError: No such plan
            CorruptPlanError: The file is not a valid plan document
        """
        self._require_dir()
        path = self.path_for(name)
        if not path.is_file():
            raise PlanNotFoundError(name, operation="load", target=str(path))

        plan = self._read(path)
        self.logger.debug("Plan loaded", plan_name=name, path=str(path))
        return plan

    def add(self, plan: Plan) -> Path:
        """Store a new plan; fails if one with the same name exists."""
        path = self.path_for(plan.name)
        self._ensure_dir()
        if path.is_file():
            raise PlanAlreadyExistsError(plan.name, operation="add", target=str(path))

        self._write(plan)
        self.logger.info("Plan added", plan_name=plan.name, entries=len(plan), path=str(path))
        return path

    def save(self, plan: Plan) -> Path:
        """Store a plan, overwriting any previous version."""
        self._ensure_dir()
        path = self._write(plan)
        self.logger.debug("Plan saved", plan_name=plan.name, cursor=str(plan.cursor), path=str(path))
        return path

    def remove(self, name: str) -> None:
        """Delete a stored plan."""
        self._require_dir()
        path = self.path_for(name)
        if not path.is_file():
            raise PlanNotFoundError(name, operation="remove", target=str(path))

        try:
            path.unlink()
        except OSError as e:
            raise StorageError(f"could not remove {path}: {e}", operation="remove", target=str(path)) from e
        self.logger.info("Plan removed", plan_name=name, path=str(path))

    def names(self) -> list[str]:
        """Names of all stored plans, sorted."""
        self._require_dir()
        return sorted(
            path.name[:-len(self.extension)]
            for path in self.plans_dir.iterdir()
            if path.is_file() and path.name.endswith(self.extension)
        )

    def iter_plans(self) -> Iterator[PlanLoadResult]:
        """
        Yield every stored plan in name order.

        A file that cannot be read yields a failed result rather than
        stopping the iteration.
        """
        for name in self.names():
            try:
                yield PlanLoadResult(name=name, plan=self._read(self.path_for(name)))
            except StorageError as e:
                self.logger.warning("Unreadable plan file", plan_name=name, error=str(e))
                yield PlanLoadResult(name=name, error=e)
