"""
Command-line interface for managing reading plans.

    reading add psalms.txt --cyclic
    reading view psalms --count 3
    reading next psalms
    reading list
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.style import Style
from rich.text import Text

from . import __version__
from .config import ReadingConfig, load_config
from .errors import ConfigurationError, ReadingError, StorageDirectoryMissingError
from .logging.config import configure_logging
from .persistence.plan_store import PlanStore
from .plan.models import Direction
from .plan.navigator import navigator
from .plan.parser import parse_plan_text, render_plan_text


@dataclass(frozen=True)
class StyleSet:
    """Text styles for terminal output."""
    normal: Style
    title: Style
    description: Style
    error: Style

    @classmethod
    def plain(cls) -> "StyleSet":
        return cls(normal=Style(), title=Style(), description=Style(), error=Style())

    @classmethod
    def fancy(cls) -> "StyleSet":
        return cls(
            normal=Style(),
            title=Style(color="white", bold=True),
            description=Style(italic=True),
            error=Style(color="red"),
        )


@dataclass
class CliContext:
    """State shared by all subcommands."""
    config: ReadingConfig
    store: PlanStore
    console: Console
    styles: StyleSet

    def say(self, *parts: tuple[str, Style]) -> None:
        self.console.print(Text.assemble(*parts))

    def fail(self, message: str) -> None:
        self.console.print(Text(message, style=self.styles.error))
        click.get_current_context().exit(1)


def _make_console(color: bool) -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False, no_color=not color)


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]},
             epilog="reading is a reading plan manager, but can also be used to manage other "
                    "sorts of schedules or plans. To get started, use `reading add` to add a "
                    "plan, and check `reading add --help` for the expected input format.")
@click.option("--no-ansi", "-n", is_flag=True, help="Disables fancy text output.")
@click.option("--plans-dir", type=click.Path(file_okay=False, path_type=Path),
              help="Directory holding installed plans (default: ~/.reading).")
@click.option("--config-dir", type=click.Path(file_okay=False, path_type=Path),
              help="Directory holding config.yaml (default: ~/.reading).")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                                               case_sensitive=False),
              help="Log level for diagnostics written to stderr.")
@click.version_option(__version__, prog_name="reading")
@click.pass_context
def cli(ctx: click.Context, no_ansi: bool, plans_dir: Optional[Path],
        config_dir: Optional[Path], log_level: Optional[str]) -> None:
    """A simple reading plan manager."""
    overrides: dict = {}
    if plans_dir is not None:
        overrides.setdefault("storage", {})["plans_dir"] = str(plans_dir)
    if log_level is not None:
        overrides.setdefault("logging", {})["level"] = log_level.upper()
    if no_ansi:
        overrides.setdefault("display", {})["color"] = False

    try:
        config = load_config(config_dir, overrides)
    except ConfigurationError as e:
        _make_console(color=not no_ansi).print(Text(f"Configuration error: {e}", style="red"))
        ctx.exit(1)

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)

    ctx.obj = CliContext(
        config=config,
        store=PlanStore(config.plans_dir, config.storage.extension),
        console=_make_console(config.display.color),
        styles=StyleSet.fancy() if config.display.color else StyleSet.plain(),
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(list_plans)


@cli.command(epilog="The expected input format is a plain text file, with each line representing "
                    "the title of an entry in the plan. Optionally, a title may be followed by a "
                    "description, which is given on the line(s) directly following and marked as "
                    "such by any level of indentation. If no name is provided for the plan, the "
                    "filename (without the extension) will be used as the name.")
@click.argument("filename", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--name", "-n", help="The name of the plan after adding.")
@click.option("--cyclic", "-c", is_flag=True, help="Create a cyclic plan.")
@click.pass_obj
def add(obj: CliContext, filename: Path, name: Optional[str], cyclic: bool) -> None:
    """Adds a reading plan to the collection."""
    name = name or filename.stem
    if not name:
        obj.fail(f"Could not deduce plan name from filename '{filename}'")

    try:
        text = filename.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        obj.fail(f"Error opening file {filename}: {e}")

    try:
        plan = parse_plan_text(text, name=name, cyclic=cyclic)
    except ReadingError as e:
        obj.fail(f"Error parsing plan: {e}")

    try:
        obj.store.add(plan)
    except ReadingError as e:
        obj.fail(f"Error adding plan: {e}")

    obj.say((f"Added plan {name}", obj.styles.normal))


@cli.command()
@click.argument("plan_name", metavar="PLAN")
@click.pass_obj
def remove(obj: CliContext, plan_name: str) -> None:
    """Removes a reading plan from the collection."""
    try:
        obj.store.remove(plan_name)
    except ReadingError as e:
        obj.fail(f"Error removing plan: {e}")

    obj.say((f"Removed plan {plan_name}", obj.styles.normal))


@cli.command(epilog="If no output filename is specified, the filename will be "
                    "'(name of plan) + .plan'.")
@click.argument("plan_name", metavar="PLAN")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path),
              help="The output filename.")
@click.pass_obj
def export(obj: CliContext, plan_name: str, output: Optional[Path]) -> None:
    """Exports a reading plan to a plain text file."""
    try:
        plan = obj.store.load(plan_name)
    except ReadingError as e:
        obj.fail(f"Error reading plan: {e}")

    output = output or Path(f"{plan.name}.plan")
    if output.exists():
        obj.fail(f"The output file '{output}' already exists and will not be overwritten")

    try:
        with open(output, "x", encoding="utf-8") as f:
            f.write(render_plan_text(plan))
    except OSError as e:
        obj.fail(f"Could not write to output file: {e}")

    obj.say((f"Wrote plan '{plan.name}' to '{output}'", obj.styles.normal))


@cli.command("list")
@click.pass_obj
def list_plans(obj: CliContext) -> None:
    """Lists all installed reading plans."""
    try:
        results = list(obj.store.iter_plans())
    except StorageDirectoryMissingError:
        results = []
    except ReadingError as e:
        obj.fail(f"Could not open plans folder: {e}")

    plans = [result.plan for result in results if result.success]
    failures = len(results) - len(plans)

    if not plans and not failures:
        obj.say(("No plans are installed; you can add some by running `reading add` "
                 "(use `reading add --help` for more information)", obj.styles.normal))
        return

    for plan in plans:
        obj.say((plan.name, obj.styles.title), " ", (f"({plan.position_label()})", obj.styles.normal))

    if failures == 1:
        obj.say(("1 plan could not be read", obj.styles.error))
    elif failures:
        obj.say((f"{failures} plans could not be read", obj.styles.error))


@cli.command()
@click.argument("plan_name", metavar="PLAN")
@click.option("--count", "-c", type=click.IntRange(min=0),
              help="The number of following entries to view.")
@click.pass_obj
def view(obj: CliContext, plan_name: str, count: Optional[int]) -> None:
    """Views the current entry (and optionally more) of the specified plan."""
    if count is None:
        count = obj.config.display.view_count

    try:
        plan = obj.store.load(plan_name)
    except ReadingError as e:
        obj.fail(f"Error reading plan: {e}")

    if plan.is_ended:
        obj.say(("Plan has ended (use `reading previous` to revert to an earlier entry)",
                 obj.styles.normal))
        return
    if plan.is_before_start:
        obj.say(("Plan has not started (use `reading next` to move to the first entry)",
                 obj.styles.normal))
        return

    width = obj.config.display.label_width
    for n, entry in enumerate(plan.upcoming(count)):
        if n == 0:
            label = "Current entry:"
        elif n == 1:
            label = "Next entry:"
        else:
            label = f"{n} entries from now:"

        obj.say((f"{label:{width}}", obj.styles.normal), " ", (entry.title, obj.styles.title))
        if entry.description:
            obj.say((" " * width, obj.styles.normal), " ", (entry.description, obj.styles.description))


def _move(obj: CliContext, plan_name: str, count: int, direction: Direction) -> None:
    try:
        plan = obj.store.load(plan_name)
    except ReadingError as e:
        obj.fail(f"Error reading plan: {e}")

    try:
        result = navigator.move(plan, direction, count)
    except ReadingError as e:
        obj.fail(f"Error moving plan: {e}")

    try:
        obj.store.save(plan)
    except ReadingError as e:
        obj.fail(f"Could not save changes to plan: {e}")

    obj.say((f"Changed current entry of '{plan.name}': "
             f"{result.previous.label()} -> {result.current.label()}", obj.styles.normal))


@cli.command("next")
@click.argument("plan_name", metavar="PLAN")
@click.option("--count", "-c", type=int, default=1, show_default=True,
              help="The number of entries to move forward.")
@click.pass_obj
def next_entry(obj: CliContext, plan_name: str, count: int) -> None:
    """Moves the specified plan to the next entry."""
    _move(obj, plan_name, count, Direction.ADVANCE)


@cli.command("previous")
@click.argument("plan_name", metavar="PLAN")
@click.option("--count", "-c", type=int, default=1, show_default=True,
              help="The number of entries to move backward.")
@click.pass_obj
def previous_entry(obj: CliContext, plan_name: str, count: int) -> None:
    """Moves the specified plan to the previous entry."""
    _move(obj, plan_name, count, Direction.RETREAT)


@cli.command()
@click.argument("plan_name", metavar="PLAN")
@click.option("--on/--off", "enable", default=True, help="Make the plan cyclic or acyclic.")
@click.pass_obj
def cyclic(obj: CliContext, plan_name: str, enable: bool) -> None:
    """Makes the specified plan cyclic (wrapping around) or acyclic."""
    try:
        plan = obj.store.load(plan_name)
    except ReadingError as e:
        obj.fail(f"Error reading plan: {e}")

    navigator.set_cyclic(plan, enable)

    try:
        obj.store.save(plan)
    except ReadingError as e:
        obj.fail(f"Could not save changes to plan: {e}")

    kind = "cyclic" if enable else "acyclic"
    obj.say((f"Plan '{plan.name}' is now {kind} ({plan.position_label()})", obj.styles.normal))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
