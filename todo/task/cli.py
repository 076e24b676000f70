"""Task CLI: add, list, complete, delete and modify tasks."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from typer.core import TyperGroup

from todo import config
from todo.cli import output
from todo.cli.errors import error_feedback
from todo.lib import paths
from todo.lib.store import TaskStore
from todo.models import parse_id
from todo.task import operations
from todo.task.format import format_task_list

USAGE = """Usage: todo <command> [options]
Commands:
  add     - add a new task
  list    - list all tasks
  done    - mark a task as done
  delete  - delete a task
  modify  - modify a task
  config  - show effective settings

Use 'todo <command> -help' for command details"""


class TodoGroup(TyperGroup):
    """Command group that answers unknown commands with the usage text and exit 1."""

    def resolve_command(self, ctx, args):
        if args and self.get_command(ctx, args[0]) is None:
            typer.echo(USAGE)
            ctx.exit(1)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=TodoGroup,
    invoke_without_command=True,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help", "-help"]},
    help="Track tasks in a local JSON file.",
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    file: Annotated[
        Path | None, typer.Option("--file", "-f", help="Tasks file (default: tasks.json).")
    ] = None,
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress success messages."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
):
    output.init_context(ctx, quiet_output)
    ctx.obj["file"] = file

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[todo] %(levelname)s %(name)s: %(message)s",
        force=True,
    )

    if ctx.resilient_parsing:
        return

    if ctx.invoked_subcommand is None:
        typer.echo(USAGE)
        raise typer.Exit(1)


def _store(ctx: typer.Context) -> TaskStore:
    return TaskStore(paths.tasks_file(ctx.obj.get("file"), config.load_config()["file"]))


@app.command("add")
@error_feedback
def add(
    ctx: typer.Context,
    name: Annotated[str | None, typer.Option("-name", "--name", help="Task name (required).")] = None,
    due: Annotated[str | None, typer.Option("-due", "--due", help="Due date (YYYY-MM-DD).")] = None,
):
    """Add a new task."""
    task = operations.add_task(_store(ctx), name, due, due_time=config.due_time())
    output.out_text(f"Task {task.id} added.", ctx.obj)


@app.command("list")
@error_feedback
def list_cmd(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
):
    """List all tasks."""
    tasks = operations.list_tasks(_store(ctx))

    if json_output:
        typer.echo(output.out_json([t.to_dict() for t in tasks]))
        return

    if not tasks:
        typer.echo("No tasks")
        return

    typer.echo(format_task_list(tasks, width=config.name_width()))


@app.command("done")
@error_feedback
def done(
    ctx: typer.Context,
    task_id: Annotated[str | None, typer.Option("-id", "--id", help="Task id to complete.")] = None,
):
    """Mark a task as done."""
    task = operations.done_task(_store(ctx), parse_id(task_id))
    output.out_text(f"Task {task.id} marked as done.", ctx.obj)


@app.command("delete")
@error_feedback
def delete(
    ctx: typer.Context,
    task_id: Annotated[str | None, typer.Option("-id", "--id", help="Task id to delete.")] = None,
):
    """Delete a task."""
    task = operations.delete_task(_store(ctx), parse_id(task_id))
    output.out_text(f"Task {task.id} deleted.", ctx.obj)


@app.command("modify")
@error_feedback
def modify(
    ctx: typer.Context,
    task_id: Annotated[str | None, typer.Option("-id", "--id", help="Task id to modify.")] = None,
    name: Annotated[str | None, typer.Option("-name", "--name", help="New task name.")] = None,
    due: Annotated[
        str | None, typer.Option("-due", "--due", help="New due date (YYYY-MM-DD).")
    ] = None,
):
    """Change a task's name and/or due date."""
    task = operations.modify_task(
        _store(ctx), parse_id(task_id), name=name, due=due, due_time=config.due_time()
    )
    output.out_text(f"Task {task.id} modified.", ctx.obj)


@app.command("config")
@error_feedback
def show_config(ctx: typer.Context):
    """Show effective settings."""
    cfg = config.load_config()
    cfg_path = paths.config_file()
    typer.echo(f"config: {cfg_path}{'' if cfg_path.exists() else ' (not found, using defaults)'}")
    typer.echo(f"file: {_store(ctx).path}")
    typer.echo(f"due_time: {cfg['due_time']}")
    typer.echo(f"name_width: {cfg['name_width']}")


def main() -> None:
    """Entry point for todo command."""
    try:
        app()
    except SystemExit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}")
        raise SystemExit(1) from e
