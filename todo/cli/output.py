import json as json_lib

import typer


def init_context(ctx: typer.Context, quiet_output: bool = False) -> None:
    """Initialize CLI context with standard flags."""
    if ctx.obj is None or not isinstance(ctx.obj, dict):
        ctx.obj = {}
    ctx.obj["quiet_output"] = quiet_output


def out_json(data) -> str:
    return json_lib.dumps(data, indent=2, ensure_ascii=False)


def out_text(msg: str, ctx_obj: dict | None = None) -> None:
    if ctx_obj and ctx_obj.get("quiet_output"):
        return
    typer.echo(msg)
