"""CLI error handling: turn domain errors into a message and exit status 1."""

import logging
from functools import wraps

import typer
from click.exceptions import Exit

from todo.errors import DecodeError, NotFoundError, StoreError, TodoError, ValidationError

logger = logging.getLogger(__name__)


def fail(msg: str) -> None:
    """Report an error on stdout and exit 1."""
    typer.echo(msg)
    raise typer.Exit(1)


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Every failure is terminal: one line on stdout, exit status 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except ValidationError as e:
            fail(f"Invalid input: {e}")
        except NotFoundError as e:
            fail(f"Error: {e}")
        except DecodeError as e:
            fail(f"Corrupt tasks file: {e}")
        except StoreError as e:
            fail(f"File error: {e}")
        except TodoError as e:
            fail(f"Error: {e}")
        except (ValueError, KeyError, TypeError) as e:
            logger.debug("Command failed", exc_info=True)
            fail(f"Invalid input: {e}")
        except OSError as e:
            fail(f"File error: {e}")

    return wrapper
