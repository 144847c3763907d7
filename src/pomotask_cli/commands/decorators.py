"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomotask_cli.errors import PomotaskError
from pomotask_cli.ui.formatters import format_error
from pomotask_cli.utils import exit_codes
from pomotask_cli.utils.logger import get_logger


def command_wrapper(func: Callable):
    """Log command lifecycle and map failures onto exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except PomotaskError as e:
            logger.error("command failed: %s - %s", cmd, str(e))
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            raise

        except MemoryError as e:
            logger.critical("memory allocation failed in %s", cmd)
            format_error("Memory allocation failed")
            raise typer.Exit(code=exit_codes.ERROR_FATAL) from e

        except KeyboardInterrupt as e:
            logger.warning("command interrupted: %s", cmd)
            raise typer.Exit(code=exit_codes.ERROR_INTERRUPTED) from e

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
