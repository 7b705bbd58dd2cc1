import logging
import sys
from functools import wraps

import click

from tflocals.constants import EXIT_CODE_FAILURE, EXIT_CODE_OK
from tflocals.errors import TfLocalsError, TfLocalsException

LOG = logging.getLogger(__name__)


def output_exception(exception: Exception, exit_code_output: bool = True) -> None:
    """
    Output an exception message to the console and exit.

    Args:
        exception (Exception): The exception to output.
        exit_code_output (bool): Whether to exit with the exception's exit code
            instead of 0.

    Exits:
        Exits the program with the appropriate exit code.
    """
    click.secho(str(exception), fg="red", file=sys.stderr)

    if exit_code_output:
        exit_code = EXIT_CODE_FAILURE
        if hasattr(exception, "get_exit_code"):
            exit_code = exception.get_exit_code()
    else:
        exit_code = EXIT_CODE_OK

    sys.exit(exit_code)


def handle_cmd_exception(func):
    """
    Decorator to handle exceptions in command functions.

    The command must take an ``exit_code`` keyword argument.
    """

    @wraps(func)
    def inner(*args, **kwargs):
        exit_code = kwargs.get("exit_code", True)
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except TfLocalsError as e:
            LOG.debug("Expected TfLocalsError happened: %s", e)
            output_exception(e, exit_code_output=exit_code)
        except Exception as e:
            LOG.exception("Unexpected Exception happened: %s", e)
            output_exception(TfLocalsException(info=e), exit_code_output=exit_code)

    return inner
