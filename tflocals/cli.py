# -*- coding: utf-8 -*-
import logging
from pathlib import Path

import click

from tflocals.constants import (
    CLI_ATOMIC_HELP,
    CLI_DEBUG_HELP,
    CLI_EXIT_CODE_HELP,
    CLI_FILEPATH_HELP,
    CLI_MAIN_INTRODUCTION,
    CLI_VALUE_HELP,
    CLI_VARNAME_HELP,
    ENV_FILEPATH,
    ENV_VALUE,
    ENV_VARNAME,
    LOG_FORMAT,
)
from tflocals.error_handlers import handle_cmd_exception
from tflocals.main import run
from tflocals.meta import get_version
from tflocals.models import Target

LOG = logging.getLogger(__name__)


def configure_logger(ctx, param, debug):
    level = logging.WARNING

    if debug:
        level = logging.DEBUG

    logging.basicConfig(format=LOG_FORMAT, level=level)
    # basicConfig is a no-op when the root logger already has handlers.
    logging.getLogger("tflocals").setLevel(level)
    return debug


def validate_varname(ctx, param, value):
    if value is not None and not value.strip():
        raise click.BadParameter("must not be empty")
    return value


@click.command(help=CLI_MAIN_INTRODUCTION)
@click.option("--debug", is_flag=True, is_eager=True, help=CLI_DEBUG_HELP, callback=configure_logger)
@click.option(
    "--filepath",
    envvar=ENV_FILEPATH,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help=CLI_FILEPATH_HELP,
)
@click.option("--varname", envvar=ENV_VARNAME, required=True, callback=validate_varname, help=CLI_VARNAME_HELP)
@click.option("--value", envvar=ENV_VALUE, required=True, help=CLI_VALUE_HELP)
@click.option(
    "--exit-code/--continue-on-error",
    default=True,
    show_default=False,
    help=CLI_EXIT_CODE_HELP,
)
@click.option("--atomic", is_flag=True, default=False, help=CLI_ATOMIC_HELP)
@click.version_option(version=get_version())
@handle_cmd_exception
def cli(debug, filepath, varname, value, exit_code, atomic):
    LOG.debug("inputs loaded: filepath=%s varname=%s value=%r", filepath, varname, value)

    run(Target.create(filepath, varname, value), atomic=atomic, logger=LOG)

    LOG.info("file updated successfully")
