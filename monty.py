import logging
import sys

import click

from montyvm import __main__
from montyvm.virtual_machine_error import MontyError, UsageError


def init_logging(debug=False):
    """Send interpreter debug records to stderr when tracing is on."""
    logger = logging.getLogger('montyvm')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    if not debug:
        logger.setLevel(logging.WARNING)
        logger.propagate = True
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)5s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False


class MontyCommand(click.Command):
    """
    Click command whose option errors (a bad MONTY_TRACE value for one)
    exit with status 1 like every other interpreter error
    """

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super(MontyCommand, self).make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = MontyError.exit_code
            raise


@click.command(cls=MontyCommand, context_settings={'ignore_unknown_options': True})
@click.option('--trace/--no-trace', default=False, envvar='MONTY_TRACE',
              help='Log every instruction to stderr.')
@click.argument('file_names', nargs=-1)
def cli(trace, file_names):
    """
    Monty bytecode interpreter: push and pall on a single integer stack
    """
    init_logging(trace)
    try:
        if len(file_names) != 1:
            raise UsageError()
        __main__.run_monty_file(file_names[0])
    except MontyError as e:
        click.echo(str(e), err=True)
        sys.exit(e.exit_code)
