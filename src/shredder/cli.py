"""
Shredder CLI Module

Click front end for the zero-fill loop:

    shredder <file1> <file2> ...     Process files, then wait for Enter
    shredder                         Print help, wait for Enter, exit 1
    shredder -h | --help             Print help, exit 0
    shredder -v | --version          Print version, exit 0
"""

import sys

import click

from .constants import AUTHOR, DRAG_AND_DROP_HINT, PROGRAM_NAME, __version__
from .debug import debug
from .prompts import wait_enter
from .shred import Shredder

# help_option_names lets users use either -h or --help
CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# \b stops Click from re-wrapping the paragraph that follows it
HELP_TEXT = f"""Overwrite files with zeros and optionally delete them.

Each file is confirmed before it is filled, and again before it is
deleted. Answer with y or n.

\b
OR
{DRAG_AND_DROP_HINT}

\b
Everything after -- is taken as a file name, so names that start
with a dash can be given as: shredder -- -notes.txt
"""

EPILOG = f"\b\nVersion: {__version__}\nAuthor: {AUTHOR}"


@click.command(
    name=PROGRAM_NAME, context_settings=CONTEXT_SETTINGS, help=HELP_TEXT, epilog=EPILOG
)
@click.version_option(__version__, "-v", "--version", prog_name=PROGRAM_NAME)
@click.option("--debug", "debug_mode", is_flag=True, help="Print debug output to stderr")
@click.argument("files", nargs=-1, type=click.Path())
@click.pass_context
def cli(ctx, debug_mode, files):
    if debug_mode:
        debug.enable(True)

    if not files:
        click.echo(ctx.get_help())
        click.echo()
        wait_enter()
        ctx.exit(1)

    debug.print(f"{PROGRAM_NAME} {__version__}: {len(files)} argument(s)")
    Shredder().process(files)
    wait_enter()


def main(args: list[str] | None = None) -> int:
    """
    Run the command and return the process exit code.

    Click runs outside standalone mode so that Ctrl-C, or stdin closing
    while a prompt waits, ends with 130 instead of Click's generic 1.
    """
    try:
        rv = cli.main(args=args, prog_name=PROGRAM_NAME, obj={}, standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo("\nInterrupted.", err=True)
        return 130
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    sys.exit(main())
