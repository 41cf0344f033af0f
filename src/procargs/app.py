"""procargs - command-line interface."""

import logging
import sys
from typing import BinaryIO, NoReturn, Optional

import typer

from procargs import __version__
from procargs.ancestry import write_whatps
from procargs.errors import ProcessFatal
from procargs.format import prettify
from procargs.procfs import PROCFS_PATH, write_cmdline

app = typer.Typer(
    name="procargs",
    help="A yet another process info tool",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"procargs {__version__}")
        raise typer.Exit()


def _stdout() -> BinaryIO:
    """Binary stdout, so argument bytes are written without re-encoding."""
    return sys.stdout.buffer


def _fail(error: ProcessFatal) -> NoReturn:
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


@app.callback()
def cli(
    ctx: typer.Context,
    procfs: str = typer.Option(PROCFS_PATH, "--procfs", help="procfs mount point"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log lookups to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """A yet another process info tool."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = procfs


@app.command()
def args(
    ctx: typer.Context,
    pid: int = typer.Option(..., "--pid", "-p", min=0, metavar="PID", help="select process by id"),
) -> None:
    """Print out args of a running process."""
    out = _stdout()
    try:
        write_cmdline(pid, out, ctx.obj)
    except ProcessFatal as e:
        _fail(e)
    finally:
        out.flush()


@app.command("prettify")
def prettify_command() -> None:
    """Reprint an argument list for easier viewing."""
    sys.stdout.write(prettify(sys.stdin.read()) + "\n")
    sys.stdout.flush()


@app.command()
def whatps(
    ctx: typer.Context,
    pid: int = typer.Option(..., "--pid", "-p", min=0, metavar="PID", help="select process by id"),
) -> None:
    """Print out args and parents of a running process."""
    out = _stdout()
    try:
        write_whatps(pid, out, ctx.obj)
    except ProcessFatal as e:
        _fail(e)
    finally:
        out.flush()


def main() -> None:
    """Entry point for procargs."""
    app()


if __name__ == "__main__":
    main()
