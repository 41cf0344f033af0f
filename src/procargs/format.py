"""Argument list formatting."""

from collections.abc import Sequence

SEPARATOR = " \\\n    "
SEPARATOR_BYTES = SEPARATOR.encode("ascii")


def format_arglist(args: Sequence[str]) -> str:
    """Join already split arguments with the continuation separator."""
    return SEPARATOR.join(args)


def render_args(args: Sequence[bytes]) -> bytes:
    """
    Render raw argument bytes one per continuation line.

    The arguments are never decoded, so bytes that are not valid text
    come out exactly as the kernel reported them.
    """
    return SEPARATOR_BYTES.join(args) + b"\n"


def prettify(text: str) -> str:
    """
    Reformat a pasted command line, one argument per continuation line.

    Splits on single spaces only; quoting and escaped spaces are not
    understood. Not idempotent for tokens already containing the separator.
    """
    return format_arglist(text.split(" "))
