"""Readers for the per-process files under /proc.

PUBLIC API:
  - PROCFS_PATH: Default procfs mount point
  - read_bytes: Read a file fully as bytes, None when unavailable
  - read_text: Read a file fully as UTF-8 text, None when unavailable
  - parse_stat: Parse the text of /proc/<pid>/stat
  - read_stat: Read and parse /proc/<pid>/stat
  - require_stat: Like read_stat but raises ProcessUnavailable
  - split_cmdline: Split raw /proc/<pid>/cmdline bytes into arguments
  - read_cmdline: Read /proc/<pid>/cmdline, raising ProcessFatal on failure
  - write_cmdline: Render a process's arguments to a binary stream
"""

import logging
import os
from typing import BinaryIO, Optional

from procargs.errors import ProcessFatal, ProcessUnavailable
from procargs.format import render_args
from procargs.models import ProcStat

logger = logging.getLogger(__name__)

PROCFS_PATH = "/proc"


def _proc_path(pid: int, name: str, procfs: str) -> str:
    return os.path.join(procfs, str(pid), name)


def read_bytes(path: str) -> Optional[bytes]:
    """Read a /proc file as bytes.

    Args:
        path: Path to /proc file.

    Returns:
        File content, or None if it could not be opened or read.
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return None


def read_text(path: str) -> Optional[str]:
    """Read a /proc file as strict UTF-8 text.

    Args:
        path: Path to /proc file.

    Returns:
        File content, or None if it could not be read or decoded.
    """
    data = read_bytes(path)
    if data is None:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug(f"Could not decode {path}: {e}")
        return None


def parse_stat(pid: int, text: str) -> Optional[ProcStat]:
    """Parse the content of /proc/<pid>/stat.

    The display name sits between the first "(" and the last ")", so names
    containing spaces or parentheses survive. A name holding ")" followed by
    fields holding "(" is ambiguous in the kernel format and will mis-parse.

    Args:
        pid: Process ID the text belongs to.
        text: Raw stat content, "pid (comm) state ppid ...".

    Returns:
        ProcStat, or None if the state or parent id field is missing or invalid.
    """
    lparen = text.find("(")
    rparen = text.rfind(")")
    if lparen == -1 or rparen < lparen:
        logger.debug(f"No parenthesized name in stat of PID {pid}")
        return None

    comm = text[lparen + 1 : rparen]
    fields = text[rparen + 2 :].split(" ")

    if not fields[0]:
        logger.debug(f"No state field in stat of PID {pid}")
        return None
    state = fields[0][0]

    if len(fields) < 2 or not (fields[1].isascii() and fields[1].isdigit()):
        logger.debug(f"No valid parent id in stat of PID {pid}")
        return None
    ppid = int(fields[1])

    return ProcStat(pid=pid, comm=comm, state=state, ppid=ppid)


def read_stat(pid: int, procfs: str = PROCFS_PATH) -> Optional[ProcStat]:
    """Read /proc/<pid>/stat, None if the process is gone or unreadable."""
    text = read_text(_proc_path(pid, "stat", procfs))
    if text is None:
        return None
    return parse_stat(pid, text)


def require_stat(pid: int, procfs: str = PROCFS_PATH) -> ProcStat:
    """Read /proc/<pid>/stat, raising ProcessUnavailable on failure."""
    stat = read_stat(pid, procfs)
    if stat is None:
        raise ProcessUnavailable(pid, f"status of process {pid} is unavailable")
    return stat


def split_cmdline(raw: bytes) -> list[bytes]:
    """Split NUL separated, NUL terminated cmdline bytes into arguments.

    An empty file (kernel threads, zombies) gives no arguments. Content that
    does not end in NUL, as left by processes rewriting their argv, is split
    as is.
    """
    if not raw:
        return []
    if raw.endswith(b"\x00"):
        raw = raw[:-1]
    return raw.split(b"\x00")


def read_cmdline(pid: int, procfs: str = PROCFS_PATH) -> list[bytes]:
    """Read the argument list of a process that is expected to exist.

    Raises:
        ProcessFatal: If /proc/<pid>/cmdline cannot be read.
    """
    path = _proc_path(pid, "cmdline", procfs)
    raw = read_bytes(path)
    if raw is None:
        logger.debug(f"Could not read cmdline of PID {pid}")
        raise ProcessFatal(pid, path)
    return split_cmdline(raw)


def write_cmdline(pid: int, out: BinaryIO, procfs: str = PROCFS_PATH) -> None:
    """Write a process's arguments to a binary stream, one per continuation line."""
    out.write(render_args(read_cmdline(pid, procfs)))
