"""Ancestor chain of a process, walked through /proc/<pid>/stat."""

import logging
from typing import BinaryIO

from procargs.errors import ProcessUnavailable
from procargs.procfs import PROCFS_PATH, require_stat, write_cmdline

logger = logging.getLogger(__name__)

ROOT_PID = 1


def ancestor_chain(pid: int, procfs: str = PROCFS_PATH) -> list[int]:
    """
    Collect the parent ids of a process up to the root.

    The chain starts with ``pid`` and ends with ROOT_PID or with the last id
    whose status could be resolved. A parent that cannot be resolved (it
    exited, or is pid 0 outside our namespace) is not included.

    Args:
        pid: Process to start from.
        procfs: procfs mount point.

    Returns:
        Process ids, leaf first.
    """
    chain = [pid]
    seen = {pid}

    while pid != ROOT_PID:
        try:
            stat = require_stat(pid, procfs)
        except ProcessUnavailable:
            logger.debug(f"Ancestor walk stopped at unresolvable PID {pid}")
            if len(chain) > 1:
                chain.pop()
            break

        pid = stat.ppid
        if pid in seen:
            logger.debug(f"Ancestor walk found a cycle at PID {pid}")
            break
        seen.add(pid)
        chain.append(pid)

    return chain


def state_of(pid: int, procfs: str = PROCFS_PATH) -> str:
    """Get the state character of a process, '?' if it can no longer be read."""
    try:
        return require_stat(pid, procfs).state
    except ProcessUnavailable:
        return "?"


def write_whatps(pid: int, out: BinaryIO, procfs: str = PROCFS_PATH) -> None:
    """
    Write the ancestry of a process, root first.

    Each process gets a ``pid <id> [<state>]:`` header followed by its
    argument list. The state is read again here, so a process that exited
    since the walk shows as '?'.

    Raises:
        ProcessFatal: If the cmdline of a listed process cannot be read.
    """
    for ancestor in reversed(ancestor_chain(pid, procfs)):
        header = f"\npid {ancestor} [{state_of(ancestor, procfs)}]:\n"
        out.write(header.encode("utf-8"))
        write_cmdline(ancestor, out, procfs)
