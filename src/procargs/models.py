"""Data models for procargs."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ProcStat:
    """Immutable view of the leading fields of /proc/<pid>/stat."""

    pid: int
    comm: str  # Display name, verbatim from between the parentheses
    state: str  # 'R', 'S', 'Z', 'D', etc.
    ppid: int
