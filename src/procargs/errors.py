"""procargs exceptions.

PUBLIC API:
  - ProcError: Base exception for all process lookups
  - ProcessUnavailable: Process files missing or unparsable (expected race)
  - ProcessFatal: A committed lookup could not be completed
"""


class ProcError(Exception):
    """Base exception for all process lookups."""

    def __init__(self, pid: int, message: str) -> None:
        super().__init__(message)
        self.pid = pid


class ProcessUnavailable(ProcError):
    """Raised when a process status cannot be resolved."""

    pass


class ProcessFatal(ProcError):
    """Raised when a process file the caller relies on cannot be read."""

    def __init__(self, pid: int, path: str) -> None:
        super().__init__(pid, f"cannot read {path}: requested process has to exist")
        self.path = path
