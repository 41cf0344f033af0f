"""Shared fixtures for procargs tests."""

from pathlib import Path

import pytest


class FakeProcfs:
    """A directory laid out like /proc, holding only stat and cmdline."""

    def __init__(self, root: Path) -> None:
        self.root = root

    @property
    def path(self) -> str:
        return str(self.root)

    def add(
        self,
        pid: int,
        ppid: int,
        comm: str = "proc",
        state: str = "S",
        cmdline: bytes | None = b"proc\x00",
    ) -> None:
        """Add a process. cmdline=None leaves the cmdline file out."""
        proc_dir = self.root / str(pid)
        proc_dir.mkdir()
        (proc_dir / "stat").write_text(f"{pid} ({comm}) {state} {ppid} {pid} {pid} 0 -1 4194560\n")
        if cmdline is not None:
            (proc_dir / "cmdline").write_bytes(cmdline)

    def remove_stat(self, pid: int) -> None:
        (self.root / str(pid) / "stat").unlink()


@pytest.fixture
def procfs(tmp_path: Path) -> FakeProcfs:
    """Empty fake procfs tree."""
    return FakeProcfs(tmp_path)


@pytest.fixture
def chain_procfs(procfs: FakeProcfs) -> FakeProcfs:
    """Fake procfs with the chain 10 -> 5 -> 1."""
    procfs.add(1, 0, comm="init", state="S", cmdline=b"init\x00")
    procfs.add(5, 1, comm="bash", state="S", cmdline=b"/bin/bash\x00--login\x00")
    procfs.add(10, 5, comm="my proc", state="R", cmdline=b"gcc\x00-c\x00hello.c\x00")
    return procfs
