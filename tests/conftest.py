from __future__ import annotations

import subprocess

import pytest

from sshx.settings import SshxPaths


class FakeRunner:
    """Records every external command instead of running it."""

    def __init__(self, call_returncode: int = 0, fail: tuple[str, ...] = ()):
        self.call_returncode = call_returncode
        self.fail = set(fail)
        self.calls: list[list[str]] = []
        self.runs: list[list[str]] = []
        self._next_pane = 0

    def call(self, argv):
        self.calls.append(list(argv))
        return self.call_returncode

    def run(self, argv, check=False):
        argv = list(argv)
        self.runs.append(argv)
        if argv[0] == "tmux" and argv[1] in self.fail:
            return subprocess.CompletedProcess(argv, 1, stdout="", stderr="no space for new pane")
        stdout = ""
        if "-P" in argv:
            stdout = f"%{self._next_pane}\n"
            self._next_pane += 1
        return subprocess.CompletedProcess(argv, 0, stdout=stdout, stderr="")

    def tmux_subcommands(self) -> list[str]:
        return [argv[1] for argv in self.runs if argv[0] == "tmux"]


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def paths(tmp_path):
    home = tmp_path / "home"
    home.mkdir()
    return SshxPaths.from_home(home)


@pytest.fixture
def initialized(paths):
    """A home directory that already went through bootstrap."""
    paths.private_dir.mkdir()
    paths.settings_file.write_text(
        "NamespaceSeparator .\nEnableAlias true\nSshPath /usr/bin/ssh\n",
        encoding="utf-8",
    )
    paths.imported_config.write_text("Host personal\n    HostName 192.0.2.1\n", encoding="utf-8")
    return paths
