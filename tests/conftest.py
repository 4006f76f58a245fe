"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from dirlayout.cli import CLI


@dataclass(frozen=True)
class RunResult:
    """Captured outcome of a CLI run."""

    exit_code: int
    stdout: str
    stderr: str


class LayoutRunner:
    """Helper class for running the dirlayout CLI in-process and capturing output."""

    def __init__(self, capsys: pytest.CaptureFixture[str], output_dir: Path):
        self.capsys = capsys
        self.output_dir = output_dir

    def run(self, args: list[str], with_output_dir: bool = True) -> RunResult:
        """Run the CLI with the given arguments.

        Args:
            args: Arguments to pass to the CLI
            with_output_dir: If True, append ``--output <tmp dir>`` and ``--no-color``

        Returns:
            RunResult with exit code and captured stdout/stderr
        """
        argv = list(args)
        if with_output_dir:
            argv += ["--output", str(self.output_dir), "--no-color"]
        self.capsys.readouterr()
        exit_code = CLI().run(argv)
        captured = self.capsys.readouterr()
        return RunResult(exit_code=exit_code, stdout=captured.out, stderr=captured.err)

    def run_success(self, args: list[str], **kwargs) -> RunResult:
        """Run the CLI and assert success."""
        result = self.run(args, **kwargs)
        assert result.exit_code == 0, result.stderr
        return result

    def run_failure(self, args: list[str], **kwargs) -> RunResult:
        """Run the CLI and assert failure."""
        result = self.run(args, **kwargs)
        assert result.exit_code != 0
        return result

    def assert_in_output(self, result: RunResult, text: str) -> None:
        """Assert that text appears in stdout or stderr."""
        combined = result.stdout + result.stderr
        assert text in combined, f"Expected '{text}' in output:\n{combined}"

    def assert_dir_exists(self, *segments: str) -> None:
        path = self.output_dir.joinpath(*segments)
        assert path.is_dir(), f"Expected directory to exist: {path}"

    def created_dirs(self) -> list[str]:
        """Relative paths of every directory below the output directory."""
        return sorted(
            path.relative_to(self.output_dir).as_posix()
            for path in self.output_dir.rglob("*")
            if path.is_dir()
        )


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return an empty directory layouts are created in."""
    target = tmp_path / "out"
    target.mkdir()
    return target


@pytest.fixture
def runner(capsys: pytest.CaptureFixture[str], output_dir: Path) -> LayoutRunner:
    """Return a LayoutRunner writing into the test's output directory."""
    return LayoutRunner(capsys, output_dir)


@pytest.fixture(autouse=True)
def no_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the NO_COLOR environment variable from leaking into tests."""
    monkeypatch.delenv("NO_COLOR", raising=False)
