"""
Shared test fixtures and configuration for command-docs tests.

This module provides common fixtures used across all test types:
- Stub executables that print canned help text
- Temporary git repositories for drift checks
"""

import json
import shutil
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# ============================================================================
# STUB BINARY FIXTURES
# ============================================================================

STUB_TEMPLATE = """#!{python}
import json
import sys

RESPONSES = json.loads({responses!r})
EXIT_CODES = json.loads({exit_codes!r})
CALL_LOG = {call_log!r}

key = " ".join(sys.argv[1:])
with open(CALL_LOG, "a", encoding="utf-8") as log:
    log.write(key + "\\n")
sys.stdout.write(RESPONSES.get(key, ""))
sys.exit(EXIT_CODES.get(key, 0))
"""


@pytest.fixture
def make_stub_binary(tmp_path) -> Callable[..., Path]:
    """Factory for executable scripts that answer --help invocations.

    The stub prints RESPONSES[" ".join(argv[1:])] and appends every argument
    line to ``<name>.calls`` next to the script.
    """

    def _make(
        name: str,
        responses: dict[str, str],
        exit_codes: dict[str, int] | None = None,
        directory: Path | None = None,
    ) -> Path:
        bin_dir = directory or tmp_path / "bin"
        bin_dir.mkdir(parents=True, exist_ok=True)
        script = bin_dir / name
        script.write_text(
            STUB_TEMPLATE.format(
                python=sys.executable,
                responses=json.dumps(responses),
                exit_codes=json.dumps(exit_codes or {}),
                call_log=str(bin_dir / f"{name}.calls"),
            ),
            encoding="utf-8",
        )
        script.chmod(0o755)
        return script

    return _make


def read_calls(binary: Path) -> list[str]:
    """Argument lines recorded by a stub binary, in call order."""
    log = binary.parent / f"{binary.name}.calls"
    if not log.exists():
        return []
    return log.read_text(encoding="utf-8").splitlines()


# ============================================================================
# GIT FIXTURES
# ============================================================================


def git(repo: Path, *args: str) -> subprocess.CompletedProcess[str]:
    """Run git inside repo, raising on failure."""
    return subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True
    )


@pytest.fixture
def git_repo(tmp_path) -> Path:
    """Empty git repository with a local identity configured."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "--quiet")
    git(repo, "config", "user.email", "tests@example.com")
    git(repo, "config", "user.name", "command-docs tests")
    git(repo, "config", "commit.gpgsign", "false")
    return repo


@pytest.fixture
def commit_file(git_repo) -> Callable[[str, str], Path]:
    """Write a file into the test repository and commit it."""

    def _commit(relative_path: str, content: str) -> Path:
        path = git_repo / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        git(git_repo, "add", relative_path)
        git(git_repo, "commit", "--quiet", "-m", f"Add {relative_path}")
        return path

    return _commit
