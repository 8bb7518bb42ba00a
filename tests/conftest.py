from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable, Generator, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from git import Repo

if TYPE_CHECKING:
    from click.testing import CliRunner


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for test environment.

    Logs go to stderr at WARNING level so they never mix with command
    output checked by the tests.
    """
    from localhub.logging import configure_logging

    configure_logging(level=logging.WARNING)
    yield


@pytest.fixture(autouse=True)
def isolated_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point HOME at an empty directory.

    Keeps the default hub and the user config file away from the real home
    directory, and gives git an empty global configuration.
    """
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("GIT_DIR", raising=False)
    monkeypatch.delenv("GIT_WORK_TREE", raising=False)
    return home


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files.

    Also saves and restores the current working directory to prevent
    tests that use os.chdir() from affecting other tests.
    """
    original_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()
    os.chdir(original_cwd)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove all LOCALHUB_ environment variables for clean testing."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("LOCALHUB_"):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def hub_root(tmp_path: Path) -> Path:
    """Absolute hub root that does not exist yet."""
    return tmp_path.resolve() / "hub"


@pytest.fixture
def work_repo(tmp_path: Path) -> Path:
    """Create a working repository with one commit and an 'origin' remote.

    Returns:
        Path to the working repository.
    """
    repo_path = tmp_path.resolve() / "work"
    repo_path.mkdir()

    repo = Repo.init(repo_path)
    with repo.config_writer() as writer:
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("user", "name", "Test User")

    readme = repo_path / "README.md"
    readme.write_text("# Test Repo\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    repo.create_remote("origin", "https://example.com/org/work.git")
    return repo_path


@pytest.fixture
def non_git_dir(tmp_path: Path) -> Path:
    """Create a temporary directory that is not a git repository."""
    dir_path = tmp_path.resolve() / "not_a_repo"
    dir_path.mkdir()
    return dir_path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner.

    Example:
        >>> def test_version(cli_runner):
        ...     from localhub.main import cli
        ...     result = cli_runner.invoke(cli, ["--version"])
        ...     assert result.exit_code == 0
    """
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def push_head() -> Callable[[Path, Path], None]:
    """Return a helper pushing a working repo's HEAD into a bare repository.

    The branch pushed to is the one the bare repository's HEAD names, so the
    pushed commits are reachable from its HEAD.
    """

    def _push(work_path: Path, bare_path: Path) -> None:
        head_ref = (bare_path / "HEAD").read_text().strip().removeprefix("ref: ")
        Repo(work_path).git.push(str(bare_path), f"HEAD:{head_ref}")

    return _push


@pytest.fixture
def block_directory(monkeypatch: pytest.MonkeyPatch) -> Callable[[Path], None]:
    """Return a helper that makes directory listing fail for one path.

    Permission bits do not stop root, so ``os.scandir`` is patched to raise
    PermissionError for the blocked path and delegate for everything else.
    """
    real_scandir = os.scandir

    def _block(blocked: Path) -> None:
        def scandir(path: Any = ".") -> Any:
            if Path(os.fspath(path)) == blocked:
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)

    return _block
