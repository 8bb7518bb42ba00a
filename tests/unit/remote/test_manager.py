"""Unit tests for RemoteManager."""

from __future__ import annotations

from pathlib import Path

import pytest
from git import Repo

from localhub.exceptions import (
    NotARepositoryError,
    PushUrlExistsError,
    RemoteExistsError,
    RemoteNotFoundError,
)
from localhub.hub import HubManager
from localhub.remote import (
    DEFAULT_HUB_REMOTE_NAME,
    DEFAULT_PUSH_REMOTE_NAME,
    RemoteManager,
)

ORIGIN_URL = "https://example.com/org/work.git"


@pytest.fixture
def member(hub_root: Path) -> Path:
    """Path of a freshly created hub member 'proj.git'."""
    return HubManager(hub_root).create("proj").path


@pytest.fixture
def remotes(work_repo: Path) -> RemoteManager:
    return RemoteManager(work_repo)


def _config_values(repo_path: Path, remote: str, option: str) -> list[str]:
    reader = Repo(repo_path).config_reader()
    section = f'remote "{remote}"'
    if not reader.has_option(section, option):
        return []
    return [str(v) for v in reader.get_values(section, option)]


class TestConstruction:
    def test_defaults(self) -> None:
        assert DEFAULT_HUB_REMOTE_NAME == "local-hub"
        assert DEFAULT_PUSH_REMOTE_NAME == "origin"

    def test_non_repository(self, non_git_dir: Path) -> None:
        with pytest.raises(NotARepositoryError):
            RemoteManager(non_git_dir)

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(NotARepositoryError):
            RemoteManager(tmp_path / "missing")


class TestAddRemote:
    def test_adds_with_default_name(
        self, remotes: RemoteManager, work_repo: Path, member: Path
    ) -> None:
        summary = remotes.add_remote(member)

        assert summary.name == "local-hub"
        assert summary.url == str(member)
        assert _config_values(work_repo, "local-hub", "url") == [str(member)]

    def test_fetch_url_is_absolute(self, remotes: RemoteManager, member: Path) -> None:
        summary = remotes.add_remote(member)
        assert summary.url is not None
        assert Path(summary.url).is_absolute()

    def test_custom_name(self, remotes: RemoteManager, work_repo: Path, member: Path) -> None:
        remotes.add_remote(member, remote_name="backup")
        assert _config_values(work_repo, "backup", "url") == [str(member)]

    def test_existing_remote_is_unchanged(
        self, remotes: RemoteManager, work_repo: Path, member: Path
    ) -> None:
        with pytest.raises(RemoteExistsError) as exc_info:
            remotes.add_remote(member, remote_name="origin")

        assert exc_info.value.remote_name == "origin"
        assert _config_values(work_repo, "origin", "url") == [ORIGIN_URL]

    def test_second_add_fails(self, remotes: RemoteManager, member: Path) -> None:
        remotes.add_remote(member)
        with pytest.raises(RemoteExistsError):
            remotes.add_remote(member)

    def test_remote_is_fetchable(
        self, remotes: RemoteManager, work_repo: Path, member: Path
    ) -> None:
        remotes.add_remote(member)
        repo = Repo(work_repo)
        repo.git.push("local-hub", "HEAD:refs/heads/backup")
        repo.remote("local-hub").fetch()
        assert "local-hub/backup" in [ref.name for ref in repo.remote("local-hub").refs]


class TestAddPushUrl:
    def test_keeps_primary_url(
        self, remotes: RemoteManager, work_repo: Path, member: Path
    ) -> None:
        summary = remotes.add_push_url(member)

        assert summary.name == "origin"
        assert summary.url == ORIGIN_URL
        assert _config_values(work_repo, "origin", "url") == [ORIGIN_URL]

    def test_push_goes_to_both(
        self, remotes: RemoteManager, work_repo: Path, member: Path
    ) -> None:
        summary = remotes.add_push_url(member)

        assert summary.push_urls == (ORIGIN_URL, str(member))
        assert _config_values(work_repo, "origin", "pushurl") == [ORIGIN_URL, str(member)]

    def test_existing_push_urls_are_kept(
        self, remotes: RemoteManager, work_repo: Path, member: Path
    ) -> None:
        with Repo(work_repo).config_writer() as writer:
            writer.add_value('remote "origin"', "pushurl", "https://mirror.example.com/work.git")

        summary = remotes.add_push_url(member)

        assert summary.push_urls == ("https://mirror.example.com/work.git", str(member))

    def test_duplicate_push_url(self, remotes: RemoteManager, member: Path) -> None:
        remotes.add_push_url(member)
        with pytest.raises(PushUrlExistsError):
            remotes.add_push_url(member)

    def test_missing_remote(
        self, remotes: RemoteManager, work_repo: Path, member: Path
    ) -> None:
        with pytest.raises(RemoteNotFoundError) as exc_info:
            remotes.add_push_url(member, remote_name="upstream")

        assert exc_info.value.remote_name == "upstream"
        assert "upstream" not in [r.name for r in Repo(work_repo).remotes]

    def test_push_reaches_hub(
        self, remotes: RemoteManager, work_repo: Path, member: Path
    ) -> None:
        remotes.add_remote(member, remote_name="mirror")
        remotes.add_push_url(member, remote_name="mirror")

        Repo(work_repo).git.push("mirror", "HEAD:refs/heads/main")

        assert "main" in [head.name for head in Repo(member).heads]


class TestListRemotes:
    def test_lists_in_config_order(self, remotes: RemoteManager, member: Path) -> None:
        remotes.add_remote(member)
        remotes.add_push_url(member)

        listed = remotes.list_remotes()

        assert [r.name for r in listed] == ["origin", "local-hub"]
        origin, hub = listed
        assert origin.url == ORIGIN_URL
        assert origin.push_urls == (ORIGIN_URL, str(member))
        assert hub.url == str(member)
        assert hub.push_urls == ()

    def test_no_remotes(self, remotes: RemoteManager) -> None:
        remotes.remove_remote("origin")
        assert remotes.list_remotes() == []


class TestRemoveRemote:
    def test_removes(self, remotes: RemoteManager, work_repo: Path, member: Path) -> None:
        remotes.add_remote(member)
        remotes.remove_remote("local-hub")

        assert [r.name for r in Repo(work_repo).remotes] == ["origin"]

    def test_missing(self, remotes: RemoteManager) -> None:
        with pytest.raises(RemoteNotFoundError):
            remotes.remove_remote("local-hub")
