"""Tests for staged diff collection against real repositories."""

import shutil
import tempfile
from pathlib import Path

import pytest
from git import Repo
from git.exc import InvalidGitRepositoryError

from git_commit_ai.staged_diff import get_staged_diff


class TestGetStagedDiff:
    """Tests for get_staged_diff."""

    @pytest.fixture
    def test_repo(self):
        """Create a temporary Git repository for testing.

        Yields:
            Path: Path to the temporary repository
        """
        temp_dir = tempfile.mkdtemp()
        repo_path = Path(temp_dir)

        try:
            repo = Repo.init(repo_path)

            with repo.config_writer() as config:
                config.set_value("user", "name", "Test User")
                config.set_value("user", "email", "test@example.com")

            initial_file = repo_path / "README.md"
            initial_file.write_text("# Test Repository\n")
            repo.index.add(["README.md"])
            repo.index.commit("Initial commit")

            yield repo_path

        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)

    def test_returns_none_when_nothing_staged(self, test_repo):
        (test_repo / "untracked.py").write_text("print('x')\n")

        assert get_staged_diff(str(test_repo)) is None

    def test_collects_staged_files_and_diff(self, test_repo):
        """Test that staged files and their diff are returned."""
        (test_repo / "foo.py").write_text("def foo():\n    return 1\n")
        Repo(test_repo).index.add(["foo.py"])

        staged = get_staged_diff(str(test_repo))

        assert staged is not None
        assert staged.files == ["foo.py"]
        assert "+def foo():" in staged.diff

    def test_ignores_unstaged_changes(self, test_repo):
        (test_repo / "foo.py").write_text("staged\n")
        Repo(test_repo).index.add(["foo.py"])
        (test_repo / "README.md").write_text("# Changed but not staged\n")

        staged = get_staged_diff(str(test_repo))

        assert staged.files == ["foo.py"]
        assert "Changed but not staged" not in staged.diff

    def test_excludes_lock_files(self, test_repo):
        """Test that lock files are left out of the diff."""
        (test_repo / "foo.py").write_text("x = 1\n")
        (test_repo / "package-lock.json").write_text("{}\n")
        (test_repo / "poetry.lock").write_text("lock\n")
        Repo(test_repo).index.add(["foo.py", "package-lock.json", "poetry.lock"])

        staged = get_staged_diff(str(test_repo))

        assert staged.files == ["foo.py"]
        assert "package-lock.json" not in staged.diff

    def test_only_lock_files_is_nothing_staged(self, test_repo):
        (test_repo / "poetry.lock").write_text("lock\n")
        Repo(test_repo).index.add(["poetry.lock"])

        assert get_staged_diff(str(test_repo)) is None

    def test_custom_exclusions(self, test_repo):
        (test_repo / "foo.py").write_text("x = 1\n")
        (test_repo / "generated.txt").write_text("gen\n")
        Repo(test_repo).index.add(["foo.py", "generated.txt"])

        staged = get_staged_diff(str(test_repo), exclude_files=["*.txt"])

        assert staged.files == ["foo.py"]

    def test_finds_repository_from_subdirectory(self, test_repo):
        subdir = test_repo / "src" / "pkg"
        subdir.mkdir(parents=True)
        (subdir / "mod.py").write_text("y = 2\n")
        Repo(test_repo).index.add(["src/pkg/mod.py"])

        staged = get_staged_diff(str(subdir))

        assert staged.files == ["src/pkg/mod.py"]

    def test_not_a_repository(self):
        temp_dir = tempfile.mkdtemp()
        try:
            with pytest.raises(InvalidGitRepositoryError):
                get_staged_diff(temp_dir)
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)
