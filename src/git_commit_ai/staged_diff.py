"""Staged diff collection using GitPython."""

from fnmatch import fnmatch
from typing import Iterable, List, Optional

from git import Repo

from git_commit_ai.logging_config import get_logger
from git_commit_ai.models import StagedDiff

logger = get_logger(__name__)

# Generated files that only add noise to a prompt
DEFAULT_EXCLUDED_FILES = ("package-lock.json", "pnpm-lock.yaml", "*.lock")


def _is_excluded(path: str, patterns: Iterable[str]) -> bool:
    name = path.rsplit("/", 1)[-1]
    return any(fnmatch(name, pattern) or fnmatch(path, pattern) for pattern in patterns)


def get_staged_diff(
    repo_path: str = ".",
    exclude_files: Iterable[str] = DEFAULT_EXCLUDED_FILES,
) -> Optional[StagedDiff]:
    """Collect the staged changes of a repository.

    The repository is found by walking up from ``repo_path``, the same
    way git itself does.

    Args:
        repo_path: Path inside the repository
        exclude_files: File names or glob patterns left out of the diff

    Returns:
        StagedDiff with file names and diff text, or None if nothing
        is staged

    Raises:
        git.exc.InvalidGitRepositoryError: If repo_path is not in a repository
    """
    repo = Repo(repo_path, search_parent_directories=True)
    patterns = tuple(exclude_files)

    names = repo.git.diff("--cached", "--name-only", "--diff-algorithm=minimal")
    files: List[str] = [
        f for f in names.splitlines() if f and not _is_excluded(f, patterns)
    ]
    if not files:
        logger.debug("No staged changes", extra={"repository": repo.working_dir})
        return None

    diff = repo.git.diff("--cached", "--diff-algorithm=minimal", "--", *files)
    logger.debug(
        "Collected staged diff",
        extra={"repository": repo.working_dir, "files": len(files)},
    )
    return StagedDiff(files=files, diff=diff)
