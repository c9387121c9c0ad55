"""Turn raw model output into a list of distinct commit messages."""

import re
from typing import Iterable, List

_LIST_MARKER = re.compile(r"^(\d+[.)]|[-*•])\s+")
# Markdown bold/italic wrapping the whole line
_EMPHASIS = re.compile(r"^(\*{1,3}|_{1,3})(.+?)\1$")
_CONVENTIONAL = re.compile(r"^\w+(\([^)]*\))?!?:\s+\S.*")
_GITMOJI = re.compile(r"^:\w+:\s+\S.*")


def _clean_line(line: str) -> str:
    line = line.strip()
    line = _LIST_MARKER.sub("", line)
    line = line.replace("`", "")
    line = _EMPHASIS.sub(r"\2", line.strip())
    return line.strip().strip("\"'").strip()


def _extract_commit_message(line: str, commit_type: str) -> str:
    """Return the part of ``line`` that follows the convention, or ''."""
    if commit_type == "conventional":
        match = _CONVENTIONAL.match(line)
    elif commit_type == "gitmoji":
        match = _GITMOJI.match(line)
    else:
        return line
    return match.group(0).strip() if match else ""


def deduplicate_messages(messages: Iterable[str]) -> List[str]:
    """Remove exact duplicates, keeping the first occurrence of each."""
    seen = set()
    unique: List[str] = []
    for message in messages:
        if message not in seen:
            seen.add(message)
            unique.append(message)
    return unique


def sanitize_messages(text: str, commit_type: str, max_count: int) -> List[str]:
    """Split model output into candidate commit messages.

    Each line is trimmed, stripped of list numbering, backticks, markdown
    emphasis and wrapping quotes, and kept only if it follows ``commit_type``.
    Duplicates are dropped and at most ``max_count`` messages returned;
    fewer are returned when the model produced fewer usable lines.

    Args:
        text: Raw model output
        commit_type: Message convention ("", "conventional" or "gitmoji")
        max_count: Maximum number of messages to return

    Returns:
        Candidate messages in the order the model produced them
    """
    candidates = (
        _extract_commit_message(_clean_line(line), commit_type)
        for line in text.splitlines()
    )
    messages = deduplicate_messages(c for c in candidates if c)
    return messages[:max_count]
