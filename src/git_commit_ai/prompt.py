"""Prompt construction shared by every AI service."""

from typing import Optional

COMMIT_TYPE_FORMATS = {
    "": "<commit message>",
    "conventional": "<type>(<optional scope>): <commit message>",
    "gitmoji": ":<emoji>: <commit message>",
}

CONVENTIONAL_TYPES = {
    "docs": "Documentation only changes",
    "style": "Changes that do not affect the meaning of the code (white-space, formatting, missing semi-colons, etc)",
    "refactor": "A code change that neither fixes a bug nor adds a feature",
    "perf": "A code change that improves performance",
    "test": "Adding missing tests or correcting existing tests",
    "build": "Changes that affect the build system or external dependencies",
    "ci": "Changes to our CI configuration files and scripts",
    "chore": "Other changes that don't modify src or test files",
    "revert": "Reverts a previous commit",
    "feat": "A new feature",
    "fix": "A bug fix",
}

GITMOJI_TYPES = {
    ":sparkles:": "Introduce new features.",
    ":bug:": "Fix a bug.",
    ":memo:": "Add or update documentation.",
    ":art:": "Improve structure / format of the code.",
    ":zap:": "Improve performance.",
    ":fire:": "Remove code or files.",
    ":white_check_mark:": "Add, update, or pass tests.",
    ":lipstick:": "Add or update the UI and style files.",
    ":recycle:": "Refactor code.",
    ":wrench:": "Add or update configuration files.",
    ":arrow_up:": "Upgrade dependencies.",
    ":rewind:": "Revert changes.",
}


def _type_catalogue(commit_type: str) -> str:
    if commit_type == "conventional":
        types = CONVENTIONAL_TYPES
    elif commit_type == "gitmoji":
        types = GITMOJI_TYPES
    else:
        return ""
    lines = [f"  {name}: {description}" for name, description in types.items()]
    return "Choose a type from the type-to-description list below:\n" + "\n".join(lines)


def build_prompt(
    locale: str,
    diff: str,
    generate: int,
    max_length: int,
    commit_type: str,
    user_prompt: Optional[str] = None,
) -> str:
    """Build the instruction sent to a model for a staged diff.

    Args:
        locale: Language of the commit messages
        diff: Staged diff text
        generate: Number of messages to request
        max_length: Maximum commit subject length
        commit_type: Message convention ("", "conventional" or "gitmoji")
        user_prompt: Optional additional instructions from the user

    Returns:
        Prompt text
    """
    parts = [
        "Generate a concise git commit message written in present tense for the following code diff with the given specifications below:",
        f"Message language: {locale}",
        f"Commit message must be a maximum of {max_length} characters.",
        "Exclude anything unnecessary such as translation. Your entire response will be passed directly into git commit.",
    ]

    catalogue = _type_catalogue(commit_type)
    if catalogue:
        parts.append(catalogue)
    parts.append(
        "The output response must be in format:\n"
        + COMMIT_TYPE_FORMATS.get(commit_type, COMMIT_TYPE_FORMATS[""])
    )

    if user_prompt:
        parts.append(f"Additional instructions: {user_prompt}")

    parts.append(
        f"Please just generate {generate} commit messages in numbered list format without any explanation."
    )
    parts.append("")
    parts.append(f"Here is the diff:\n{diff}")
    return "\n".join(parts)
