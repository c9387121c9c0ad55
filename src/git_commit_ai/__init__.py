"""git-commit-ai - AI-generated commit messages for staged changes."""

__version__ = "0.1.0"

from git_commit_ai.config import GenerationConfig
from git_commit_ai.models import ChoiceRecord, StagedDiff
from git_commit_ai.services import AIServiceParams, create_ai_service, create_ai_services

__all__ = [
    "AIServiceParams",
    "ChoiceRecord",
    "GenerationConfig",
    "StagedDiff",
    "create_ai_service",
    "create_ai_services",
]
