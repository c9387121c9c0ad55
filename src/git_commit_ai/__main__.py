"""Entry point for generating commit messages from the command line.

This module:
- Loads configuration from environment variables (and ``.env``)
- Sets up logging on stderr
- Prints the candidates of every enabled AI service
"""

import sys

from git.exc import InvalidGitRepositoryError

from git_commit_ai import __version__
from git_commit_ai.config import GenerationConfig
from git_commit_ai.logging_config import get_logger, setup_logging
from git_commit_ai.services import AIServiceParams, create_ai_services
from git_commit_ai.staged_diff import get_staged_diff

logger = get_logger(__name__)


def main() -> None:
    """Main entry point.

    Exit codes:
    - 0: Successful execution
    - 1: Configuration error, not a repository, or nothing staged
    - 2: Unexpected error
    """
    try:
        config = GenerationConfig.from_env(".env")

        # Keep stdout for the generated messages
        setup_logging(
            log_level=config.log_level,
            use_json=False,
            log_file=None,
            stream="stderr"
        )
        logger.debug("Starting git-commit-ai", extra={"version": __version__})

        staged_diff = get_staged_diff(".")
        if staged_diff is None:
            print("No staged changes found. Stage your changes manually, or use `git add`.")
            sys.exit(1)

        params = AIServiceParams(config=config, staged_diff=staged_diff)
        index = 0
        for service in create_ai_services(params):
            for choice in service.generate_commit_messages():
                if choice.disabled:
                    print(f"   {choice.name}")
                    continue
                index += 1
                print(f"{index:>2} {choice.name}")

    except ValueError as e:
        logger.error("Configuration error", extra={"error": str(e)})
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except InvalidGitRepositoryError:
        print("The current directory must be a Git repository!", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down")
        sys.exit(0)
    except Exception as e:
        logger.exception("Unexpected error", extra={"error": str(e)})
        sys.exit(2)


if __name__ == "__main__":
    main()
