"""
Command line entry point.

Summarizes the commits between two references with an LLM. Every setting can
also be given as a GitHub Action input (``INPUT_<NAME>`` environment variable),
so the same entry point backs the action defined in action.yml.
"""

import argparse
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TextIO

from dotenv import load_dotenv

from commit_ticker.core.config import load_config
from commit_ticker.core.errors import CommitTickerError
from commit_ticker.core.logging import get_logger, setup_logging
from commit_ticker.git.repositories.implementations import GitRepositoryImpl
from commit_ticker.git.repositories.interfaces import GitRepository
from commit_ticker.git.services.git_service import GitService
from commit_ticker.outputs.repositories.implementations import GitHubActionsRepository
from commit_ticker.outputs.services.output_service import OutputService
from commit_ticker.summarization.repositories.factory import create_llm_agent
from commit_ticker.summarization.repositories.interfaces import LLMAgentRepository
from commit_ticker.summarization.services.summarization_service import (
    SummarizationService,
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the commit-ticker command."""
    parser = argparse.ArgumentParser(
        prog="commit-ticker",
        description="Generate an AI summary of the commits between two git references",
    )
    parser.add_argument(
        "from_ref",
        nargs="?",
        default=None,
        help="Starting reference (branch, tag or hash). Falls back to the 'from' input",
    )
    parser.add_argument(
        "to_ref",
        nargs="?",
        default=None,
        help="Ending reference (default: HEAD)",
    )
    parser.add_argument(
        "--include-start-commit",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include the starting commit in the summary (default: true)",
    )
    parser.add_argument(
        "--path",
        dest="paths",
        action="append",
        default=None,
        help="Restrict diffs to this path pattern (repeatable)",
    )
    parser.add_argument("--max-diff-chars", default=None, help="Characters kept per diff (6000)")
    parser.add_argument("--provider", default=None, help="github, openai or anthropic")
    parser.add_argument("--model", default=None, help="Model identifier")
    parser.add_argument("--temperature", default=None, help="Sampling temperature, 0 to 2 (0.2)")
    parser.add_argument(
        "--max-output-tokens", default=None, help="Maximum tokens in the summary (800)"
    )
    parser.add_argument("--system-prompt", default=None, help="Override the system prompt")
    parser.add_argument("--prompt", default=None, help="Replace the default instructions")
    parser.add_argument(
        "--extra-instructions", default=None, help="Additional guidance for the model"
    )
    parser.add_argument("--timeout", type=float, default=None, help="Model request timeout (s)")
    parser.add_argument(
        "--repo",
        type=Path,
        default=Path("."),
        help="Path to the git repository (default: current directory)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Also write the summary to this markdown file",
    )
    parser.add_argument(
        "--prompt-only",
        action="store_true",
        help="Print the assembled prompt and skip the model call",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser


def _optional_path(environ: Mapping[str, str], name: str) -> Path | None:
    value = environ.get(name)
    return Path(value) if value else None


def run(
    argv: Sequence[str] | None,
    environ: Mapping[str, str],
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    git_repository: GitRepository | None = None,
    llm_agent: LLMAgentRepository | None = None,
) -> int:
    """
    Run a summarization and publish the result.

    Args:
        argv: Command line arguments, without the program name
        environ: Environment holding action inputs, API keys and runner files
        stdout: Stream for the summary and workflow commands
        stderr: Stream for failure messages
        git_repository: Git repository override (defaults to git in ``--repo``)
        llm_agent: LLM agent override (defaults to the configured provider)

    Returns:
        Process exit code
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    args = build_parser().parse_args(argv)

    log_level = args.log_level or ("DEBUG" if environ.get("RUNNER_DEBUG") == "1" else "INFO")
    setup_logging(log_level, json_logs=args.json_logs)

    output_service = OutputService(
        GitHubActionsRepository(
            stream=stdout,
            output_path=_optional_path(environ, "GITHUB_OUTPUT"),
            summary_path=_optional_path(environ, "GITHUB_STEP_SUMMARY"),
            in_actions=environ.get("GITHUB_ACTIONS") == "true",
        ),
        stdout,
    )

    try:
        config = load_config(args, environ)

        git_service = GitService(git_repository or GitRepositoryImpl(config.repo_path))
        if llm_agent is None and not config.prompt_only:
            llm_agent = create_llm_agent(config.model)
        summarization_service = SummarizationService(git_service, llm_agent)

        result = summarization_service.summarize_range(config)

        if config.prompt_only:
            output_service.publish_prompt(result, args.output)
        else:
            output_service.publish(result, args.output)
    except CommitTickerError as e:
        logger.error(e.message, kind=e.kind.value)
        output_service.fail(e.message)
        print(f"✗ {e.message}", file=stderr)
        return 1
    except ValueError as e:
        output_service.fail(str(e))
        print(f"✗ Configuration error: {e}", file=stderr)
        return 1
    except OSError as e:
        message = f"Failed to write output: {e}"
        logger.error(message)
        output_service.fail(message)
        print(f"✗ {message}", file=stderr)
        return 1

    if not result.is_empty and not config.prompt_only:
        logger.info("Commit summary generated successfully.", commits=len(result.commit_ids))
    return 0


def main() -> None:
    """Load .env, run with the process environment and exit."""
    load_dotenv()
    sys.exit(run(sys.argv[1:], os.environ))


if __name__ == "__main__":
    main()
