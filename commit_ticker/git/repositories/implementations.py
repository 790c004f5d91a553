"""Concrete implementation of Git repository operations."""

import subprocess
from pathlib import Path

from commit_ticker.core.errors import GitCommandError
from commit_ticker.core.logging import get_logger
from commit_ticker.git.domain.value_objects import PathFilter
from commit_ticker.git.repositories.interfaces import GitRepository

logger = get_logger(__name__)


class GitRepositoryImpl(GitRepository):
    """Concrete implementation of Git repository operations using git commands.

    Arguments are always passed to git as a list, never through a shell.
    User supplied references go after ``--end-of-options`` and path patterns
    after ``--`` so neither can be read as an option.
    """

    def __init__(self, repo_path: Path | str = ".") -> None:
        """
        Initialize GitRepositoryImpl.

        Args:
            repo_path: Path to the git repository (defaults to the working directory)
        """
        self._repo_path = Path(repo_path)

    def resolve(self, ref: str) -> str:
        """
        Resolve a reference to the canonical hash of a commit.

        Annotated tags are peeled to the commit they point at.

        Args:
            ref: Branch name, tag, short or long hash, or symbolic ref such as HEAD

        Returns:
            Full commit hash
        """
        return self._run(
            ["rev-parse", "--verify", "--end-of-options", f"{ref}^{{commit}}"]
        ).strip()

    def list_range(self, from_id: str, to_id: str) -> tuple[str, ...]:
        """
        List commits reachable from ``to_id`` but not from ``from_id``.

        Args:
            from_id: Hash of the older commit (excluded)
            to_id: Hash of the newer commit (included)

        Returns:
            Tuple of commit hashes ordered from oldest to newest
        """
        output = self._run(["rev-list", "--reverse", f"{from_id}..{to_id}"])
        return tuple(line for line in output.strip().split("\n") if line)

    def title(self, commit_id: str) -> str:
        """Get the subject line of a commit message."""
        return self._run(["show", "-s", "--format=%s", commit_id]).strip()

    def body(self, commit_id: str) -> str:
        """Get the commit message without its subject line, trimmed."""
        return self._run(["show", "-s", "--format=%b", commit_id]).strip()

    def diff(self, commit_id: str, path_filter: PathFilter) -> str:
        """
        Get the patch introduced by a commit.

        The output is returned untouched since diff formatting matters.

        Args:
            commit_id: Hash of the commit
            path_filter: Paths to restrict the patch to (empty for all paths)

        Returns:
            Patch text in git's native format
        """
        args = ["show", "--no-color", "--no-ext-diff", "--format=", commit_id]
        if path_filter:
            args.extend(["--", *path_filter.patterns])
        return self._run(args)

    def _run(self, args: list[str]) -> str:
        """Run a git command in the repository and return its stdout."""
        command = ["git", *args]
        logger.debug("Executing git command", command=command, cwd=str(self._repo_path))
        try:
            result = subprocess.run(
                command,
                cwd=self._repo_path,
                capture_output=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise GitCommandError(command, e.returncode, _decode(e.stderr)) from e
        except OSError as e:
            raise GitCommandError(command, -1, str(e)) from e
        return _decode(result.stdout)


def _decode(output: bytes | None) -> str:
    """Decode git output as UTF-8, keeping carriage returns."""
    return (output or b"").decode("utf-8", errors="replace")
