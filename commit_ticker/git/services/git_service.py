"""Git service for coordinating Git operations."""

from commit_ticker.core.errors import (
    ExtractionError,
    GitCommandError,
    RangeError,
    ResolutionError,
)
from commit_ticker.core.logging import get_logger
from commit_ticker.git.domain.entities import Commit
from commit_ticker.git.domain.value_objects import CommitRange, PathFilter
from commit_ticker.git.repositories.interfaces import GitRepository

logger = get_logger(__name__)


class GitService:
    """Service for Git operations."""

    def __init__(self, git_repository: GitRepository) -> None:
        """
        Initialize GitService.

        Args:
            git_repository: Repository implementation for Git operations
        """
        self._git_repository = git_repository

    def resolve_reference(self, ref: str) -> str:
        """
        Resolve a human supplied reference to a canonical commit hash.

        Args:
            ref: Branch name, tag, hash or symbolic ref

        Returns:
            Canonical commit hash

        Raises:
            ResolutionError: If the reference is unknown, ambiguous or the query fails
        """
        try:
            commit_id = self._git_repository.resolve(ref)
        except GitCommandError as e:
            raise ResolutionError(ref, str(e)) from e

        if not commit_id:
            raise ResolutionError(ref, "git returned an empty identifier")
        return commit_id

    def resolve_range(self, start_ref: str, end_ref: str, include_start: bool) -> CommitRange:
        """
        Resolve both endpoints of a range.

        Args:
            start_ref: Reference of the older endpoint
            end_ref: Reference of the newer endpoint
            include_start: Whether the start commit belongs to the range

        Returns:
            CommitRange holding both canonical hashes
        """
        return CommitRange(
            from_id=self.resolve_reference(start_ref),
            to_id=self.resolve_reference(end_ref),
            include_start=include_start,
        )

    def enumerate_range(self, commit_range: CommitRange) -> tuple[str, ...]:
        """
        List the commits of a range ordered from oldest to newest.

        The start commit is prepended when ``include_start`` is set, even if the
        range itself is empty or both endpoints are the same commit.

        Args:
            commit_range: Resolved range

        Returns:
            Tuple of commit hashes, possibly empty

        Raises:
            RangeError: If the range query fails
        """
        try:
            commit_ids = self._git_repository.list_range(
                commit_range.from_id, commit_range.to_id
            )
        except GitCommandError as e:
            raise RangeError(commit_range.from_id, commit_range.to_id, str(e)) from e

        if commit_range.include_start:
            return (commit_range.from_id, *commit_ids)
        return tuple(commit_ids)

    def extract_commit(self, commit_id: str, path_filter: PathFilter | None = None) -> Commit:
        """
        Read the title, body and diff of a commit.

        Args:
            commit_id: Canonical hash of the commit
            path_filter: Paths to restrict the diff to (all paths when empty)

        Returns:
            Commit entity

        Raises:
            ExtractionError: If any of the underlying queries fails
        """
        path_filter = path_filter or PathFilter()
        try:
            return Commit(
                id=commit_id,
                title=self._git_repository.title(commit_id),
                body=self._git_repository.body(commit_id).strip(),
                diff=self._git_repository.diff(commit_id, path_filter),
            )
        except GitCommandError as e:
            raise ExtractionError(commit_id, str(e)) from e

    def extract_commits(
        self, commit_ids: tuple[str, ...], path_filter: PathFilter | None = None
    ) -> tuple[Commit, ...]:
        """
        Extract every commit in order.

        Args:
            commit_ids: Commit hashes ordered from oldest to newest
            path_filter: Paths to restrict each diff to

        Returns:
            Tuple of commits in the same order as ``commit_ids``
        """
        commits: list[Commit] = []
        total = len(commit_ids)
        for index, commit_id in enumerate(commit_ids, start=1):
            logger.info(
                f"Collecting details for commit {index}/{total}: {commit_id}",
                commit=commit_id,
            )
            commits.append(self.extract_commit(commit_id, path_filter))
        return tuple(commits)
