"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod

from commit_ticker.git.domain.value_objects import PathFilter


class GitRepository(ABC):
    """Interface for read-only Git queries.

    Every method raises ``GitCommandError`` when the underlying query fails.
    """

    @abstractmethod
    def resolve(self, ref: str) -> str:
        """
        Resolve a reference to the canonical hash of a commit.

        Args:
            ref: Branch name, tag, short or long hash, or symbolic ref such as HEAD

        Returns:
            Full commit hash
        """
        ...

    @abstractmethod
    def list_range(self, from_id: str, to_id: str) -> tuple[str, ...]:
        """
        List commits reachable from ``to_id`` but not from ``from_id``.

        Args:
            from_id: Hash of the older commit (excluded)
            to_id: Hash of the newer commit (included)

        Returns:
            Tuple of commit hashes ordered from oldest to newest
        """
        ...

    @abstractmethod
    def title(self, commit_id: str) -> str:
        """
        Get the subject line of a commit message.

        Args:
            commit_id: Hash of the commit

        Returns:
            Subject line
        """
        ...

    @abstractmethod
    def body(self, commit_id: str) -> str:
        """
        Get the commit message without its subject line.

        Args:
            commit_id: Hash of the commit

        Returns:
            Message body, possibly empty
        """
        ...

    @abstractmethod
    def diff(self, commit_id: str, path_filter: PathFilter) -> str:
        """
        Get the patch introduced by a commit.

        Args:
            commit_id: Hash of the commit
            path_filter: Paths to restrict the patch to (empty for all paths)

        Returns:
            Patch text in git's native format
        """
        ...
