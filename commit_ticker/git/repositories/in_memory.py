"""In-memory Git repository used as a fixture."""

from dataclasses import dataclass, field

from commit_ticker.core.errors import GitCommandError
from commit_ticker.git.domain.value_objects import PathFilter
from commit_ticker.git.repositories.interfaces import GitRepository


@dataclass
class FakeCommit:
    """A commit stored by InMemoryGitRepository."""

    id: str
    message: str
    parents: tuple[str, ...] = ()
    files: dict[str, str] = field(default_factory=dict)


class InMemoryGitRepository(GitRepository):
    """GitRepository backed by a dict of commits and a dict of refs.

    ``files`` maps a path to the patch text for that path; ``diff`` joins the
    patches of the paths selected by the filter. Path patterns match exactly or
    as a directory prefix.
    """

    def __init__(self) -> None:
        self._commits: dict[str, FakeCommit] = {}
        self._refs: dict[str, str] = {}
        self.calls: list[tuple[str, ...]] = []

    def add_commit(
        self,
        commit_id: str,
        message: str,
        parents: tuple[str, ...] | None = None,
        files: dict[str, str] | None = None,
    ) -> FakeCommit:
        """Add a commit; parents default to the current HEAD."""
        if parents is None:
            head = self._refs.get("HEAD")
            parents = (head,) if head else ()
        commit = FakeCommit(commit_id, message, tuple(parents), dict(files or {}))
        self._commits[commit_id] = commit
        self._refs["HEAD"] = commit_id
        return commit

    def set_ref(self, name: str, commit_id: str) -> None:
        self._refs[name] = commit_id

    def resolve(self, ref: str) -> str:
        self.calls.append(("resolve", ref))
        if ref in self._refs:
            return self._refs[ref]
        if ref in self._commits:
            return ref
        matches = [commit_id for commit_id in self._commits if commit_id.startswith(ref)]
        if len(matches) == 1 and ref:
            return matches[0]
        if len(matches) > 1:
            raise GitCommandError(["rev-parse", ref], 128, f"short object ID {ref} is ambiguous")
        raise GitCommandError(["rev-parse", ref], 128, f"unknown revision '{ref}'")

    def list_range(self, from_id: str, to_id: str) -> tuple[str, ...]:
        self.calls.append(("list_range", from_id, to_id))
        self._get(from_id)
        self._get(to_id)
        excluded = self._ancestors(from_id)
        return tuple(
            commit_id for commit_id in self._topological(to_id) if commit_id not in excluded
        )

    def title(self, commit_id: str) -> str:
        self.calls.append(("title", commit_id))
        return self._get(commit_id).message.split("\n", 1)[0]

    def body(self, commit_id: str) -> str:
        self.calls.append(("body", commit_id))
        parts = self._get(commit_id).message.split("\n", 1)
        return parts[1].strip() if len(parts) > 1 else ""

    def diff(self, commit_id: str, path_filter: PathFilter) -> str:
        self.calls.append(("diff", commit_id, *path_filter.patterns))
        files = self._get(commit_id).files
        selected = [path for path in files if self._matches(path, path_filter)]
        return "".join(files[path] for path in selected)

    @staticmethod
    def _matches(path: str, path_filter: PathFilter) -> bool:
        if not path_filter:
            return True
        return any(
            path == pattern or path.startswith(pattern.rstrip("/") + "/")
            for pattern in path_filter.patterns
        )

    def _get(self, commit_id: str) -> FakeCommit:
        try:
            return self._commits[commit_id]
        except KeyError:
            raise GitCommandError(["cat-file", commit_id], 128, f"bad object {commit_id}") from None

    def _ancestors(self, commit_id: str) -> set[str]:
        seen: set[str] = set()
        stack = [commit_id]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            stack.extend(self._get(current).parents)
        return seen

    def _topological(self, commit_id: str) -> list[str]:
        """Ancestors of ``commit_id`` with parents before children."""
        order: list[str] = []
        visited: set[str] = set()

        def visit(current: str) -> None:
            if current in visited:
                return
            visited.add(current)
            for parent in self._get(current).parents:
                visit(parent)
            order.append(current)

        visit(commit_id)
        return order
