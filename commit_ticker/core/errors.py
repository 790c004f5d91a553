"""Error taxonomy for commit summarization."""

from enum import Enum


class ErrorKind(str, Enum):
    """Kind of failure surfaced at the top level."""

    VALIDATION = "validation"
    RESOLUTION = "resolution"
    RANGE = "range"
    EXTRACTION = "extraction"
    MODEL = "model"


class CommitTickerError(Exception):
    """Base class for every error that aborts a summarization run."""

    kind: ErrorKind

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message)


class ValidationError(CommitTickerError):
    """Malformed configuration value."""

    kind = ErrorKind.VALIDATION


class ResolutionError(CommitTickerError):
    """A reference could not be resolved to a commit."""

    kind = ErrorKind.RESOLUTION

    def __init__(self, ref: str, detail: str | None = None) -> None:
        self.ref = ref
        super().__init__(f'Failed to resolve commit reference "{ref}": {detail}', detail)


class RangeError(CommitTickerError):
    """Listing the commits between two identifiers failed."""

    kind = ErrorKind.RANGE

    def __init__(self, from_id: str, to_id: str, detail: str | None = None) -> None:
        self.from_id = from_id
        self.to_id = to_id
        super().__init__(
            f"Failed to list commits between {from_id} and {to_id}: {detail}", detail
        )


class ExtractionError(CommitTickerError):
    """Reading the title, body or diff of a commit failed."""

    kind = ErrorKind.EXTRACTION

    def __init__(self, commit_id: str, detail: str | None = None) -> None:
        self.commit_id = commit_id
        super().__init__(f"Failed to read details of commit {commit_id}: {detail}", detail)


class ModelError(CommitTickerError):
    """The inference call failed or returned no usable text."""

    kind = ErrorKind.MODEL


class GitCommandError(RuntimeError):
    """Raised by a git repository implementation when a query fails."""

    def __init__(
        self, args: list[str] | tuple[str, ...], returncode: int, stderr: str = ""
    ) -> None:
        self.command = tuple(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = self.stderr or f"git exited with status {returncode}"
        super().__init__(message)
