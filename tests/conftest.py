"""Shared test fixtures"""

import shutil
import subprocess
from pathlib import Path

import pytest

from commit_ticker.core.config import ModelSettings, SummaryConfig
from commit_ticker.core.errors import ModelError
from commit_ticker.git.repositories.in_memory import InMemoryGitRepository
from commit_ticker.git.services.git_service import GitService
from commit_ticker.summarization.domain.value_objects import GenerationRequest
from commit_ticker.summarization.repositories.interfaces import LLMAgentRepository

DIFF_A = "diff --git a/README.md b/README.md\n+# Project\n"
DIFF_B = "diff --git a/src/app.py b/src/app.py\n@@ -0,0 +1 @@\n+print('hi')\n"
DIFF_C_SRC = "diff --git a/src/util.py b/src/util.py\n@@ -0,0 +1 @@\n+X = 1\n"
DIFF_C_DOCS = "diff --git a/docs/guide.md b/docs/guide.md\n+Guide\n"
DIFF_D = "diff --git a/src/app.py b/src/app.py\n@@ -1 +1 @@\n-print('hi')\n+print('bye')\n"


class RecordingAgent(LLMAgentRepository):
    """LLM agent that records requests and returns canned answers"""

    def __init__(self, response: str = "## Summary\n\n- Changes") -> None:
        self.response = response
        self.requests: list[GenerationRequest] = []

    def generate(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        if not self.response:
            raise ModelError("Model response did not include any content.")
        return self.response


@pytest.fixture
def repository() -> InMemoryGitRepository:
    """Linear history A-B-C-D with main at D and tag v1 at A"""
    repo = InMemoryGitRepository()
    repo.add_commit("A" * 40, "Initial commit", files={"README.md": DIFF_A})
    repo.add_commit(
        "B" * 40,
        "Add app entry point\n\nPrints a greeting.\n",
        files={"src/app.py": DIFF_B},
    )
    repo.add_commit(
        "C" * 40,
        "Add util and guide",
        files={"src/util.py": DIFF_C_SRC, "docs/guide.md": DIFF_C_DOCS},
    )
    repo.add_commit("D" * 40, "Say bye\n\n  Changes the greeting.  ", files={"src/app.py": DIFF_D})
    repo.set_ref("main", "D" * 40)
    repo.set_ref("v1", "A" * 40)
    return repo


@pytest.fixture
def git_service(repository: InMemoryGitRepository) -> GitService:
    return GitService(repository)


@pytest.fixture
def agent() -> RecordingAgent:
    return RecordingAgent()


@pytest.fixture
def config() -> SummaryConfig:
    """Range v1..main with the start commit and a test key"""
    return SummaryConfig(
        start_ref="v1",
        end_ref="main",
        model=ModelSettings(api_key="test-token"),
    )


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Real repository with three commits and an annotated tag on the first"""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "dev@example.com")
    _git(repo, "config", "user.name", "Dev")
    _git(repo, "config", "commit.gpgsign", "false")
    _git(repo, "config", "tag.gpgsign", "false")

    (repo / "README.md").write_text("# Project\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "Initial commit")
    _git(repo, "tag", "-a", "v1", "-m", "Release v1")

    (repo / "src").mkdir()
    (repo / "src" / "app.py").write_text("print('hi')\n")
    (repo / "docs").mkdir()
    (repo / "docs" / "guide.md").write_text("Guide\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "Add app and guide", "-m", "Body line one.\nBody line two.")

    (repo / "src" / "app.py").write_text("print('bye')\n")
    _git(repo, "commit", "-q", "-am", "Say bye")
    return repo


@pytest.fixture
def git():
    """Run a git command in a repository and return stripped stdout"""
    return _git
