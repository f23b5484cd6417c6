"""
Fixtures pytest — Format Guardian.
"""

from itertools import count
from unittest.mock import MagicMock

import pytest

from format_guardian.config import BOT_LOGIN, Settings
from format_guardian.context import ActionContext
from format_guardian.models import (
    ChangedFile,
    IssueComment,
    PullRequestInfo,
    PullRequestRef,
)

_ACTION_ENV = (
    "INPUT_GITHUB_TOKEN",
    "GITHUB_TOKEN",
    "INPUT_FILES",
    "INPUT_PR_BODY",
    "GITHUB_API_URL",
    "LOG_LEVEL",
    "GITHUB_REPOSITORY",
    "GITHUB_EVENT_PATH",
    "GITHUB_EVENT_NAME",
)

SIMPLE_TEMPLATE = """\
## Fichiers à formater
{{#files}}
- {{.}}
{{/files}}
### Après formatage
{{#formattedFiles}}
- {{.}}
{{/formattedFiles}}
"""


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch):
    """Isole les tests des variables du runner GitHub Actions."""
    for name in _ACTION_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    """Settings de test : fichiers JS/TS."""
    return Settings(github_token="test-token", files=r"\.(js|ts)$", pr_body=SIMPLE_TEMPLATE)


@pytest.fixture
def action_context() -> ActionContext:
    """Contexte d'un événement pull_request sur acme/webapp#42."""
    return ActionContext(owner="acme", repo="webapp", pr_number=42, event_name="pull_request")


@pytest.fixture
def pr_ref() -> PullRequestRef:
    return PullRequestRef(owner="acme", repo="webapp", number=42)


def make_files(*names: str) -> list[ChangedFile]:
    return [ChangedFile(filename=name, status="modified") for name in names]


@pytest.fixture
def mock_gh():
    """Client GitHub mocké : PR sans label, trois fichiers, aucun commentaire."""
    gh = MagicMock()
    gh.get_pull_request.return_value = PullRequestInfo(number=42, title="Add feature", labels=[])
    gh.list_changed_files.return_value = make_files("a.ts", "b.md", "c.js")
    gh.list_issue_comments.return_value = []
    return gh


class FakeGitHub:
    """Client GitHub en mémoire : conserve commentaires et labels entre deux runs."""

    def __init__(self, files: list[ChangedFile], labels: list[str] | None = None):
        self.files = files
        self.labels = list(labels or [])
        self.comments: list[IssueComment] = []
        self._ids = count(1000)

    def get_pull_request(self, ref):
        return PullRequestInfo(number=ref.number, labels=list(self.labels))

    def list_changed_files(self, ref):
        return list(self.files)

    def list_issue_comments(self, ref):
        return list(self.comments)

    def delete_comment(self, ref, comment_id):
        self.comments = [c for c in self.comments if c.id != comment_id]

    def create_comment(self, ref, body):
        self.comments.append(IssueComment(id=next(self._ids), user_login=BOT_LOGIN, body=body))

    def add_labels(self, ref, labels):
        self.labels.extend(label for label in labels if label not in self.labels)


@pytest.fixture
def fake_gh() -> FakeGitHub:
    return FakeGitHub(make_files("a.ts", "b.md", "c.js"))
