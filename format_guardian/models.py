"""
Modèles de données — Format Guardian.

Objets échangés entre le client GitHub, le contexte d'exécution
et l'orchestrateur.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ════════════════════════════════════════════
#  Référence PR (entrée)
# ════════════════════════════════════════════

class PullRequestRef(BaseModel):
    """Identifie une Pull Request : owner/repo#number."""
    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    number: int = Field(default=0, description="0 si le contexte n'en fournit pas")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return f"{self.full_name}#{self.number}"


# ════════════════════════════════════════════
#  Données lues depuis l'API
# ════════════════════════════════════════════

class PullRequestInfo(BaseModel):
    """Sous-ensemble de la PR utilisé par le pipeline."""
    number: int
    title: str = ""
    labels: list[str] = Field(default_factory=list)


class ChangedFile(BaseModel):
    filename: str
    status: str = ""  # added / modified / removed / renamed
    additions: int = 0
    deletions: int = 0


class IssueComment(BaseModel):
    id: int
    user_login: str = ""
    body: str = ""


# ════════════════════════════════════════════
#  Résultat d'un run
# ════════════════════════════════════════════

class FormatCheckResult(BaseModel):
    """Bilan d'une exécution de l'orchestrateur."""
    pull_request: PullRequestRef
    findings: list[str] = Field(default_factory=list)  # ordre de l'API
    deleted_comment_id: Optional[int] = None
    comment_posted: bool = False
    label_added: bool = False

    @property
    def needs_formatting(self) -> bool:
        return bool(self.findings)
