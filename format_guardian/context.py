"""
Contexte d'exécution — Format Guardian.

Construit une seule fois à l'entrée du processus à partir des variables
fournies par le runner GitHub Actions, puis passé explicitement à
l'orchestrateur.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from format_guardian.exceptions import ConfigError
from format_guardian.models import PullRequestRef

logger = logging.getLogger("format_guardian.context")


class ActionContext(BaseModel):
    """Contexte de l'événement déclencheur (lecture seule)."""
    owner: str
    repo: str
    pr_number: int = 0
    event_name: str = ""
    payload: dict[str, Any] = Field(default_factory=dict)

    # ── Construction ────────────────────────

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        event_path: Optional[str] = None,
        repository: Optional[str] = None,
        pr_number: Optional[int] = None,
    ) -> ActionContext:
        """
        Lit GITHUB_REPOSITORY, GITHUB_EVENT_NAME et le payload JSON pointé
        par GITHUB_EVENT_PATH.

        ``repository`` (owner/repo) et ``pr_number`` priment sur l'environnement
        (exécution locale via la CLI).

        Raises:
            ConfigError: dépôt introuvable ou payload illisible.
        """
        env = os.environ if env is None else env
        payload = cls._load_payload(event_path or env.get("GITHUB_EVENT_PATH", ""))
        owner, repo = cls._resolve_repo(
            repository or env.get("GITHUB_REPOSITORY", ""), payload
        )

        if pr_number is None:
            pr_number = (payload.get("pull_request") or {}).get("number") or 0
        if not pr_number:
            logger.warning(
                "Aucun numéro de PR dans le payload de l'événement — utilisation de 0."
            )

        return cls(
            owner=owner,
            repo=repo,
            pr_number=int(pr_number),
            event_name=env.get("GITHUB_EVENT_NAME", ""),
            payload=payload,
        )

    @staticmethod
    def _load_payload(event_path: str) -> dict[str, Any]:
        if not event_path:
            return {}
        path = Path(event_path)
        if not path.exists():
            logger.warning(f"Payload d'événement introuvable : {event_path}")
            return {}
        try:
            return json.loads(path.read_text(encoding="utf-8")) or {}
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Payload d'événement illisible ({event_path}) : {exc}") from exc

    @staticmethod
    def _resolve_repo(full_name: str, payload: dict[str, Any]) -> tuple[str, str]:
        if full_name:
            owner, _, repo = full_name.partition("/")
            if owner and repo:
                return owner, repo
            raise ConfigError(f"GITHUB_REPOSITORY invalide : '{full_name}' (attendu owner/repo)")

        repository = payload.get("repository") or {}
        owner = (repository.get("owner") or {}).get("login", "")
        repo = repository.get("name", "")
        if owner and repo:
            return owner, repo
        raise ConfigError(
            "Dépôt introuvable : GITHUB_REPOSITORY absent et payload sans 'repository'."
        )

    # ── Dérivés ─────────────────────────────

    def pull_request_ref(self) -> PullRequestRef:
        return PullRequestRef(owner=self.owner, repo=self.repo, number=self.pr_number)
