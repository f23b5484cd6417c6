"""
Client GitHub — Format Guardian.

Fournit l'accès à l'API GitHub pour :
- Récupérer la PR (et ses labels)
- Lister les fichiers modifiés
- Lister / supprimer / créer les commentaires de la PR
- Ajouter des labels

Toute erreur de l'API est traduite en ApiError, sans retry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import requests
from github import Auth, Github, GithubException
from github.PullRequest import PullRequest
from github.Repository import Repository

from format_guardian.exceptions import ApiError, ConfigError
from format_guardian.models import ChangedFile, IssueComment, PullRequestInfo, PullRequestRef

logger = logging.getLogger("format_guardian.github")


@contextmanager
def _api_call(action: str, ref: PullRequestRef) -> Iterator[None]:
    """Traduit les erreurs PyGithub / réseau en ApiError."""
    try:
        yield
    except GithubException as exc:
        message = exc.data.get("message") if isinstance(exc.data, dict) else None
        raise ApiError(f"{action} ({ref}) : {message or exc}", status=exc.status) from exc
    except requests.RequestException as exc:
        raise ApiError(f"{action} ({ref}) : {exc}") from exc


class GitHubClient:
    """Wrapper autour de PyGithub pour les besoins de Format Guardian."""

    def __init__(self, token: str, base_url: str = "https://api.github.com"):
        if not token:
            raise ConfigError("github_token non configuré.")
        self._gh = Github(auth=Auth.Token(token), base_url=base_url)
        self._repos: dict[str, Repository] = {}
        self._pulls: dict[PullRequestRef, PullRequest] = {}

    # ── Handles (cache du run) ──────────────

    def _get_repo(self, ref: PullRequestRef) -> Repository:
        if ref.full_name not in self._repos:
            self._repos[ref.full_name] = self._gh.get_repo(ref.full_name)
        return self._repos[ref.full_name]

    def _get_pull(self, ref: PullRequestRef) -> PullRequest:
        if ref not in self._pulls:
            self._pulls[ref] = self._get_repo(ref).get_pull(ref.number)
        return self._pulls[ref]

    # ── PR metadata ─────────────────────────

    def get_pull_request(self, ref: PullRequestRef) -> PullRequestInfo:
        """Récupère la PR et son jeu de labels courant."""
        with _api_call("Lecture de la PR", ref):
            pr = self._get_pull(ref)
            return PullRequestInfo(
                number=pr.number,
                title=pr.title or "",
                labels=[label.name for label in pr.labels],
            )

    # ── Fichiers modifiés ───────────────────

    def list_changed_files(self, ref: PullRequestRef) -> list[ChangedFile]:
        """Liste tous les fichiers modifiés (toutes pages), dans l'ordre de l'API."""
        with _api_call("Liste des fichiers", ref):
            return [
                ChangedFile(
                    filename=f.filename,
                    status=f.status or "",
                    additions=f.additions,
                    deletions=f.deletions,
                )
                for f in self._get_pull(ref).get_files()
            ]

    # ── Commentaires ────────────────────────

    def list_issue_comments(self, ref: PullRequestRef) -> list[IssueComment]:
        """Liste tous les commentaires de la PR (fil de l'issue associée)."""
        with _api_call("Liste des commentaires", ref):
            return [
                IssueComment(
                    id=c.id,
                    user_login=c.user.login if c.user else "",
                    body=c.body or "",
                )
                for c in self._get_pull(ref).get_issue_comments()
            ]

    def delete_comment(self, ref: PullRequestRef, comment_id: int) -> None:
        with _api_call(f"Suppression du commentaire {comment_id}", ref):
            self._get_pull(ref).get_issue_comment(comment_id).delete()
        logger.info(f"Commentaire {comment_id} supprimé sur {ref}")

    def create_comment(self, ref: PullRequestRef, body: str) -> None:
        """Poste un commentaire sur la PR."""
        with _api_call("Création du commentaire", ref):
            self._get_pull(ref).create_issue_comment(body)
        logger.info(f"Commentaire posté sur {ref}")

    # ── Labels ──────────────────────────────

    def add_labels(self, ref: PullRequestRef, labels: list[str]) -> None:
        with _api_call(f"Ajout des labels {labels}", ref):
            self._get_pull(ref).add_to_labels(*labels)
        logger.info(f"Labels {labels} ajoutés sur {ref}")
