"""
Orchestrateur principal — Format Guardian.

Enchaîne séquentiellement, pour une seule PR :
  Étape 1 — Vérification de la configuration (token)
  Étape 2 — Lecture de la PR et de ses fichiers modifiés
  Étape 3 — Filtrage des fichiers à formater
  Étape 4 — Remplacement du commentaire du bot
  Étape 5 — Pose du label ``needs-formatting``

Aucun retry : toute erreur interrompt le run.
"""

from __future__ import annotations

import json
import logging
import re

from format_guardian.config import BOT_LOGIN, FORMAT_LABEL, Settings, get_settings
from format_guardian.context import ActionContext
from format_guardian.exceptions import PatternError
from format_guardian.integrations.github_client import GitHubClient
from format_guardian.models import (
    ChangedFile,
    FormatCheckResult,
    IssueComment,
    PullRequestRef,
)
from format_guardian.utils.template import render_comment

logger = logging.getLogger("format_guardian.orchestrator")


def _dump(items: list) -> str:
    return json.dumps([item.model_dump() for item in items], indent=2)


class FormatCheckOrchestrator:
    """
    Pilote une vérification de format de bout en bout.

    Le client GitHub peut être injecté ; sinon il est construit à la
    demande avec le token des Settings.
    """

    def __init__(self, settings: Settings | None = None, github_client: GitHubClient | None = None):
        self._settings = settings or get_settings()
        self._gh = github_client

    # ── Lazy init du client ─────────────────

    def _get_github(self) -> GitHubClient:
        if self._gh is None:
            self._gh = GitHubClient(self._settings.github_token, self._settings.github_api_url)
        return self._gh

    # ════════════════════════════════════════
    #  WORKFLOW PRINCIPAL
    # ════════════════════════════════════════

    async def run(self, context: ActionContext) -> FormatCheckResult:
        """
        Point d'entrée principal : exécute la vérification complète.

        Args:
            context: contexte de l'événement déclencheur.

        Returns:
            FormatCheckResult décrivant les fichiers trouvés et les actions menées.

        Raises:
            ConfigError: token absent (aucun appel réseau n'est fait).
            PatternError: expression ``files`` invalide.
            ApiError: échec d'un appel GitHub.
        """
        logger.info("🤖 Vérification du format en cours…")

        # ── ÉTAPE 1 : Configuration ──
        self._settings.require_token()

        ref = context.pull_request_ref()
        result = FormatCheckResult(pull_request=ref)
        gh = self._get_github()

        # ── ÉTAPE 2 : PR + fichiers ──
        pull_request = gh.get_pull_request(ref)
        logger.info(f"🤖 Pull request : {ref} — {pull_request.title}")
        logger.debug(pull_request.model_dump_json(indent=2))

        files = gh.list_changed_files(ref)
        logger.info(f"🤖 {len(files)} fichier(s) modifié(s)")
        logger.debug(_dump(files))

        # ── ÉTAPE 3 : Filtrage ──
        result.findings = self.filter_files(files, self._settings.files)
        if not result.findings:
            logger.info("🤖 Aucun fichier à formater")
            return result
        logger.info(f"🤖 Fichiers à formater : {result.findings}")

        # ── ÉTAPE 4 : Commentaire ──
        stale = self._find_bot_comment(gh.list_issue_comments(ref))
        if stale is not None:
            gh.delete_comment(ref, stale.id)
            result.deleted_comment_id = stale.id

        body = render_comment(self._settings.pr_body, result.findings)
        gh.create_comment(ref, body)
        result.comment_posted = True

        # ── ÉTAPE 5 : Label ──
        result.label_added = self._ensure_label(ref, pull_request.labels)

        logger.info("🤖 Terminé")
        return result

    # ════════════════════════════════════════
    #  Helpers
    # ════════════════════════════════════════

    @staticmethod
    def filter_files(files: list[ChangedFile], pattern: str) -> list[str]:
        """
        Retourne, dans l'ordre reçu, les fichiers dont le nom contient une
        correspondance du pattern (recherche partielle, sans ancrage implicite).

        Un pattern vide ne sélectionne aucun fichier.
        """
        if not pattern:
            return []
        try:
            regex = re.compile(pattern)
        except re.error as exc:
            raise PatternError(pattern, str(exc)) from exc
        return [f.filename for f in files if regex.search(f.filename)]

    @staticmethod
    def _find_bot_comment(comments: list[IssueComment]) -> IssueComment | None:
        """Premier commentaire écrit par le bot (un seul est supprimé par run)."""
        logger.debug(_dump(comments))
        comment = next((c for c in comments if c.user_login == BOT_LOGIN), None)
        if comment is not None:
            logger.info(f"🤖 Ancien commentaire du bot trouvé : {comment.id}")
        return comment

    def _ensure_label(self, ref: PullRequestRef, labels: list[str]) -> bool:
        """Ajoute le label s'il est absent des labels lus en début de run."""
        if FORMAT_LABEL in labels:
            logger.info(f"🤖 Label '{FORMAT_LABEL}' déjà présent")
            return False
        self._get_github().add_labels(ref, [FORMAT_LABEL])
        return True
