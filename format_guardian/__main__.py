"""
Point d'entrée CLI — Format Guardian.

Modes :
  - Action : python -m format_guardian   (contexte lu depuis l'environnement du runner)
  - Local  : python -m format_guardian --repo owner/repo --pr 42
"""

from __future__ import annotations

import asyncio
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from format_guardian.config import FORMAT_LABEL, get_settings
from format_guardian.context import ActionContext
from format_guardian.models import FormatCheckResult
from format_guardian.orchestrator import FormatCheckOrchestrator
from format_guardian.utils.logger import setup_logging

console = Console()
logger = logging.getLogger("format_guardian.cli")


# ════════════════════════════════════════════
#  CLI
# ════════════════════════════════════════════

@click.command()
@click.option("--repo", "-r", default=None, help="Repository (owner/repo), sinon GITHUB_REPOSITORY")
@click.option("--pr", "-p", "pr_number", type=int, default=None, help="Numéro de la PR")
@click.option("--event-path", default=None, help="Payload JSON de l'événement, sinon GITHUB_EVENT_PATH")
@click.option("--json-output", is_flag=True, help="Sortie JSON brute")
def main(repo: str | None, pr_number: int | None, event_path: str | None, json_output: bool) -> None:
    """🤖 Format Guardian — signale les fichiers à formater d'une Pull Request."""
    setup_logging()

    try:
        settings = get_settings()
        settings.require_token()
        context = ActionContext.from_env(
            event_path=event_path, repository=repo, pr_number=pr_number
        )
        result = asyncio.run(FormatCheckOrchestrator(settings).run(context))
    except Exception as exc:
        logger.error(f"Échec : {exc}", exc_info=logger.isEnabledFor(logging.DEBUG))
        click.echo(f"::error::{_escape_command_data(str(exc))}")
        sys.exit(1)

    if json_output:
        click.echo(result.model_dump_json(indent=2))
    else:
        _display_result(result)


def _escape_command_data(message: str) -> str:
    """Encode un message pour une workflow command GitHub (``::error::``)."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _display_result(result: FormatCheckResult) -> None:
    """Affiche le bilan du run dans le terminal."""
    if not result.needs_formatting:
        console.print(Panel(
            f"[bold green]✅ Aucun fichier à formater[/] — {result.pull_request}",
            title="🤖 Format Guardian",
            border_style="green",
        ))
        return

    lines = [f"[bold yellow]⚠️ {len(result.findings)} fichier(s) à formater[/] — {result.pull_request}", ""]
    lines += [f"  • {escape(name)}" for name in result.findings]
    lines.append("")
    if result.deleted_comment_id is not None:
        lines.append(f"Ancien commentaire supprimé : {result.deleted_comment_id}")
    lines.append(f"Commentaire posté : {'oui' if result.comment_posted else 'non'}")
    lines.append(f"Label '{FORMAT_LABEL}' ajouté : {'oui' if result.label_added else 'déjà présent'}")

    console.print(Panel("\n".join(lines), title="🤖 Format Guardian", border_style="yellow"))


if __name__ == "__main__":
    main()
