#!/usr/bin/env python3
"""
🧪 Simulation locale d'un run Format Guardian.

Exécute l'orchestrateur contre un faux client GitHub en mémoire :
  - Pas besoin de token ni de réseau
  - Affiche les appels API simulés et l'aperçu du commentaire

Usage :
  python scripts/simulate_run.py
  python scripts/simulate_run.py --scenario clean
  python scripts/simulate_run.py --scenario rerun
"""

from __future__ import annotations

import asyncio
import sys
from itertools import count
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# Ajouter le projet au path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from format_guardian.config import BOT_LOGIN, FORMAT_LABEL, Settings
from format_guardian.context import ActionContext
from format_guardian.models import ChangedFile, IssueComment, PullRequestInfo, PullRequestRef
from format_guardian.orchestrator import FormatCheckOrchestrator

console = Console()

PATTERN = r"\.(js|jsx|ts|tsx|css|scss|md)$"

SCENARIOS = {
    "findings": ["src/App.tsx", "src/api/client.py", "README.md", "styles/main.scss"],
    "clean": ["src/api/client.py", "pyproject.toml"],
    "rerun": ["src/App.tsx", "docs/setup.md"],
}


class InMemoryGitHub:
    """Faux client GitHub : journalise chaque appel."""

    def __init__(self, files: list[str], labels: list[str] | None = None):
        self.files = [ChangedFile(filename=name, status="modified") for name in files]
        self.labels = list(labels or [])
        self.comments: list[IssueComment] = [IssueComment(id=1, user_login="octocat", body="LGTM")]
        self.calls: list[str] = []
        self._ids = count(100)

    def get_pull_request(self, ref: PullRequestRef) -> PullRequestInfo:
        self.calls.append(f"GET  pulls/{ref.number}")
        return PullRequestInfo(number=ref.number, title="Simulated PR", labels=list(self.labels))

    def list_changed_files(self, ref: PullRequestRef) -> list[ChangedFile]:
        self.calls.append(f"GET  pulls/{ref.number}/files")
        return list(self.files)

    def list_issue_comments(self, ref: PullRequestRef) -> list[IssueComment]:
        self.calls.append(f"GET  issues/{ref.number}/comments")
        return list(self.comments)

    def delete_comment(self, ref: PullRequestRef, comment_id: int) -> None:
        self.calls.append(f"DEL  issues/comments/{comment_id}")
        self.comments = [c for c in self.comments if c.id != comment_id]

    def create_comment(self, ref: PullRequestRef, body: str) -> None:
        self.calls.append(f"POST issues/{ref.number}/comments")
        self.comments.append(IssueComment(id=next(self._ids), user_login=BOT_LOGIN, body=body))

    def add_labels(self, ref: PullRequestRef, labels: list[str]) -> None:
        self.calls.append(f"POST issues/{ref.number}/labels {labels}")
        self.labels.extend(labels)


# ════════════════════════════════════════════
#  SIMULATION
# ════════════════════════════════════════════

async def run_simulation(scenario: str) -> None:
    settings = Settings(github_token="simulated", files=PATTERN)
    context = ActionContext(owner="acme", repo="webapp", pr_number=42, event_name="pull_request")
    gh = InMemoryGitHub(SCENARIOS[scenario])
    orchestrator = FormatCheckOrchestrator(settings, github_client=gh)

    console.print(Panel(
        f"[bold cyan]Scénario : {scenario}[/]\nPattern : {PATTERN}",
        title="🧪 Format Guardian — Simulation",
    ))

    runs = 2 if scenario == "rerun" else 1
    for _ in range(runs):
        result = await orchestrator.run(context)

    table = Table(title="Appels API simulés")
    table.add_column("#", justify="right")
    table.add_column("Appel", style="cyan")
    for i, call in enumerate(gh.calls, 1):
        table.add_row(str(i), call)
    console.print(table)

    console.print(f"\n  Fichiers à formater : {result.findings or 'aucun'}")
    console.print(f"  Label '{FORMAT_LABEL}' : {'présent' if FORMAT_LABEL in gh.labels else 'absent'}")

    bot_comments = [c for c in gh.comments if c.user_login == BOT_LOGIN]
    if bot_comments:
        console.print(Panel(
            Text(bot_comments[-1].body),
            title="💬 Aperçu du commentaire PR (Markdown)",
            border_style="dim",
        ))
    console.print()


# ════════════════════════════════════════════
#  CLI
# ════════════════════════════════════════════

@click.command()
@click.option(
    "--scenario", "-s",
    type=click.Choice([*SCENARIOS, "all"]),
    default="all",
    help="Scénario à simuler (findings, clean, rerun, ou all)",
)
def main(scenario: str):
    """🧪 Simule un run Format Guardian en local sans API."""
    names = list(SCENARIOS) if scenario == "all" else [scenario]
    for name in names:
        asyncio.run(run_simulation(name))
        console.print("━" * 80)


if __name__ == "__main__":
    main()
