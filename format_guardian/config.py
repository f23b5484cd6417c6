"""
Configuration centralisée — Format Guardian.

Les inputs de l'action arrivent par l'environnement (le runner GitHub
exporte l'input ``x`` sous ``INPUT_X``) et sont exposés via un objet
Settings validé par Pydantic.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

from format_guardian.exceptions import ConfigError

# ── Racine du projet ────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# ── Charger .env ────────────────────────────
_env_path = PROJECT_ROOT / ".env"

# ── Constantes ──────────────────────────────
FORMAT_LABEL = "needs-formatting"
BOT_LOGIN = "github-actions[bot]"

DEFAULT_PR_BODY = """\
## :warning: Prettier Format Suggestion :warning:

This PR is a suggestion to format your code using [Prettier](https://prettier.io/).
There are some files that are not formatted correctly, so I suggest you to use Prettier to format them.

Currently, the following files are not formatted correctly:

{{#files}}
- {{.}}
{{/files}}

If you want to format them, check the box below and a commit will be added to this PR with the formatted files.

- [ ] I want to format the files

<details>
<summary>Click here to see the formatted files</summary>

{{#formattedFiles}}
- {{.}}
{{/formattedFiles}}

</details>"""


class Settings(BaseSettings):
    """Inputs de l'action et paramètres d'exécution."""

    # Inputs de l'action
    github_token: str = Field(
        default="",
        validation_alias=AliasChoices("input_github_token", "github_token"),
        description="Token GitHub (secrets.GITHUB_TOKEN)",
    )
    files: str = Field(
        default="",
        validation_alias=AliasChoices("input_files", "files"),
        description="Expression régulière des fichiers à formater",
    )
    pr_body: str = Field(
        default=DEFAULT_PR_BODY,
        validation_alias=AliasChoices("input_pr_body", "pr_body"),
        description="Template Mustache du commentaire",
    )

    # Général
    github_api_url: str = Field(default="https://api.github.com")
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": str(_env_path),
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("github_token", "files", "pr_body", mode="before")
    @classmethod
    def _strip_input(cls, value: object) -> object:
        # même comportement que getInput() côté toolkit Actions
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("pr_body")
    @classmethod
    def _default_body(cls, value: str) -> str:
        return value or DEFAULT_PR_BODY

    # ── Helpers ──────────────────────────────

    @property
    def github_configured(self) -> bool:
        return bool(self.github_token)

    def require_token(self) -> None:
        """Lève ConfigError si le token est absent."""
        if not self.github_configured:
            raise ConfigError("Input requis manquant : github_token")


def get_settings() -> Settings:
    """Retourne une instance Settings lue depuis l'environnement."""
    return Settings()
