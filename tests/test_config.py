"""Tests de la configuration."""

import pytest

from format_guardian.config import DEFAULT_PR_BODY, Settings, get_settings
from format_guardian.exceptions import ConfigError


class TestSettings:
    """Lecture des inputs de l'action depuis l'environnement."""

    def test_reads_action_inputs(self, monkeypatch):
        monkeypatch.setenv("INPUT_GITHUB_TOKEN", "ghs_abc")
        monkeypatch.setenv("INPUT_FILES", r"\.(js|ts)$")
        monkeypatch.setenv("INPUT_PR_BODY", "{{#files}}{{.}}{{/files}}")

        settings = get_settings()

        assert settings.github_token == "ghs_abc"
        assert settings.files == r"\.(js|ts)$"
        assert settings.pr_body == "{{#files}}{{.}}{{/files}}"
        assert settings.github_configured

    def test_inputs_are_stripped(self, monkeypatch):
        """Comme getInput() : espaces et retours à la ligne retirés."""
        monkeypatch.setenv("INPUT_GITHUB_TOKEN", "  ghs_abc\n")
        monkeypatch.setenv("INPUT_FILES", " md ")

        settings = Settings()

        assert settings.github_token == "ghs_abc"
        assert settings.files == "md"

    def test_github_token_fallback(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "from-env")
        assert Settings().github_token == "from-env"

    def test_missing_token(self):
        settings = Settings()
        assert settings.github_token == ""
        assert not settings.github_configured

    def test_defaults(self):
        settings = Settings()
        assert settings.files == ""
        assert settings.pr_body == DEFAULT_PR_BODY
        assert settings.github_api_url == "https://api.github.com"
        assert settings.log_level == "INFO"

    def test_empty_body_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("INPUT_PR_BODY", "")
        assert Settings().pr_body == DEFAULT_PR_BODY

    def test_default_body_has_both_sections(self):
        assert "{{#files}}" in DEFAULT_PR_BODY
        assert "{{#formattedFiles}}" in DEFAULT_PR_BODY

    def test_default_body_survives_validation(self):
        """Le template par défaut n'est pas modifié par le strip des inputs."""
        assert DEFAULT_PR_BODY == DEFAULT_PR_BODY.strip()
        assert Settings().pr_body == DEFAULT_PR_BODY
        assert Settings(pr_body=DEFAULT_PR_BODY).pr_body == DEFAULT_PR_BODY

    def test_require_token(self, monkeypatch):
        with pytest.raises(ConfigError, match="github_token"):
            Settings().require_token()

        monkeypatch.setenv("INPUT_GITHUB_TOKEN", "ghs_abc")
        Settings().require_token()
