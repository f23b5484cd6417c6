"""
Exceptions — Format Guardian.

Aucune erreur n'est récupérable au cours d'une exécution : chacune
interrompt le run et fait échouer l'action.
"""

from __future__ import annotations


class FormatGuardianError(Exception):
    """Erreur de base de Format Guardian."""


class ConfigError(FormatGuardianError):
    """Configuration absente ou invalide (token manquant, dépôt introuvable…)."""


class ApiError(FormatGuardianError):
    """Échec d'un appel à l'API GitHub (auth, not found, rate limit, réseau)."""

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        prefix = f"[{status}] " if status is not None else ""
        super().__init__(f"{prefix}{message}")


class PatternError(FormatGuardianError):
    """Expression régulière ``files`` invalide."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Pattern invalide '{pattern}' : {reason}")
