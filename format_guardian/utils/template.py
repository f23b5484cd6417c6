"""
Rendu du commentaire — Format Guardian.

Le template est du Mustache. Les deux bindings reçoivent la liste des
fichiers déjà jointe par des retours à la ligne : une section
``{{#files}}…{{/files}}`` est donc rendue une seule fois, avec ``{{.}}``
valant la chaîne complète.

``{{.}}`` échappe le HTML comme mustache.js : ``R&D.md`` devient
``R&amp;D.md`` dans le texte brut, et redevient ``R&D.md`` une fois le
Markdown affiché par GitHub.
"""

from __future__ import annotations

import chevron


def build_bindings(filenames: list[str]) -> dict[str, str]:
    """Construit les bindings ``files`` / ``formattedFiles`` (identiques pour l'instant)."""
    joined = "\n".join(filenames)
    return {"files": joined, "formattedFiles": joined}


def render_comment(template: str, filenames: list[str]) -> str:
    """Rend le corps du commentaire pour les fichiers donnés."""
    return chevron.render(template, build_bindings(filenames))
