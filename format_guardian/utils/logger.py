"""
Logger — Format Guardian.

Configure un logging coloré (via Rich) sur stderr, lisible dans les
logs du runner GitHub Actions.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from format_guardian.config import get_settings


_configured = False


def setup_logging() -> None:
    """Configure le logging global une seule fois."""
    global _configured
    if _configured:
        return
    _configured = True

    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    console = Console(stderr=True)
    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s — %(message)s"))

    root = logging.getLogger("format_guardian")
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # Réduire le bruit des libs
    for lib in ("urllib3", "github"):
        logging.getLogger(lib).setLevel(logging.WARNING)
