"""Provider factory functions for CLI.

Centralizes creation of the LLM provider and logging setup from
environment variables. Hides configuration details from command
implementations.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from ..chat.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from ..llm import LLMProvider, create_llm_provider
from ..llm.providers.gemini import DEFAULT_MODEL

# Default console for output
_console = Console()


def configure_logging(level: str | None = None, console: Console | None = None) -> int:
    """Route library logging through Rich.

    Args:
        level: debug, info, warning or error (None reads MIND2CARE_LOG_LEVEL)
        console: Optional Rich console to log to

    Returns:
        The numeric level that was applied

    Environment variables:
        MIND2CARE_LOG_LEVEL: Fallback level (default: warning)
    """
    name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    return numeric


def get_llm(console: Console | None = None) -> LLMProvider | None:
    """Create LLM provider from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if not configured

    Environment variables:
        GEMINI_API_KEY: Gemini API key (required)
        GEMINI_MODEL: Gemini model (default: gemini-2.0-flash)
        GEMINI_TIMEOUT_MS: Transport timeout in milliseconds (default: SDK default)
    """
    con = console or _console

    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        con.print("[yellow]Warning: GEMINI_API_KEY not set, chat disabled[/yellow]")
        return None

    model = os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
    timeout_raw = os.getenv("GEMINI_TIMEOUT_MS")
    timeout = None
    if timeout_raw:
        try:
            timeout = int(timeout_raw)
        except ValueError:
            con.print(f"[yellow]Warning: ignoring invalid GEMINI_TIMEOUT_MS={timeout_raw!r}[/yellow]")

    return create_llm_provider("gemini", api_key=api_key, model=model, timeout=timeout)


def require_llm(console: Console | None = None) -> LLMProvider:
    """Get LLM provider, raising error if not configured.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance

    Raises:
        SystemExit: If LLM provider is not configured
    """
    import typer

    con = console or _console
    llm = get_llm(con)
    if not llm:
        con.print("[red]Error: LLM provider not configured[/red]")
        raise typer.Exit(code=1)
    return llm
