"""Prompt management module.

Externalizes prompts to text files for easy customization.
Prompts can be overridden by placing files in the working directory.
Files are read verbatim: trailing spaces are part of the prompt.
"""

from functools import lru_cache
from pathlib import Path

# Default prompts directory (package location)
_PROMPTS_DIR = Path(__file__).parent

COMPANION_PROMPT = "companion"


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt from file.

    Search order:
    1. Current working directory: ./prompts/{name}.txt
    2. Package prompts directory: mind2care/prompts/{name}.txt

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text content

    Raises:
        FileNotFoundError: If prompt file not found in any location
    """
    filename = f"{name}.txt"

    # Check working directory first (allows user overrides)
    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8")

    # Fall back to package prompts
    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8")

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def get_companion_prompt() -> str:
    """Get the instruction preamble placed in front of every chat turn."""
    return load_prompt(COMPANION_PROMPT)


def compose_prompt(user_text: str, preamble: str | None = None) -> str:
    """Join the preamble and the user's text into one prompt.

    The two are concatenated as-is; the preamble carries its own separator.
    """
    if preamble is None:
        preamble = get_companion_prompt()
    return preamble + user_text


def clear_cache() -> None:
    """Clear the prompt cache (useful after modifying prompt files)."""
    load_prompt.cache_clear()


__all__ = [
    "COMPANION_PROMPT",
    "load_prompt",
    "get_companion_prompt",
    "compose_prompt",
    "clear_cache",
]
