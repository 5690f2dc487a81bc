"""Prompt texts sent to the model.

Each prompt is a .txt file shipped with the package. A file with the same
name under ./prompts/ in the working directory takes precedence, so firms
can reword instructions without touching the install.

Templates (summarize_regulation, client_communication) use str.format
placeholders; instructions (tax_assistant, app_explanation) are sent as-is.
"""

from functools import lru_cache
from pathlib import Path

_PACKAGE_DIR = Path(__file__).parent

TAX_ASSISTANT = "tax_assistant"
APP_EXPLANATION = "app_explanation"
SUMMARIZE_REGULATION = "summarize_regulation"
CLIENT_COMMUNICATION = "client_communication"


def candidate_paths(name: str) -> list[Path]:
    """Locations searched for a prompt, highest precedence first."""
    filename = f"{name}.txt"
    return [Path.cwd() / "prompts" / filename, _PACKAGE_DIR / filename]


@lru_cache(maxsize=8)
def load_prompt(name: str) -> str:
    """Read a prompt by name (file name without .txt).

    Raises:
        FileNotFoundError: No candidate location has the file
    """
    paths = candidate_paths(name)
    for path in paths:
        if path.is_file():
            return path.read_text(encoding="utf-8")

    searched = "\n".join(f"  - {path}" for path in paths)
    raise FileNotFoundError(f"Prompt '{name}' not found. Searched:\n{searched}")


def get_tax_assistant_instruction() -> str:
    """Default system instruction for research and drafting."""
    return load_prompt(TAX_ASSISTANT)


def get_app_explanation_instruction() -> str:
    """Instruction for the chatbot that explains this application."""
    return load_prompt(APP_EXPLANATION)


__all__ = [
    "APP_EXPLANATION",
    "CLIENT_COMMUNICATION",
    "SUMMARIZE_REGULATION",
    "TAX_ASSISTANT",
    "candidate_paths",
    "get_app_explanation_instruction",
    "get_tax_assistant_instruction",
    "load_prompt",
]
