"""Prompt builders for the regulation summarizer and the client drafter."""

from ..prompts import CLIENT_COMMUNICATION, SUMMARIZE_REGULATION, load_prompt

AUDIENCE_OPTIONS = [
    "Small Business Owner",
    "Individual Taxpayer",
    "Investor",
    "Client new to tax filings",
    "Corporate Executive",
]


def build_regulation_summary_prompt(regulation_text: str) -> str:
    """Prompt asking for a professional summary of a regulation.

    Raises:
        ValueError: The regulation text is blank
    """
    if not regulation_text.strip():
        raise ValueError("Please paste some regulation text to summarize.")
    return load_prompt(SUMMARIZE_REGULATION).format(regulation_text=regulation_text)


def build_client_communication_prompt(technical_text: str, audience: str = AUDIENCE_OPTIONS[0]) -> str:
    """Prompt asking for a client-friendly rewrite for an audience.

    Raises:
        ValueError: The technical text is blank
    """
    if not technical_text.strip():
        raise ValueError("Please provide some technical information to draft the communication.")
    return load_prompt(CLIENT_COMMUNICATION).format(technical_text=technical_text, audience=audience)
