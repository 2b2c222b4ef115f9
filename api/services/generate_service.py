"""Pass-through client for the remote generative-AI endpoint."""
import logging

import requests

from api import config

logger = logging.getLogger(__name__)


class GenerateError(Exception):
    """Raised when the upstream model cannot be reached or answers garbage."""


def build_generate_url() -> str:
    """Endpoint URL for the configured model."""
    return f"{config.GEMINI_API_BASE.rstrip('/')}/{config.GEMINI_MODEL}:generateContent"


def extract_text(data: object) -> str:
    """
    Join the text parts of the first candidate.
    Upstream error objects become "Fehler: <message>".
    """
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates")
    if isinstance(candidates, list) and candidates:
        first = candidates[0] if isinstance(candidates[0], dict) else {}
        content = first.get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if isinstance(parts, list):
            text = "".join(
                str(part.get("text") or "") for part in parts if isinstance(part, dict)
            )
            if text:
                return text
    error = data.get("error")
    if isinstance(error, dict) and error.get("message"):
        return f"Fehler: {error['message']}"
    return ""


def generate_text(prompt: str) -> str:
    """Forward a prompt to the model and return its text."""
    body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
    try:
        with requests.Session() as session:
            response = session.post(
                build_generate_url(),
                params={"key": config.GEMINI_API_KEY},
                json=body,
                timeout=config.GENERATE_TIMEOUT_SECONDS,
            )
            data = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error("Generate request failed: %s", exc)
        raise GenerateError(str(exc)) from exc

    text = extract_text(data)
    logger.info("Generate request answered with %s characters", len(text))
    return text
