"""API route modules."""
from api.routes import generate, phases, quiz

__all__ = ["generate", "phases", "quiz"]
