"""Generative-AI proxy Pydantic models."""
from pydantic import BaseModel, field_validator


class GenerateRequest(BaseModel):
    """Model for a prompt forwarded to the model."""

    prompt: str = ""

    @field_validator("prompt", mode="before")
    @classmethod
    def coerce_prompt(cls, value: object) -> object:
        """Falsy prompts (null, false, 0) become "", numbers their text."""
        if isinstance(value, str):
            return value
        if not value:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class GenerateResponse(BaseModel):
    """Model for the generated text."""

    text: str
