"""Pydantic models for the Bedrock invoke request and response bodies."""

from typing import Any, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError

ANTHROPIC_VERSION = "bedrock-2023-05-31"
MAX_TOKENS = 300


class Message(BaseModel):
    """A single conversation turn."""
    role: Literal["user", "assistant"] = "user"
    content: str


class InvokeRequest(BaseModel):
    """Body of a POST to /model/<modelID>/invoke."""
    model_config = ConfigDict(extra='forbid')

    anthropic_version: str = ANTHROPIC_VERSION
    messages: List[Message] = Field(..., min_length=1)
    max_tokens: int = Field(default=MAX_TOKENS, ge=1)

    @classmethod
    def for_prompt(cls, prompt: str) -> "InvokeRequest":
        return cls(messages=[Message(role="user", content=prompt)])


class TextBlock(BaseModel):
    """The first content block of a response; it must carry text."""
    text: str


class Usage(BaseModel):
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None


class InvokeResponse(BaseModel):
    """
    The parts of a Messages response we rely on.

    Only the first content block is validated as text; anything after it
    is kept as-is. Usage is informational and never fails the response.
    """
    content: List[Any] = Field(..., min_length=1)
    usage: Optional[Any] = None

    @property
    def first_block(self) -> TextBlock:
        return TextBlock.model_validate(self.content[0])

    @property
    def token_usage(self) -> Optional[Usage]:
        if not isinstance(self.usage, dict):
            return None
        try:
            return Usage.model_validate(self.usage)
        except ValidationError:
            return None
