"""Data models for the MCP request pipeline."""

from dataclasses import dataclass, field
from typing import Any

USER_NAME_KEY = "UserName"
TOPIC_KEY = "Topic"

CollectedContext = dict[str, str]


@dataclass(frozen=True)
class UserInput:
    """Incoming user request."""

    user_name: str
    topic: str


@dataclass
class DocumentChunk:
    """Represents a chunk of text from a document."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
