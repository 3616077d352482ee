"""Prompt assembly from collected context and retrieved documents."""

from collections.abc import Mapping, Sequence

from .models import TOPIC_KEY, USER_NAME_KEY

ANSWER_CUE = "Answer:"
DOCUMENT_SEPARATOR = "\n\n"


class MissingContextFieldError(KeyError):
    """Raised when the collected context lacks a field the prompt needs."""

    def __init__(self, field: str) -> None:
        """Store the missing field name."""
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"Collected context is missing required field: {self.field}"


def _require(context: Mapping[str, str], key: str) -> str:
    try:
        return context[key]
    except KeyError:
        raise MissingContextFieldError(key) from None


def build_prompt(documents: Sequence[str], context: Mapping[str, str]) -> str:
    """Build the prompt sent to the completion model.

    The prompt is a two-line header naming the user and topic, the retrieved
    documents joined by blank lines, and a trailing ``Answer:`` cue.

    Args:
        documents: Retrieved document texts, in retrieval order.
        context: Collected context holding ``UserName`` and ``Topic``.

    Returns:
        str: The assembled prompt.

    Raises:
        MissingContextFieldError: If ``UserName`` or ``Topic`` is absent.
    """
    user_name = _require(context, USER_NAME_KEY)
    topic = _require(context, TOPIC_KEY)

    header = f"User: {user_name}\nTopic: {topic}"
    document_block = DOCUMENT_SEPARATOR.join(documents)

    return f"{header}\n\n{document_block}\n\n{ANSWER_CUE}"
