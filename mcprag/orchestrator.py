"""Request orchestration across the MCP pipeline stages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .collector import ContextCollector
from .config import config
from .context_builder import build_prompt
from .model_adapter import CompletionModel, OpenAICompletionAdapter
from .models import TOPIC_KEY
from .retriever import DocumentStore, Retriever

if TYPE_CHECKING:
    from .models import UserInput

logger = config.get_logger(__name__)


class Orchestrator:
    """Runs collect -> retrieve -> build -> complete for a single request."""

    def __init__(
        self,
        collector: ContextCollector,
        retriever: Retriever,
        model: CompletionModel,
    ) -> None:
        """Initialize Orchestrator.

        Args:
            collector: Extracts context fields from the request.
            retriever: Fetches documents for the request topic.
            model: Completion backend receiving the built prompt.
        """
        self.collector = collector
        self.retriever = retriever
        self.model = model

    @classmethod
    def from_store(
        cls,
        store: DocumentStore,
        openai_api_key: str | None = None,
    ) -> Orchestrator:
        """Wire the default collector and OpenAI adapter around a store.

        Returns:
            Orchestrator: Ready-to-use orchestrator.
        """
        return cls(
            collector=ContextCollector(),
            retriever=Retriever(store),
            model=OpenAICompletionAdapter(api_key=openai_api_key),
        )

    async def handle_request(self, user_input: UserInput) -> str:
        """Answer a request using retrieved documents as model context.

        Stages run strictly in order; any stage failure propagates.

        Returns:
            str: The model's answer.
        """
        logger.info(
            "Handling request for user %s on topic %s",
            user_input.user_name,
            user_input.topic,
        )

        context = self.collector.collect(user_input)
        documents = await self.retriever.retrieve(context[TOPIC_KEY])
        prompt = build_prompt(documents, context)
        logger.debug("Built prompt:\n%s", prompt)

        answer = await self.model.complete(prompt)
        logger.info(
            "Answered request for user %s (%d documents, %d answer chars)",
            user_input.user_name,
            len(documents),
            len(answer),
        )
        return answer
