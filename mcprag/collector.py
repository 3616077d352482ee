"""Context collection from incoming user requests."""

from .config import config
from .models import TOPIC_KEY, USER_NAME_KEY, CollectedContext, UserInput

logger = config.get_logger(__name__)


class ContextCollector:
    """Extracts the key/value fields the prompt needs from a user request."""

    def collect(self, user_input: UserInput) -> CollectedContext:  # noqa: PLR6301
        """Collect request fields into a fresh context mapping.

        Returns:
            Mapping with the ``UserName`` and ``Topic`` keys.
        """
        context = {
            USER_NAME_KEY: user_input.user_name,
            TOPIC_KEY: user_input.topic,
        }
        logger.debug("Collected context keys: %s", ", ".join(context))
        return context
