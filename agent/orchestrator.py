# =============================================================================
# agent/orchestrator.py  -  Generation Orchestrator
# =============================================================================
#
# Takes {prompt, user_id}, appends the caller's id to the prompt, picks the
# data-fetch tools for the configured tool revision and asks the backend for
# the final text.  It never calls a tool itself and imposes no order or limit
# on the calls the model makes.
# =============================================================================

import logging

from agent.backend import GenerativeBackend
from agent.prompt import build_augmented_prompt
from core.errors import GenerationError
from core.store import DocumentStore
from tools.data_tools import get_tools

logger = logging.getLogger(__name__)


class GenerationOrchestrator:
    """Builds the augmented prompt and the tool set, then generates."""

    def __init__(self, backend: GenerativeBackend, store: DocumentStore, tool_revision: str = "all"):
        self.backend = backend
        self.store = store
        self.tool_revision = tool_revision

    def tools(self, user_id: str) -> list:
        """Tools bound to ``user_id``; they never return anyone else's records."""
        return get_tools(self.tool_revision, self.store, user_id)

    async def generate(self, prompt: str, user_id: str) -> str:
        augmented = build_augmented_prompt(prompt, user_id)
        tools = self.tools(user_id)
        logger.info("Generating for %s with %d tool(s) (revision=%s)", user_id, len(tools), self.tool_revision)
        try:
            return await self.backend.generate(augmented, tools, user_id=user_id)
        except GenerationError:
            raise
        except Exception as exc:
            raise GenerationError(str(exc)) from exc
