# =============================================================================
# agent/backend.py  -  Generative Backends
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Hides the model runtime behind one call:
#
#       await backend.generate(prompt, tools) -> text
#
#   Whether the model calls zero tools or ten, and in which order, is the
#   runtime's business.  The orchestrator only sees the final text.
#
# ADK BACKEND LIFECYCLE (one call):
#   1. Build an Agent with the given tools (agent/docit_agent.py)
#   2. Open a throwaway in-memory session; nothing is kept between calls
#   3. Send the prompt through a Runner and walk the event stream
#   4. Return the text of the final response
#
#   Any failure (model unavailable, quota, a tool raising) is re-raised as a
#   GenerationError carrying the original message.
# =============================================================================

import logging

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.docit_agent import create_agent
from core.config import DecodingConfig
from core.errors import GenerationError

logger = logging.getLogger(__name__)

APP_NAME = "docit"


class GenerativeBackend:
    """Strategy interface for text generation with tools."""

    async def generate(self, prompt: str, tools, user_id: str = "anonymous") -> str:
        """Run the model on ``prompt`` with ``tools`` available; return the final text.

        Subclasses implement this; AdkBackend is the production one.
        """
        raise NotImplementedError


class AdkBackend(GenerativeBackend):
    """Runs each generation through a fresh Google ADK agent and runner."""

    def __init__(self, model_name: str, decoding: DecodingConfig):
        self.model_name = model_name
        self.decoding = decoding

    async def generate(self, prompt: str, tools, user_id: str = "anonymous") -> str:
        try:
            return await self._run(prompt, tools, user_id)
        except GenerationError:
            raise
        except Exception as exc:
            logger.error("Generation failed: %s", exc)
            raise GenerationError(str(exc)) from exc

    async def _run(self, prompt: str, tools, user_id: str) -> str:
        agent = create_agent(self.model_name, self.decoding, tools)
        session_service = InMemorySessionService()
        runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
        session = await session_service.create_session(app_name=APP_NAME, user_id=user_id)

        message = types.Content(role="user", parts=[types.Part(text=prompt)])
        final_text = ""
        async for event in runner.run_async(
            user_id=user_id,
            session_id=session.id,
            new_message=message,
        ):
            if event.error_code:
                raise GenerationError(event.error_message or event.error_code)
            if not (event.content and event.content.parts):
                continue
            for part in event.content.parts:
                if part.function_call:
                    logger.info("Model called tool: %s", part.function_call.name)
            if event.is_final_response():
                final_text = "".join(part.text for part in event.content.parts if part.text)

        return final_text
