# =============================================================================
# agent/endpoint.py  -  Callable Endpoint Logic & Process State
# =============================================================================
#
# WHAT THIS FILE DOES:
#   - AppState: the process-scoped objects (settings, store, backend,
#     orchestrator), built once by build_app_state() and passed to handlers.
#   - summarize(): the body of the summarize_data callable, independent of
#     the hosting platform so it can be driven directly from tests and the
#     local runner.
#
# AUTH CHECKS (both run before any generation):
#   1. The caller's token must carry a verified-email claim.
#   2. The caller must have a user id.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Optional

from agent.backend import AdkBackend, GenerativeBackend
from agent.orchestrator import GenerationOrchestrator
from core.config import Settings
from core.errors import AuthRequiredError
from core.models import AuthContext, SummarizeRequest
from core.store import DocumentStore, FirestoreStore, InMemoryStore

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    settings: Settings
    store: DocumentStore
    backend: GenerativeBackend
    orchestrator: GenerationOrchestrator


def build_store(settings: Settings) -> DocumentStore:
    if settings.store_backend == "memory":
        return InMemoryStore()
    return FirestoreStore.from_app()


def build_app_state(
    settings: Settings,
    store: Optional[DocumentStore] = None,
    backend: Optional[GenerativeBackend] = None,
) -> AppState:
    """Wire up the process-scoped collaborators.

    ``store`` and ``backend`` default to the ones ``settings`` selects;
    passing them in is how tests and the local runner substitute their own.
    """
    store = store if store is not None else build_store(settings)
    backend = backend if backend is not None else AdkBackend(settings.model, settings.decoding)
    orchestrator = GenerationOrchestrator(backend, store, settings.tool_revision)
    return AppState(settings=settings, store=store, backend=backend, orchestrator=orchestrator)


def require_identity(auth: Optional[AuthContext]) -> str:
    """Return the caller's user id, or raise AuthRequiredError."""
    if auth is None or not auth.email_verified:
        raise AuthRequiredError("A verified email address is required.")
    if not auth.user_id:
        raise AuthRequiredError("Must supply auth context.")
    return auth.user_id


async def summarize(request: SummarizeRequest, auth: Optional[AuthContext], state: AppState) -> str:
    """Answer ``request.prompt`` for an authenticated caller.

    Raises:
        AuthRequiredError: if the caller has no verified identity.
        GenerationError: if the model call fails.
    """
    user_id = require_identity(auth)
    text = await state.orchestrator.generate(request.prompt, user_id)
    logger.info("summarize_data answered %s (%d chars)", user_id, len(text))
    return text
