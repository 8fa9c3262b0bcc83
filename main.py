# =============================================================================
# main.py  -  Entry Point for the DocIt Assistant
# =============================================================================
#
# TWO WAYS IN:
#   1. Deployed:  `firebase deploy --only functions` picks up summarize_data,
#      a callable function that needs the GEMINI_API_KEY secret and a caller
#      with a verified email.
#   2. Local:     `uv run python main.py` starts an interactive loop against
#      an in-memory store seeded with a few demo records.
#
# WHAT HAPPENS ON A CALL:
#   1. The platform hands us the payload and the caller's auth token
#   2. agent/endpoint.py checks the identity and the payload
#   3. The orchestrator appends the user id to the prompt and runs the model
#      with the data-fetch tools (tools/data_tools.py)
#   4. The model's final text goes back to the caller verbatim
#
# PROCESS STATE:
#   Clients are built on the first call (secrets are only injected at call
#   time), then reused for every call this instance serves.
# =============================================================================

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Optional

import firebase_admin
from dotenv import load_dotenv
from firebase_functions import https_fn
from firebase_functions.params import SecretParam

from agent.endpoint import AppState, build_app_state, require_identity, summarize
from core.config import Settings
from core.errors import AuthRequiredError, GenerationError, InvalidRequestError
from core.models import AuthContext, SummarizeRequest
from core.store import InMemoryStore

GEMINI_API_KEY = SecretParam("GEMINI_API_KEY")

logger = logging.getLogger(__name__)

_state: Optional[AppState] = None


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def get_app_state() -> AppState:
    """Build the process state on first use and return it thereafter."""
    global _state
    if _state is None:
        load_dotenv()
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        if settings.store_backend == "firestore" and not firebase_admin._apps:
            firebase_admin.initialize_app()
        _state = build_app_state(settings)
        logger.info("DocIt assistant ready (model=%s, tools=%s)", settings.model, settings.tool_revision)
    return _state


def handle_summarize(data: Any, auth: Optional[AuthContext], state: AppState) -> str:
    """Run one summarize call and translate failures into callable errors."""
    try:
        require_identity(auth)
        request = SummarizeRequest.from_payload(data)
        return asyncio.run(summarize(request, auth, state))
    except AuthRequiredError as exc:
        raise https_fn.HttpsError(code=https_fn.FunctionsErrorCode.UNAUTHENTICATED, message=str(exc)) from exc
    except InvalidRequestError as exc:
        raise https_fn.HttpsError(code=https_fn.FunctionsErrorCode.INVALID_ARGUMENT, message=str(exc)) from exc
    except GenerationError as exc:
        raise https_fn.HttpsError(code=https_fn.FunctionsErrorCode.INTERNAL, message=str(exc)) from exc


@https_fn.on_call(secrets=[GEMINI_API_KEY])
def summarize_data(req: https_fn.CallableRequest) -> str:
    auth = AuthContext.from_token(req.auth.uid, req.auth.token) if req.auth else None
    return handle_summarize(req.data, auth, get_app_state())


# =============================================================================
# Local runner
# =============================================================================
LOCAL_USER_ID = "local-dev-user"


def seed_demo_store(store: InMemoryStore, user_id: str = LOCAL_USER_ID) -> None:
    """Fill an in-memory store with a handful of records for ``user_id``."""
    created = datetime(2025, 1, 6, 9, 30, tzinfo=timezone.utc)
    modified = datetime(2025, 2, 14, 17, 5, tzinfo=timezone.utc)
    store.add("folders", "f1", {"name": "Training", "dateCreated": created, "createdBy": user_id,
                                "description": "Everything about the spring plan"})
    store.add("lists", "l1", {"name": "Weekly runs", "dateCreated": created, "createdBy": user_id,
                              "dateModified": modified})
    store.add("items", "i1", {"name": "Run", "count": 5, "dateCreated": created, "createdBy": user_id})
    store.add("items", "i2", {"name": "Stretch", "count": 12, "dateCreated": created, "createdBy": user_id,
                              "description": "Ten minutes after every run", "dateModified": modified})


async def run_local():
    """Interactive loop against the local demo store."""
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    store = InMemoryStore()
    seed_demo_store(store)
    state = build_app_state(settings, store=store)
    auth = AuthContext(user_id=LOCAL_USER_ID, email_verified=True)

    print("=" * 70)
    print("  DOCIT ASSISTANT (local)")
    print(f"  model={settings.model}  tools={settings.tool_revision}  user={LOCAL_USER_ID}")
    print("=" * 70)
    print("   (Type 'quit' to exit)\n")

    while True:
        try:
            user_input = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nGoodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\nGoodbye!")
            break

        if not user_input:
            continue

        try:
            answer = await summarize(SummarizeRequest(prompt=user_input), auth, state)
        except GenerationError as exc:
            print(f"\nGeneration failed: {exc}")
            continue

        print("-" * 70)
        print(f"\nKian:\n\n{answer}" if answer else "\nNo response generated.")


if __name__ == "__main__":
    asyncio.run(run_local())
