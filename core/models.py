# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through the assistant: the incoming request, the caller's identity, and the
# records the data-fetch tools hand back to the model.
#
# DESIGN PRINCIPLE  -  "No Phantom Fields":
#   If a field exists on a record, the model *will* reason about it.
#   Records carry only what the document store holds for the user's own
#   items, lists and folders.  The owner field (createdBy) is used to filter
#   but never exposed back to the model.
# =============================================================================

from dataclasses import dataclass, asdict
from typing import Any, Optional

from core.errors import InvalidRequestError


# -----------------------------------------------------------------------------
# SummarizeRequest  -  the body of one callable invocation
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SummarizeRequest:
    """A user prompt for the assistant."""

    prompt: str

    @classmethod
    def from_payload(cls, payload: Any) -> "SummarizeRequest":
        """Build a request from the raw callable payload.

        Raises:
            InvalidRequestError: if the payload is not an object carrying a
                string ``prompt``.
        """
        if not isinstance(payload, dict):
            raise InvalidRequestError("Request body must be an object with a 'prompt' field.")
        prompt = payload.get("prompt")
        if not isinstance(prompt, str):
            raise InvalidRequestError("'prompt' must be a string.")
        return cls(prompt=prompt)


# -----------------------------------------------------------------------------
# AuthContext  -  who is calling
# -----------------------------------------------------------------------------
# Supplied by the platform on every call.  Never persisted.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class AuthContext:
    """The caller identity attached to a callable request."""

    user_id: Optional[str]
    email_verified: bool = False

    @classmethod
    def from_token(cls, uid: Optional[str], token: Optional[dict]) -> "AuthContext":
        """Build a context from a uid and its decoded ID-token claims."""
        claims = token or {}
        return cls(user_id=uid, email_verified=claims.get("email_verified") is True)


# -----------------------------------------------------------------------------
# Records  -  what the data-fetch tools return
# -----------------------------------------------------------------------------
# Field names follow the document store (camelCase) because the model sees
# them verbatim in tool responses and in its own tool-call reasoning.
#
# dateModified is "" for a record that was never modified, so the model can
# tell "never" apart from a real timestamp.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Record:
    """A user-owned document, flattened for the model."""

    id: str
    name: str
    dateCreated: str
    description: str = ""
    dateModified: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ItemRecord(Record):
    """A tracked item; carries a running count."""

    count: int = 0


@dataclass(frozen=True)
class ListRecord(Record):
    """A user's list of items."""


@dataclass(frozen=True)
class FolderRecord(Record):
    """A folder grouping lists."""
