# =============================================================================
# core/errors.py  -  Error Taxonomy
# =============================================================================
#
# Every failure the assistant can surface to a caller is one of these.
# None of them is retried locally; retrying is the caller's decision.
#
# An empty tool result is NOT an error.  A tool called without a user id
# returns an empty sequence.
# =============================================================================


class DocItError(Exception):
    """Base class for all assistant errors."""


class AuthRequiredError(DocItError):
    """The caller has no verified identity (no uid or no verified email)."""


class InvalidRequestError(DocItError):
    """The callable payload does not match the request schema."""


class GenerationError(DocItError):
    """The model call failed or was rejected.

    Tool failures during generation surface as this error too: there is no
    fallback to partial data.
    """


class ToolArgumentError(DocItError):
    """A tool was called with arguments that violate its input schema."""
