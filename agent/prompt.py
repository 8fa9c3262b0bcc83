# =============================================================================
# agent/prompt.py  -  The Assistant's Persona and Prompt Construction
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Holds the fixed system persona and builds the augmented user prompt.
#
# WHY THE USER ID TRAVELS IN THE PROMPT:
#   The model, not our code, decides when to call a data-fetch tool, and it
#   has to fill in the user_id argument itself.  Appending the caller's id to
#   the prompt gives it that value.  Ownership is still enforced by the
#   tools, which are bound to the authenticated caller: a user_id naming
#   anyone else comes back empty.
# =============================================================================

SYSTEM_PERSONA = "You are Kian, an assistant for an AI documentation tool called DocIt."


def build_augmented_prompt(prompt: str, user_id: str) -> str:
    """Append the caller's identifier to the raw prompt text."""
    return f"{prompt}\n\nMy user id is {user_id}."
