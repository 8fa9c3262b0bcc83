# =============================================================================
# agent/__init__.py
# =============================================================================
# This package wires a caller's prompt to the model.
#
#   endpoint.py      auth checks and process state for the callable function
#   orchestrator.py  augmented prompt + tool revision -> backend
#   backend.py       GenerativeBackend strategy and its Google ADK runner
#   docit_agent.py   the ADK Agent (persona, model, decoding parameters)
#   prompt.py        persona text and prompt augmentation
#
# The model decides which data-fetch tools to call and when.  Nothing in this
# package queries the document store directly.
# =============================================================================
