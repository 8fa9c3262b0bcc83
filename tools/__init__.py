# =============================================================================
# tools/__init__.py
# =============================================================================
# The data-fetch tools the model may call: get_user_items, get_user_lists and
# get_user_folders.  Each one is a thin ADK FunctionTool around
# core.records.fetch_records with a declared input and output schema.
# =============================================================================
