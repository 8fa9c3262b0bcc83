# =============================================================================
# core/__init__.py
# =============================================================================
# Models, errors, settings and record access for the DocIt assistant.
#
# Nothing in this package imports Google ADK.  Firestore is only imported
# lazily by core.store.FirestoreStore, so everything here works offline
# against core.store.InMemoryStore.
# =============================================================================
