"""HTTP API for typesetting and cover rendering (FastAPI)."""
