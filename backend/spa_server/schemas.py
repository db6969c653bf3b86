"""Pydantic request/response schemas."""

from pydantic import BaseModel


# ── Demo Schemas ─────────────────────────────────────────────────────────────

class Message(BaseModel):
    message: str
