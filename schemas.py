from typing import Any
from pydantic import BaseModel, Field, field_validator
from config import DISPATCH_EVENT_TYPE
from core.nostr import convert_npub_to_hex, normalize_username


class NormalizedUsernameMixin:
    @field_validator('username')
    @classmethod
    def validate_username(cls, v: Any) -> str:
        return normalize_username(v)


class NormalizedPubkeyMixin:
    @field_validator('pubkey')
    @classmethod
    def validate_pubkey(cls, v: Any) -> str:
        return convert_npub_to_hex(v)


class SubmitNIP05Request(NormalizedUsernameMixin, NormalizedPubkeyMixin, BaseModel):
    # Typed as Any so that missing and non-string values reach the validators
    # and fail with their own messages instead of pydantic's type errors.
    username: Any = Field(default=None, validate_default=True)
    pubkey: Any = Field(default=None, validate_default=True)


class DispatchClientPayload(BaseModel):
    username: str
    pubkey: str


class DispatchPayload(BaseModel):
    event_type: str = DISPATCH_EVENT_TYPE
    client_payload: DispatchClientPayload


class SubmitNIP05Response(BaseModel):
    success: bool = True
    message: str
    username: str
    pubkey: str
    pr_url: str


class SubmissionError(BaseModel):
    model_config = {"frozen": True}

    kind: str
    message: str


class SubmissionResult(BaseModel):
    """Outcome of one submission: ``data`` on success, ``error`` otherwise."""

    model_config = {"frozen": True}

    ok: bool
    data: SubmitNIP05Response | None = None
    error: SubmissionError | None = None

    def to_content(self) -> dict:
        if self.ok:
            return self.data.model_dump()
        return {"success": False, "error": self.error.message}
