from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    POLYALPHABETIC = "polyalphabetic"
    TRANSPOSITION = "transposition"


class CipherType(str, Enum):
    """Specific cipher types."""

    ROUTE = "route"
    GRONSFELD = "gronsfeld"


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    text: str = Field(max_length=100_000)
    cipher_type: CipherType
    key: str


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    text: str = Field(max_length=100_000)
    cipher_type: CipherType
    key: str


class SelfTestRequest(BaseModel):
    """Request schema for /self-test endpoint."""

    key: str


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: str
    normalized_text: str
    removed_chars: dict[str, int] = Field(default_factory=dict)
    explanation: str


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key_used: str
    explanation: str


class CipherInfo(BaseModel):
    """Description of a registered cipher engine."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    name: str
    description: str


class CheckResultSchema(BaseModel):
    """Outcome of a single self-test check."""

    model_config = ConfigDict(from_attributes=True)

    key: str
    text: str
    corrupt: bool
    cipher_text: str | None = None
    decrypted_text: str | None = None
    ok: bool
    error: str | None = None
    error_type: str | None = None


class SelfTestResponse(BaseModel):
    """Response schema for /self-test endpoint."""

    key: str
    results: list[CheckResultSchema]
    passed: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
