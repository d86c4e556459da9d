"""API-specific request and response models."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ValidateKeyRequest(BaseModel):
    """Body of a key validation request."""
    model_config = ConfigDict(strict=True)

    api_key: Optional[str] = Field("", alias="apiKey", description="Key to check")

    @field_validator('api_key')
    @classmethod
    def null_as_empty(cls, v: Optional[str]) -> str:
        """A null key is treated as no key."""
        return v or ""


class ValidateKeyResponse(BaseModel):
    """Result of a key validation request."""
    valid: bool
