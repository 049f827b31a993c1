"""
Resolution data models for the envoi resolver.

This module defines Pydantic models for the indexer's response envelope, the
records handed back to callers, and the outcome of a simulated contract call.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ResolutionResult(BaseModel):
    """
    Model for one record in an indexer response.

    Unknown fields (such as ``type``) are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    address: Optional[str] = None
    metadata: Any = None
    cached: Optional[bool] = None
    token_id: Optional[str] = None

    @field_validator("token_id", mode="before")
    @classmethod
    def token_id_as_string(cls, value: Any) -> Optional[str]:
        """Token ids may come back as JSON numbers; keep them as decimal strings."""
        if value is None or value == "":
            return None
        return str(value)


class ResolverResponse(BaseModel):
    """
    Model for the indexer's response envelope.
    """
    results: List[ResolutionResult] = []


class NameRecord(BaseModel):
    """
    Model for a name/address pair returned by search.
    """
    name: str = ""
    address: str = ""
    metadata: Any = None


class TokenRecord(NameRecord):
    """
    Model for a naming token; only built when the backend supplied a token id.
    """
    token_id: str


class ContractResponse(BaseModel):
    """
    Model for the outcome of a simulated read-only contract call.
    """
    success: bool
    return_value: Any = None
    failure_message: Optional[str] = None
