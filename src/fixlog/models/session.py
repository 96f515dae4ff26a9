"""FIX session identity models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    """Direction of a wire message relative to the local session."""

    INBOUND = "inbound"
    OUTBOUND = "outbound"


class SessionID(BaseModel):
    """Identity of a FIX session.

    Immutable and hashable so it can key the session filter registry.
    """

    model_config = ConfigDict(frozen=True)

    begin_string: str = Field(..., min_length=1)  # e.g. "FIX.4.2"
    sender_comp_id: str = Field(..., min_length=1)
    target_comp_id: str = Field(..., min_length=1)
    session_qualifier: str = ""

    def __str__(self) -> str:
        base = f"{self.begin_string}:{self.sender_comp_id}->{self.target_comp_id}"
        if self.session_qualifier:
            return f"{base}:{self.session_qualifier}"
        return base
