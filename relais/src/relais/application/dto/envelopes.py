"""
Outbound message envelopes.

Every payload the relay emits is one of these models rendered with
``to_payload()``. Optional fields left at None are omitted from the
wire form.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Envelope(BaseModel):
    """Base class for outbound payloads."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Render as a JSON-ready dict, dropping unset optional fields."""
        payload = self.model_dump(mode="json", by_alias=True)
        return {key: value for key, value in payload.items() if value is not None}


class SystemEnvelope(Envelope):
    """
    Server notice.

    Attributes:
        message: Human readable text, or a structured object (join ack)
        channel: Channel the notice is about (optional)
    """

    type: Literal["system"] = "system"
    message: Union[str, Dict[str, Any]]
    channel: Optional[str] = None


class ErrorEnvelope(Envelope):
    """Protocol error reported to the offending connection."""

    type: Literal["error"] = "error"
    message: str


class JoinAck(Envelope):
    """
    Structured join acknowledgement, echoing the request id.

    Attributes:
        id: Request id supplied by the client (any JSON value)
        result: Confirmation text
    """

    id: Optional[Any] = None
    result: str

    def to_payload(self) -> Dict[str, Any]:
        """Keep an explicit null id; drop only an id that was never given."""
        payload = self.model_dump(mode="json", by_alias=True)
        if "id" not in self.model_fields_set:
            del payload["id"]
        return payload


class ChannelSnapshot(Envelope):
    """One entry of a channels_list response."""

    channel: str
    document_name: Optional[str] = Field(default=None, alias="documentName")
    connected_at: str = Field(..., alias="connectedAt")
    client_count: int = Field(..., alias="clientCount", ge=0)


class ChannelsListEnvelope(Envelope):
    """Snapshot of every known channel."""

    type: Literal["channels_list"] = "channels_list"
    channels: List[ChannelSnapshot] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "channels": [snapshot.to_payload() for snapshot in self.channels],
        }


class BroadcastEnvelope(Envelope):
    """
    Channel message delivered to a member.

    Attributes:
        message: Relayed client payload (any JSON value)
        sender: "You" on the sender's own echo, "User" for everyone else
        channel: Channel name
    """

    type: Literal["broadcast"] = "broadcast"
    message: Any = None
    sender: Literal["You", "User"]
    channel: str

    def to_payload(self) -> Dict[str, Any]:
        """Keep an explicit null body; drop only a body that was never given."""
        payload = self.model_dump(mode="json", by_alias=True)
        if "message" not in self.model_fields_set:
            del payload["message"]
        return payload
