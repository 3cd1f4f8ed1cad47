# file: src/module4_ingress/schemas.py
"""
Request models for the ingress endpoint.
"""

import base64
import binascii

from pydantic import BaseModel, Field, field_validator

from src.module3_transfer import Segment


UINT32_MAX = 2**32 - 1


class CodeRequest(BaseModel):
    """Information about one message segment."""

    sender: str = Field(..., description="Identifier of the sending user.")
    time: str = Field(..., description="Send timestamp, passed through untouched.")
    seg_count: int = Field(
        ..., ge=0, le=UINT32_MAX, description="Total number of segments in the message."
    )
    seg_num: int = Field(
        ..., ge=0, le=UINT32_MAX, description="Index of this segment."
    )
    payload: str = Field(..., description="Base64-encoded segment bytes.")

    @field_validator('payload')
    @classmethod
    def payload_must_be_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise ValueError(f"payload is not valid base64: {e}") from e
        return value

    def to_segment(self) -> Segment:
        return Segment(
            sender=self.sender,
            time=self.time,
            seg_count=self.seg_count,
            seg_num=self.seg_num,
            payload=base64.b64decode(self.payload, validate=True),
        )
