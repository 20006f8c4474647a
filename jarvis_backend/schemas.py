"""Request and response models."""
from pydantic import BaseModel, Field, field_validator


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service health status")
    message: str = Field(..., description="Human readable status message")


class EchoRequest(BaseModel):
    message: str

    @field_validator("message")
    @classmethod
    def message_must_be_utf8(cls, value: str) -> str:
        # JSON allows lone surrogate escapes such as "\ud800", UTF-8 does not.
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("message must be valid UTF-8 text") from None
        return value


class EchoResponse(BaseModel):
    echo: str
    length: int = Field(..., description="Length of the message in UTF-8 bytes")


class SystemMetrics(BaseModel):
    """One host metrics sample with byte, binary-gigabyte and percent views."""

    memory_total_bytes: int = Field(..., ge=0)
    memory_used_bytes: int = Field(..., ge=0)
    memory_available_bytes: int = Field(..., ge=0)
    memory_total_gb: float
    memory_used_gb: float
    memory_available_gb: float
    memory_usage_percent: float
    cpu_usage: float = Field(..., description="Aggregate CPU utilisation, 0-100")
    cpu_count: int = Field(..., ge=0)
    timestamp: str = Field(..., description="RFC 3339 sample time")
