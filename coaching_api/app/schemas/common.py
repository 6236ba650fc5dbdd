"""Shared base classes for API schemas."""

from pydantic import BaseModel


class ApiModel(BaseModel):
    """Base model accepting both field names and their camelCase aliases."""

    model_config = {
        "populate_by_name": True,
    }


class MessageResponse(ApiModel):
    """Envelope for operations that only report an outcome."""

    success: bool = True
    message: str


class HealthResponse(ApiModel):
    status: str = "ok"
    message: str = "Server is running"
