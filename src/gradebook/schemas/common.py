"""Response envelopes shared by every resource."""

from datetime import datetime
from typing import Dict

from pydantic import BaseModel


class CreatedResponse(BaseModel):
    """Returned after a successful insert."""

    id: int
    message: str


class MessageResponse(BaseModel):
    """Returned after a successful update or delete."""

    message: str


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime


class ServiceBanner(BaseModel):
    message: str
    endpoints: Dict[str, str]


class ErrorResponse(BaseModel):
    error: str
