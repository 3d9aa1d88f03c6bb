"""Application DTOs for Customer operations."""

from uuid import UUID

from pydantic import BaseModel, Field


class CreateCustomerRequest(BaseModel):
    """Request DTO for registering a customer."""

    name: str = Field(..., min_length=1, max_length=255, description="Customer name")
    email: str = Field(..., max_length=255, description="Customer email address")

    model_config = {"frozen": True}


class CustomerDTO(BaseModel):
    """Response DTO for customer details."""

    id: UUID = Field(..., description="Customer ID")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email address")

    model_config = {"frozen": True}
