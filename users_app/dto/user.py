"""DTOs for user resources exposed via the public API."""

from __future__ import annotations

import uuid
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class UserDTO(BaseModel):
    id: uuid.UUID = Field(description="Caller-supplied user id (UUID)")
    name: str = Field(description="Display name")
    email: str = Field(description="Email address, unique across users")
    age: int = Field(description="Age in years")
    balance: Decimal = Field(description="Exact decimal balance; serialized as a string")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "d290f1ee-6c54-4b01-90e6-d701748f0851",
                "name": "Ann",
                "email": "ann@x.com",
                "age": 30,
                "balance": "10.50",
            }
        },
    )
