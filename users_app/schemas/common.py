# users_app/schemas/common.py
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    message: str = Field(description="Human-readable error message")

    model_config = {"json_schema_extra": {"examples": [{"message": "user not found"}]}}


class OkResponse(BaseModel):
    ok: bool = Field(description="Always true")

    model_config = {"json_schema_extra": {"examples": [{"ok": True}]}}
