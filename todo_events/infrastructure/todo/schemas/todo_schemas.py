"""Pydantic schemas for Todo API request/response validation."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

# Description rules are enforced by the Todo aggregate, so the request
# schemas accept anything string-like (or nothing) and let it decide.


class TodoCreateRequest(BaseModel):
    """Schema for creating a todo."""

    description: str | None = Field(None, description="Description text for the todo")


class TodoUpdateRequest(BaseModel):
    """Schema for updating a todo."""

    model_config = ConfigDict(populate_by_name=True)

    description: str | None = Field(None, description="New description text")
    is_complete: bool | None = Field(
        None,
        alias="isComplete",
        description="Ignored; todos are completed through MakeComplete",
    )


class Todo(BaseModel):
    """Schema for Todo response."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    description: str
    is_complete: bool = Field(..., alias="isComplete")


class TodoDeleteResponse(BaseModel):
    """Schema for todo deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")
