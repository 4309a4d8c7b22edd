from pydantic import BaseModel, Field


class PaginationMeta(BaseModel):
    page: int = Field(..., description="Current page number (starting from 1)")
    limit: int = Field(..., description="Rows per page")
    total: int = Field(..., description="Number of matching rows before pagination")
    totalPages: int = Field(..., description="ceil(total / limit)")


class MessageResponse(BaseModel):
    message: str = Field(..., description="Status message")
