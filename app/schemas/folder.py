from __future__ import annotations
from app.schemas.common import PaginationMeta
from app.schemas.file import FileResponse
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

class CreateFolderRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="The name of the folder")
    path: str = Field(..., min_length=1, max_length=1000, description="Full hierarchical path, e.g. /Documents/Work")
    parent_id: Optional[int] = Field(None, description="The parent folder id, null for a root folder")


# Only the fields present in the request body are written
class UpdateFolderRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="The name of the folder")
    path: Optional[str] = Field(None, min_length=1, max_length=1000, description="Full hierarchical path")
    parent_id: Optional[int] = Field(None, description="The parent folder id")

    @field_validator("name", "path")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class MoveFolderRequest(BaseModel):
    parent_id: Optional[int] = Field(..., description="The new parent folder id, null to move to root")


class FolderResponse(BaseModel):
    id: int = Field(..., description="The id of the folder")
    name: str = Field(..., description="The name of the folder")
    path: str = Field(..., description="Full hierarchical path")
    parent_id: Optional[int] = Field(None, description="The parent folder id")
    created_at: datetime = Field(..., description="The creation time of the folder")
    updated_at: datetime = Field(..., description="The update time of the folder")
    model_config = {"from_attributes": True}


class FolderListResponse(BaseModel):
    data: List[FolderResponse]
    pagination: PaginationMeta


class FolderContentsResponse(BaseModel):
    folders: List[FolderResponse]
    files: List[FileResponse]


class FolderNode(FolderResponse):
    children: List[FolderNode] = []
