from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from app.schemas.common import PaginationMeta


class CreateFileRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Display name or filename")
    path: str = Field(..., min_length=1, max_length=1000, description="Full hierarchical path of the file")
    folder_id: Optional[int] = Field(None, description="ID of the folder containing the file, null when unfiled")
    extension: Optional[str] = Field(None, max_length=50, description="File extension without dot, e.g. pdf")
    size: int = Field(0, ge=0, description="Size in bytes")
    mime_type: Optional[str] = Field(None, max_length=100, description="MIME type, e.g. application/pdf")


class UpdateFileRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    path: Optional[str] = Field(None, min_length=1, max_length=1000)
    folder_id: Optional[int] = None
    extension: Optional[str] = Field(None, max_length=50)
    size: Optional[int] = Field(None, ge=0)
    mime_type: Optional[str] = Field(None, max_length=100)

    @field_validator("name", "path", "size")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class MoveFileRequest(BaseModel):
    folder_id: Optional[int] = Field(..., description="Target folder id, null to unfile the file")


class FileResponse(BaseModel):
    id: int = Field(..., description="Unique identifier of the file")
    name: str = Field(..., description="Display name or filename")
    path: str = Field(..., description="Full hierarchical path of the file")
    folder_id: Optional[int] = Field(None, description="ID of the folder containing the file")
    extension: Optional[str] = Field(None, description="File extension")
    size: int = Field(..., description="Size in bytes")
    mime_type: Optional[str] = Field(None, description="MIME type")
    created_at: datetime = Field(..., description="Timestamp when the file was created")
    updated_at: datetime = Field(..., description="Timestamp when the file was last updated")
    model_config = {"from_attributes": True}


class FileListResponse(BaseModel):
    data: List[FileResponse]
    pagination: PaginationMeta


class ExtensionStats(BaseModel):
    extension: str
    count: int
    total_size: int


class StorageStatsResponse(BaseModel):
    total_size: int = Field(..., description="Sum of all file sizes in bytes")
    total_files: int = Field(..., description="Number of files")
    by_extension: List[ExtensionStats] = Field(..., description="Largest extensions first")
