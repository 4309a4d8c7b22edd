from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class ItemType(str, Enum):
    FILE = "file"
    FOLDER = "folder"


class FileTarget(BaseModel):
    item_type: Literal["file"] = "file"
    item_id: int


class FolderTarget(BaseModel):
    item_type: Literal["folder"] = "folder"
    item_id: int


FavoriteTarget = Annotated[Union[FileTarget, FolderTarget], Field(discriminator="item_type")]

favorite_target_adapter = TypeAdapter(FavoriteTarget)


class AddFavoriteRequest(BaseModel):
    item_type: ItemType = Field(..., description="Kind of the bookmarked item")
    item_id: int = Field(..., description="ID of the file or folder")

    def to_target(self) -> FavoriteTarget:
        return favorite_target_adapter.validate_python(
            {"item_type": self.item_type.value, "item_id": self.item_id}
        )


class FavoriteResponse(BaseModel):
    id: int
    item_type: ItemType
    item_id: int
    created_at: datetime
    model_config = {"from_attributes": True}


class FavoriteDetailResponse(FavoriteResponse):
    name: Optional[str] = Field(None, description="Name of the referenced item, null when it no longer exists")
    path: Optional[str] = Field(None, description="Path of the referenced item, null when it no longer exists")
    exists: bool = Field(..., description="False when the referenced file or folder was deleted")


class IsFavoriteResponse(BaseModel):
    is_favorite: bool
