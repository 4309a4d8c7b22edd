from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.folder import (
    CreateFolderRequest,
    FolderContentsResponse,
    FolderListResponse,
    FolderNode,
    FolderResponse,
    MoveFolderRequest,
    UpdateFolderRequest,
)
from app.services import folder_service
from app.services.folder_service import InvalidMoveError
from app.utils.pagination import InvalidSortFieldError, PageParams, page_params

router = APIRouter()


# List folders with search, sort and pagination
@router.get("/", response_model=FolderListResponse)
async def list_folders(
    params: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
):
    try:
        folders, pagination = folder_service.list_folders(db, params)
    except InvalidSortFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"data": folders, "pagination": pagination}


# Full hierarchy, roots first
@router.get("/tree", response_model=List[FolderNode])
async def get_folder_tree(db: Session = Depends(get_db)):
    return folder_service.get_folder_tree(db)


# Root level folders and unfiled files
@router.get("/root/contents", response_model=FolderContentsResponse)
async def get_root_contents(db: Session = Depends(get_db)):
    return folder_service.get_folder_contents(db, None)


@router.get("/{folder_id}", response_model=FolderResponse)
async def get_folder(folder_id: int, db: Session = Depends(get_db)):
    folder = folder_service.get_folder(db, folder_id)
    if not folder:
        raise HTTPException(status_code=404, detail="Folder not found")
    return folder


# Get folder's DIRECT children, include sub folders and files
@router.get("/{folder_id}/contents", response_model=FolderContentsResponse)
async def get_folder_contents(folder_id: int, db: Session = Depends(get_db)):
    if not folder_service.get_folder(db, folder_id):
        raise HTTPException(status_code=404, detail="Folder not found")
    return folder_service.get_folder_contents(db, folder_id)


@router.post("/", response_model=FolderResponse, status_code=status.HTTP_201_CREATED)
async def create_folder(body: CreateFolderRequest, db: Session = Depends(get_db)):
    return folder_service.create_folder(db, body)


# Partial update, fields missing from the body are left untouched
@router.put("/{folder_id}", response_model=FolderResponse)
async def update_folder(
    folder_id: int,
    body: UpdateFolderRequest,
    db: Session = Depends(get_db),
):
    try:
        folder = folder_service.update_folder(db, folder_id, body)
    except InvalidMoveError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not folder:
        raise HTTPException(status_code=404, detail="Folder not found")
    return folder


# Move folder to another folder (or to root), sub folders and files are repathed
@router.post("/{folder_id}/move", response_model=FolderResponse)
async def move_folder(
    folder_id: int,
    body: MoveFolderRequest,
    db: Session = Depends(get_db),
):
    try:
        folder = folder_service.move_folder(db, folder_id, body.parent_id)
    except InvalidMoveError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not folder:
        raise HTTPException(status_code=404, detail="Folder not found")
    return folder


@router.delete("/{folder_id}", response_model=MessageResponse)
async def delete_folder(folder_id: int, db: Session = Depends(get_db)):
    if not folder_service.delete_folder(db, folder_id):
        raise HTTPException(status_code=404, detail="Folder not found")
    return {"message": "Folder deleted successfully"}
