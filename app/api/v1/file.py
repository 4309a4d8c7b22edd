from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.file import (
    CreateFileRequest,
    FileListResponse,
    FileResponse,
    MoveFileRequest,
    StorageStatsResponse,
    UpdateFileRequest,
)
from app.services import file_service
from app.utils.pagination import InvalidSortFieldError, PageParams, page_params

router = APIRouter()


@router.get("/", response_model=FileListResponse)
async def list_files(
    params: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
):
    try:
        files, pagination = file_service.list_files(db, params)
    except InvalidSortFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"data": files, "pagination": pagination}


# Total size and count, plus breakdown by extension
@router.get("/stats/storage", response_model=StorageStatsResponse)
async def get_storage_stats(db: Session = Depends(get_db)):
    return file_service.get_storage_stats(db)


@router.get("/folder/{folder_id}", response_model=List[FileResponse])
async def get_files_by_folder(folder_id: int, db: Session = Depends(get_db)):
    return file_service.get_files_by_folder(db, folder_id)


@router.get("/extension/{extension}", response_model=List[FileResponse])
async def get_files_by_extension(extension: str, db: Session = Depends(get_db)):
    return file_service.get_files_by_extension(db, extension)


@router.get("/{file_id}", response_model=FileResponse)
async def get_file(file_id: int, db: Session = Depends(get_db)):
    file = file_service.get_file(db, file_id)
    if not file:
        raise HTTPException(status_code=404, detail="File not found")
    return file


@router.post("/", response_model=FileResponse, status_code=status.HTTP_201_CREATED)
async def create_file(body: CreateFileRequest, db: Session = Depends(get_db)):
    return file_service.create_file(db, body)


@router.put("/{file_id}", response_model=FileResponse)
async def update_file(
    file_id: int,
    body: UpdateFileRequest,
    db: Session = Depends(get_db),
):
    file = file_service.update_file(db, file_id, body)
    if not file:
        raise HTTPException(status_code=404, detail="File not found")
    return file


@router.post("/{file_id}/move", response_model=FileResponse)
async def move_file(
    file_id: int,
    body: MoveFileRequest,
    db: Session = Depends(get_db),
):
    file = file_service.move_file(db, file_id, body.folder_id)
    if not file:
        raise HTTPException(status_code=404, detail="File not found")
    return file


@router.delete("/{file_id}", response_model=MessageResponse)
async def delete_file(file_id: int, db: Session = Depends(get_db)):
    if not file_service.delete_file(db, file_id):
        raise HTTPException(status_code=404, detail="File not found")
    return {"message": "File deleted successfully"}
