import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import commit_or_rollback
from app.models.file import File
from app.models.folder import Folder
from app.schemas.common import PaginationMeta
from app.schemas.file import CreateFileRequest, UpdateFileRequest
from app.utils.pagination import PageParams, paginate
from app.utils.path_utils import resolve_file_path

logger = logging.getLogger(__name__)

FILE_SORT_MAP = {
    "id": File.id,
    "name": File.name,
    "path": File.path,
    "folder_id": File.folder_id,
    "extension": File.extension,
    "size": File.size,
    "mime_type": File.mime_type,
    "created_at": File.created_at,
    "updated_at": File.updated_at,
}
FILE_SEARCH_COLUMNS = (File.name, File.path, File.extension)


def list_files(db: Session, params: PageParams) -> Tuple[List[File], PaginationMeta]:
    return paginate(db.query(File), params, FILE_SEARCH_COLUMNS, FILE_SORT_MAP, File.id)


def get_file(db: Session, file_id: int) -> Optional[File]:
    return db.query(File).filter(File.id == file_id).first()


def get_files_by_folder(db: Session, folder_id: Optional[int]) -> List[File]:
    return db.query(File).filter(File.folder_id == folder_id).order_by(File.name.asc()).all()


def get_files_by_extension(db: Session, extension: str) -> List[File]:
    return db.query(File).filter(File.extension == extension).order_by(File.name.asc()).all()


def create_file(db: Session, body: CreateFileRequest) -> File:
    new_file = File(
        name=body.name,
        path=body.path,
        folder_id=body.folder_id,
        extension=body.extension,
        size=body.size,
        mime_type=body.mime_type,
    )
    db.add(new_file)
    commit_or_rollback(db)
    db.refresh(new_file)
    logger.info(f"Created file {new_file.id} at '{new_file.path}'")
    return new_file


def update_file(db: Session, file_id: int, body: UpdateFileRequest) -> Optional[File]:
    file = get_file(db, file_id)
    if file is None:
        return None

    changes = body.model_dump(exclude_unset=True)
    if not changes:
        return file

    for field, value in changes.items():
        setattr(file, field, value)
    commit_or_rollback(db)
    db.refresh(file)
    logger.info(f"Updated file {file_id}: {', '.join(changes)}")
    return file


def delete_file(db: Session, file_id: int) -> bool:
    deleted = db.query(File).filter(File.id == file_id).delete(synchronize_session=False)
    commit_or_rollback(db)
    if deleted:
        logger.info(f"Deleted file {file_id}")
    return deleted > 0


def move_file(db: Session, file_id: int, folder_id: Optional[int]) -> Optional[File]:
    """
    Move a file into ``folder_id`` (None to unfile it) and recompute its path.

    An unknown target folder is treated like None: the file becomes unfiled
    and its path is its bare name.
    """
    file = get_file(db, file_id)
    if file is None:
        return None

    folder = None
    if folder_id is not None:
        folder = db.query(Folder).filter(Folder.id == folder_id).first()
        if folder is None:
            logger.warning(f"Target folder {folder_id} not found, unfiling file {file_id}")

    file.folder_id = folder.id if folder else None
    file.path = resolve_file_path(file.name, folder.path if folder else None)
    commit_or_rollback(db)
    db.refresh(file)
    logger.info(f"Moved file {file_id} to '{file.path}'")
    return file


def get_storage_stats(db: Session, limit: Optional[int] = None) -> Dict[str, Any]:
    if limit is None:
        limit = settings.stats_extension_limit

    total_size, total_files = db.query(
        func.coalesce(func.sum(File.size), 0), func.count(File.id)
    ).one()

    size_sum = func.sum(File.size).label("total_size")
    by_extension = (
        db.query(File.extension, func.count(File.id).label("count"), size_sum)
        .filter(File.extension.isnot(None))
        .group_by(File.extension)
        .order_by(size_sum.desc())
        .limit(limit)
        .all()
    )

    return {
        "total_size": int(total_size),
        "total_files": total_files,
        "by_extension": [
            {"extension": extension, "count": count, "total_size": int(size)}
            for extension, count, size in by_extension
        ],
    }
