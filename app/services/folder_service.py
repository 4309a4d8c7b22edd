import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.database import commit_or_rollback
from app.models.file import File
from app.models.folder import Folder
from app.schemas.common import PaginationMeta
from app.schemas.folder import CreateFolderRequest, UpdateFolderRequest
from app.utils.folder_tree import build_folder_tree, index_by_parent, iter_descendants
from app.utils.pagination import PageParams, paginate
from app.utils.path_utils import join_path, resolve_file_path, resolve_folder_path

logger = logging.getLogger(__name__)

FOLDER_SORT_MAP = {
    "id": Folder.id,
    "name": Folder.name,
    "path": Folder.path,
    "parent_id": Folder.parent_id,
    "created_at": Folder.created_at,
    "updated_at": Folder.updated_at,
}
FOLDER_SEARCH_COLUMNS = (Folder.name, Folder.path)


class InvalidMoveError(ValueError):
    pass


def list_folders(db: Session, params: PageParams) -> Tuple[List[Folder], PaginationMeta]:
    return paginate(db.query(Folder), params, FOLDER_SEARCH_COLUMNS, FOLDER_SORT_MAP, Folder.id)


def get_folder(db: Session, folder_id: int) -> Optional[Folder]:
    return db.query(Folder).filter(Folder.id == folder_id).first()


# Direct children only; folder_id=None compiles to IS NULL, i.e. the root level
def get_folder_contents(db: Session, folder_id: Optional[int]) -> Dict[str, list]:
    folders = (
        db.query(Folder)
        .filter(Folder.parent_id == folder_id)
        .order_by(Folder.name.asc())
        .all()
    )
    files = (
        db.query(File)
        .filter(File.folder_id == folder_id)
        .order_by(File.name.asc())
        .all()
    )
    return {"folders": folders, "files": files}


def get_folder_tree(db: Session) -> List[dict]:
    folders = db.query(Folder).order_by(Folder.path.asc(), Folder.id.asc()).all()
    return build_folder_tree(folders)


def create_folder(db: Session, body: CreateFolderRequest) -> Folder:
    new_folder = Folder(name=body.name, path=body.path, parent_id=body.parent_id)
    db.add(new_folder)
    commit_or_rollback(db)
    db.refresh(new_folder)
    logger.info(f"Created folder {new_folder.id} at '{new_folder.path}'")
    return new_folder


def update_folder(db: Session, folder_id: int, body: UpdateFolderRequest) -> Optional[Folder]:
    folder = get_folder(db, folder_id)
    if folder is None:
        return None

    changes = body.model_dump(exclude_unset=True)
    if not changes:
        return folder
    if changes.get("parent_id") is not None:
        check_new_parent(db, folder_id, changes["parent_id"])

    for field, value in changes.items():
        setattr(folder, field, value)
    commit_or_rollback(db)
    db.refresh(folder)
    logger.info(f"Updated folder {folder_id}: {', '.join(changes)}")
    return folder


def delete_folder(db: Session, folder_id: int) -> bool:
    # sub folders and files go with it through ON DELETE CASCADE
    deleted = (
        db.query(Folder)
        .filter(Folder.id == folder_id)
        .delete(synchronize_session=False)
    )
    commit_or_rollback(db)
    if deleted:
        logger.info(f"Deleted folder {folder_id}")
    return deleted > 0


# helper: cycle detection
def is_ancestor(db: Session, ancestor_id: int, target_id: int) -> bool:
    query = """
    WITH RECURSIVE ancestors AS (
        SELECT id, parent_id FROM folders WHERE id = :target_id
        UNION
        SELECT f.id, f.parent_id
        FROM folders f
        INNER JOIN ancestors a ON f.id = a.parent_id
    )
    SELECT 1 FROM ancestors WHERE id = :ancestor_id LIMIT 1;
    """
    result = db.execute(
        text(query), {"ancestor_id": ancestor_id, "target_id": target_id}
    )
    return result.scalar() is not None


def check_new_parent(db: Session, folder_id: int, parent_id: int) -> Folder:
    parent = get_folder(db, parent_id)
    if parent is None:
        raise InvalidMoveError("Target folder not found")
    if is_ancestor(db, folder_id, parent_id):
        logger.warning(f"Rejected moving folder {folder_id} under its descendant {parent_id}")
        raise InvalidMoveError("Cannot move a folder into itself or one of its sub folders")
    return parent


def move_folder(db: Session, folder_id: int, parent_id: Optional[int]) -> Optional[Folder]:
    """
    Re-parent a folder and recompute the path of everything beneath it.

    Descendant folders get ``<parent path>/<name>`` top-down and each file in
    the moved subtree gets ``<folder path>/<file name>``. Raises
    InvalidMoveError when the target does not exist or lies inside the
    folder's own subtree.
    """
    folder = get_folder(db, folder_id)
    if folder is None:
        return None

    parent_path = None
    if parent_id is not None:
        parent_path = check_new_parent(db, folder_id, parent_id).path

    folder.parent_id = parent_id
    folder.path = resolve_folder_path(folder.name, parent_path)

    children = index_by_parent(db.query(Folder).order_by(Folder.path.asc(), Folder.id.asc()).all())
    paths = {folder.id: folder.path}
    for child in iter_descendants(children, folder.id):
        child.path = join_path(paths[child.parent_id], child.name)
        paths[child.id] = child.path

    files = db.query(File).filter(File.folder_id.in_(list(paths))).all()
    for file in files:
        file.path = resolve_file_path(file.name, paths[file.folder_id])

    commit_or_rollback(db)
    db.refresh(folder)
    logger.info(
        f"Moved folder {folder_id} to '{folder.path}' "
        f"({len(paths) - 1} sub folders, {len(files)} files repathed)"
    )
    return folder
