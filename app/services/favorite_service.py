import logging
from typing import Any, Dict, List

from sqlalchemy import and_, exists
from sqlalchemy.orm import Session

from app.core.database import commit_or_rollback
from app.models.favorite import Favorite
from app.models.file import File
from app.models.folder import Folder
from app.schemas.favorite import FavoriteTarget, ItemType

logger = logging.getLogger(__name__)


def list_favorites(db: Session) -> List[Dict[str, Any]]:
    """
    All favorites, newest first, with the referenced item's name and path.

    Each favorite is left-joined against the table its item_type points at.
    A favorite whose file or folder was deleted keeps name/path None and is
    reported with ``exists = False``.
    """
    rows = (
        db.query(Favorite, Folder.name, Folder.path, File.name, File.path)
        .outerjoin(
            Folder,
            and_(Favorite.item_type == ItemType.FOLDER.value, Favorite.item_id == Folder.id),
        )
        .outerjoin(
            File,
            and_(Favorite.item_type == ItemType.FILE.value, Favorite.item_id == File.id),
        )
        .order_by(Favorite.created_at.desc(), Favorite.id.desc())
        .all()
    )

    favorites = []
    for favorite, folder_name, folder_path, file_name, file_path in rows:
        resolved = {
            ItemType.FOLDER: (folder_name, folder_path),
            ItemType.FILE: (file_name, file_path),
        }
        name, path = resolved[ItemType(favorite.item_type)]
        favorites.append(
            {
                "id": favorite.id,
                "item_type": favorite.item_type,
                "item_id": favorite.item_id,
                "created_at": favorite.created_at,
                "name": name,
                "path": path,
                "exists": name is not None,
            }
        )
    return favorites


def find_favorite(db: Session, item_type: ItemType, item_id: int):
    return (
        db.query(Favorite)
        .filter(Favorite.item_type == item_type.value, Favorite.item_id == item_id)
        .first()
    )


def add_favorite(db: Session, target: FavoriteTarget) -> Favorite:
    item_type = ItemType(target.item_type)
    existing = find_favorite(db, item_type, target.item_id)
    if existing:
        return existing

    favorite = Favorite(item_type=item_type.value, item_id=target.item_id)
    db.add(favorite)
    commit_or_rollback(db)
    db.refresh(favorite)
    logger.info(f"Added {item_type.value} {target.item_id} to favorites")
    return favorite


def remove_favorite(db: Session, favorite_id: int) -> bool:
    deleted = (
        db.query(Favorite)
        .filter(Favorite.id == favorite_id)
        .delete(synchronize_session=False)
    )
    commit_or_rollback(db)
    return deleted > 0


def is_favorite(db: Session, item_type: ItemType, item_id: int) -> bool:
    return db.query(
        exists().where(
            Favorite.item_type == item_type.value, Favorite.item_id == item_id
        )
    ).scalar()
