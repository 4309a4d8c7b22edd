import logging

from sqlalchemy.orm import Session

from app.core.database import commit_or_rollback
from app.models.file import File
from app.models.folder import Folder

logger = logging.getLogger(__name__)

# (name, path, parent path); parents are listed before their children
SAMPLE_FOLDERS = [
    ("Root", "/", None),
    ("Documents", "/Documents", "/"),
    ("Pictures", "/Pictures", "/"),
    ("Videos", "/Videos", "/"),
    ("Work", "/Documents/Work", "/Documents"),
    ("Personal", "/Documents/Personal", "/Documents"),
]

# (name, folder path, extension, size, mime type)
SAMPLE_FILES = [
    ("report.pdf", "/Documents/Work", "pdf", 2048576, "application/pdf"),
    ("presentation.pptx", "/Documents/Work", "pptx", 5242880,
     "application/vnd.openxmlformats-officedocument.presentationml.presentation"),
    ("notes.txt", "/Documents/Personal", "txt", 4096, "text/plain"),
    ("photo.jpg", "/Pictures", "jpg", 1048576, "image/jpeg"),
    ("vacation.mp4", "/Videos", "mp4", 104857600, "video/mp4"),
]


def seed_sample_data(db: Session) -> bool:
    """Insert the demo folders and files unless the folders table already has rows."""
    if db.query(Folder).first() is not None:
        return False

    folders = {}
    for name, path, parent_path in SAMPLE_FOLDERS:
        parent = folders.get(parent_path)
        folder = Folder(name=name, path=path, parent_id=parent.id if parent else None)
        db.add(folder)
        db.flush()
        folders[path] = folder

    for name, folder_path, extension, size, mime_type in SAMPLE_FILES:
        db.add(
            File(
                name=name,
                path=f"{folder_path}/{name}",
                folder_id=folders[folder_path].id,
                extension=extension,
                size=size,
                mime_type=mime_type,
            )
        )
    commit_or_rollback(db)
    logger.info(
        f"Seeded {len(SAMPLE_FOLDERS)} sample folders and {len(SAMPLE_FILES)} sample files"
    )
    return True
