from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint, Index
from sqlalchemy.sql import func
from app.core.database import Base


class Favorite(Base):
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, index=True)
    item_type = Column(String(16), nullable=False)
    # polymorphic: points at files.id or folders.id depending on item_type
    item_id = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        CheckConstraint(
            "item_type IN ('file', 'folder')",
            name="favorites_item_type_check"
        ),
        Index("idx_favorites_item", "item_type", "item_id"),
    )
