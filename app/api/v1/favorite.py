from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.favorite import (
    AddFavoriteRequest,
    FavoriteDetailResponse,
    FavoriteResponse,
    IsFavoriteResponse,
    ItemType,
)
from app.services import favorite_service

router = APIRouter()


@router.get("/", response_model=List[FavoriteDetailResponse])
async def list_favorites(db: Session = Depends(get_db)):
    return favorite_service.list_favorites(db)


# Adding the same item twice returns the existing favorite
@router.post("/", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
async def add_favorite(body: AddFavoriteRequest, db: Session = Depends(get_db)):
    return favorite_service.add_favorite(db, body.to_target())


@router.delete("/{favorite_id}", response_model=MessageResponse)
async def remove_favorite(favorite_id: int, db: Session = Depends(get_db)):
    if not favorite_service.remove_favorite(db, favorite_id):
        raise HTTPException(status_code=404, detail="Favorite not found")
    return {"message": "Removed from favorites"}


@router.get("/check/{item_type}/{item_id}", response_model=IsFavoriteResponse)
async def check_favorite(item_type: ItemType, item_id: int, db: Session = Depends(get_db)):
    return {"is_favorite": favorite_service.is_favorite(db, item_type, item_id)}
