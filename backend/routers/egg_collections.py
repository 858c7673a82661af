from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional

from database import get_db
from schemas.egg_collection import EggCollection, EggCollectionCreate
from crud import egg_collection as crud_egg_collection
from services.report_service import validate_date_range

router = APIRouter(prefix="/api/egg-collections", tags=["Egg Collections"])

@router.get("/", response_model=List[EggCollection])
def read_collections(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
):
    """List egg collections, optionally limited to a date range."""
    validate_date_range(start_date, end_date)
    return crud_egg_collection.get_collections_by_date_range(db, start_date, end_date)

@router.post("/", response_model=EggCollection, status_code=status.HTTP_201_CREATED)
def create_collection(collection: EggCollectionCreate, db: Session = Depends(get_db)):
    """Record an egg collection."""
    return crud_egg_collection.create_collection(db, collection)

@router.delete("/{collection_id}", status_code=status.HTTP_200_OK)
def delete_collection(collection_id: int, db: Session = Depends(get_db)):
    crud_egg_collection.delete_collection(db, collection_id)
    return {"message": "Egg collection deleted successfully."}
