from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from database import get_db
from schemas.chicken import Chicken, ChickenCreate, ChickenUpdate
from crud import chicken as crud_chicken
from exceptions import NotFoundError

router = APIRouter(prefix="/api/chickens", tags=["Chickens"])

@router.get("/", response_model=List[Chicken])
def read_chickens(skip: int = 0, limit: Optional[int] = None, db: Session = Depends(get_db)):
    """Retrieve all chickens, or a page of them when limit is given."""
    return crud_chicken.get_chickens(db=db, skip=skip, limit=limit)

@router.get("/{chicken_id}", response_model=Chicken)
def read_chicken(chicken_id: int, db: Session = Depends(get_db)):
    """Retrieve a single chicken by ID."""
    db_chicken = crud_chicken.get_chicken(db=db, chicken_id=chicken_id)
    if db_chicken is None:
        raise NotFoundError("Chicken", chicken_id)
    return db_chicken

@router.post("/", response_model=Chicken, status_code=status.HTTP_201_CREATED)
def create_chicken(chicken: ChickenCreate, db: Session = Depends(get_db)):
    """Add a new chicken."""
    return crud_chicken.create_chicken(db=db, chicken=chicken)

@router.put("/{chicken_id}", response_model=Chicken)
def update_chicken(chicken_id: int, chicken: ChickenUpdate, db: Session = Depends(get_db)):
    """Update an existing chicken."""
    return crud_chicken.update_chicken(db=db, chicken_id=chicken_id, chicken=chicken)

@router.delete("/{chicken_id}", status_code=status.HTTP_200_OK)
def delete_chicken(chicken_id: int, db: Session = Depends(get_db)):
    """Delete a chicken."""
    crud_chicken.delete_chicken(db=db, chicken_id=chicken_id)
    return {"message": "Chicken deleted successfully."}
