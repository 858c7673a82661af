from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from database import get_db
from schemas.cage import Cage, CageCreate
from crud import cage as crud_cage
from services import report_service

router = APIRouter(prefix="/api/cages", tags=["Cages"])

@router.get("/", response_model=List[Cage])
def read_cages(db: Session = Depends(get_db)):
    """Retrieve all registered cages."""
    return crud_cage.get_cages(db)

@router.get("/empty", response_model=List[Cage])
def read_empty_cages(db: Session = Depends(get_db)):
    """Registered cages with no chicken in them."""
    return report_service.get_empty_cages(db)

@router.post("/", response_model=Cage, status_code=status.HTTP_201_CREATED)
def create_cage(cage: CageCreate, db: Session = Depends(get_db)):
    """Register a cage and its display number."""
    return crud_cage.create_cage(db, cage)
