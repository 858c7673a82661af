from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List
import logging

from models.cage import Cage
from schemas.cage import CageCreate
from exceptions import ValidationError, translate_db_errors

logger = logging.getLogger(__name__)


@translate_db_errors
def get_cage(db: Session, cage_id: int):
    return db.query(Cage).filter(Cage.id == cage_id).first()


@translate_db_errors
def get_cages(db: Session) -> List[Cage]:
    return db.query(Cage).order_by(Cage.id).all()


@translate_db_errors
def create_cage(db: Session, cage: CageCreate) -> Cage:
    db_cage = Cage(**cage.model_dump(exclude_none=True))
    db.add(db_cage)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ValidationError(f"Cage with id {cage.id} or number {cage.number} already exists") from e
    db.refresh(db_cage)
    logger.info(f"Registered cage {db_cage.id} as number {db_cage.number}")
    return db_cage


def resolve_cage_number(db: Session, cage_id: int) -> int:
    """Display number of a cage; unregistered cages are shown by their id."""
    db_cage = get_cage(db, cage_id)
    return db_cage.number if db_cage else cage_id
