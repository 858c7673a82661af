from sqlalchemy.orm import Session
from typing import List
import logging

from models.chicken import Chicken
from schemas.chicken import ChickenCreate, ChickenUpdate
from exceptions import NotFoundError, translate_db_errors

logger = logging.getLogger(__name__)


@translate_db_errors
def get_chicken(db: Session, chicken_id: int):
    return db.query(Chicken).filter(Chicken.id == chicken_id).first()


@translate_db_errors
def get_chickens(db: Session, skip: int = 0, limit: int = None) -> List[Chicken]:
    query = db.query(Chicken).order_by(Chicken.id).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


@translate_db_errors
def create_chicken(db: Session, chicken: ChickenCreate) -> Chicken:
    db_chicken = Chicken(**chicken.model_dump())
    db.add(db_chicken)
    db.commit()
    db.refresh(db_chicken)
    logger.info(f"Created chicken {db_chicken.id} in cage {db_chicken.cage_id}")
    return db_chicken


@translate_db_errors
def update_chicken(db: Session, chicken_id: int, chicken: ChickenUpdate) -> Chicken:
    db_chicken = get_chicken(db, chicken_id)
    if db_chicken is None:
        raise NotFoundError("Chicken", chicken_id)

    update_data = chicken.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in update_data.items():
        setattr(db_chicken, key, value)
    db.commit()
    db.refresh(db_chicken)
    logger.info(f"Updated chicken {chicken_id}: {sorted(update_data)}")
    return db_chicken


@translate_db_errors
def delete_chicken(db: Session, chicken_id: int):
    db_chicken = get_chicken(db, chicken_id)
    if db_chicken is None:
        raise NotFoundError("Chicken", chicken_id)
    db.delete(db_chicken)
    db.commit()
    logger.info(f"Deleted chicken {chicken_id}")
