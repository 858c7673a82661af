from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional
import logging

from models.chicken import Chicken
from models.egg_collection import EggCollection
from models.employee import Employee
from schemas.egg_collection import EggCollectionCreate
from exceptions import NotFoundError, translate_db_errors

logger = logging.getLogger(__name__)


@translate_db_errors
def get_collections_by_date_range(
    db: Session,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    employee_id: Optional[int] = None,
) -> List[EggCollection]:
    """Collection events between the two dates, both ends inclusive."""
    query = db.query(EggCollection)
    if start_date is not None:
        query = query.filter(EggCollection.collection_date >= start_date)
    if end_date is not None:
        query = query.filter(EggCollection.collection_date <= end_date)
    if employee_id is not None:
        query = query.filter(EggCollection.employee_id == employee_id)
    return query.order_by(EggCollection.collection_date, EggCollection.id).all()


@translate_db_errors
def create_collection(db: Session, collection: EggCollectionCreate) -> EggCollection:
    # Referenced employee and chicken must exist
    for model, entity, ref_id in (
        (Employee, "Employee", collection.employee_id),
        (Chicken, "Chicken", collection.chicken_id),
    ):
        if ref_id is not None and db.query(model.id).filter(model.id == ref_id).first() is None:
            logger.warning(f"Rejected egg collection for unknown {entity.lower()} {ref_id}")
            raise NotFoundError(entity, ref_id)

    db_collection = EggCollection(**collection.model_dump())
    db.add(db_collection)
    db.commit()
    db.refresh(db_collection)
    logger.info(
        f"Recorded {db_collection.egg_count} eggs from cage {db_collection.cage_id} "
        f"on {db_collection.collection_date.isoformat()}"
    )
    return db_collection


@translate_db_errors
def delete_collection(db: Session, collection_id: int):
    db_collection = db.query(EggCollection).filter(EggCollection.id == collection_id).first()
    if db_collection is None:
        raise NotFoundError("Egg collection", collection_id)
    db.delete(db_collection)
    db.commit()
    logger.info(f"Deleted egg collection {collection_id}")
