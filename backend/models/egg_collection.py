from sqlalchemy import Column, Date, Integer
from database import Base
from models.audit_mixin import TimestampMixin

class EggCollection(Base, TimestampMixin):
    """A dated egg-collection event, the source of every date-ranged report."""
    __tablename__ = "egg_collections"

    id = Column(Integer, primary_key=True, index=True)
    collection_date = Column(Date, nullable=False, index=True)
    cage_id = Column(Integer, nullable=False, index=True)
    chicken_id = Column(Integer, nullable=True, index=True)
    # The employee credited with the collection
    employee_id = Column(Integer, nullable=True, index=True)
    egg_count = Column(Integer, nullable=False, default=1)
