from sqlalchemy import Column, Integer
from database import Base
from models.audit_mixin import TimestampMixin

class Cage(Base, TimestampMixin):
    __tablename__ = "cages"

    # Chickens and employee assignments reference this id by value
    id = Column(Integer, primary_key=True, index=True)
    number = Column(Integer, nullable=False, unique=True)
