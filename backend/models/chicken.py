from sqlalchemy import Column, Integer, Float, String
from database import Base
from models.audit_mixin import TimestampMixin

class Chicken(Base, TimestampMixin):
    __tablename__ = "chickens"

    id = Column(Integer, primary_key=True, index=True)
    # Several chickens may share one cage
    cage_id = Column(Integer, nullable=False, index=True)
    weight = Column(Float, nullable=False)  # kilograms
    age = Column(Integer, nullable=False)  # months
    egg_per_month = Column(Integer, nullable=False, default=0)
    breed = Column(String, nullable=False)
