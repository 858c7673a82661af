from sqlalchemy import Column, Integer, Float, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database import Base
from models.audit_mixin import TimestampMixin

class Employee(Base, TimestampMixin):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False)
    passport_data = Column(String, nullable=False, unique=True)
    salary = Column(Float, nullable=False)

    cage_assignments = relationship(
        "EmployeeCage",
        back_populates="employee",
        cascade="all, delete-orphan",
        order_by="EmployeeCage.cage_id",
    )

    @property
    def cages(self):
        return [assignment.cage_id for assignment in self.cage_assignments]


class EmployeeCage(Base):
    __tablename__ = "employee_cages"
    __table_args__ = (UniqueConstraint('employee_id', 'cage_id', name='_employee_cage_uc'),)

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    cage_id = Column(Integer, nullable=False, index=True)

    employee = relationship("Employee", back_populates="cage_assignments")
