from models.chicken import Chicken
from models.employee import Employee, EmployeeCage
from models.cage import Cage
from models.egg_collection import EggCollection
from models.app_config import AppConfig

__all__ = ['AppConfig', 'Cage', 'Chicken', 'EggCollection', 'Employee', 'EmployeeCage',]
