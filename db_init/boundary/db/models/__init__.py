from db_init.boundary.db.models.employee_model import EmployeeModel

__all__ = ["EmployeeModel"]
