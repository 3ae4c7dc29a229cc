"""Use cases for managing employee records."""

from .create_employee import create_employee
from .delete_employee import delete_employee
from .get_employee import get_employee
from .list_employees import list_employees
from .update_employee import update_employee

__all__ = [
    "create_employee",
    "delete_employee",
    "get_employee",
    "list_employees",
    "update_employee",
]
