"""Form schemas, bound to catalog resources by name."""

from .base import EntityFormModel
from .agreement import AgreementForm
from .branch import BranchForm
from .command import CommandForm
from .department import DepartmentForm
from .employee import EmployeeForm
from .order import OrderForm, order_total
from .stock import StockForm
from .supply import SupplyForm
from .transportation import TransportationForm
from .user import UserForm

FORM_MODELS: dict[str, type[EntityFormModel]] = {
    "branches": BranchForm,
    "users": UserForm,
    "employees": EmployeeForm,
    "departments": DepartmentForm,
    "stock": StockForm,
    "supplies": SupplyForm,
    "transportation": TransportationForm,
    "orders": OrderForm,
    "agreements": AgreementForm,
    "commands": CommandForm,
}

__all__ = [
    "EntityFormModel",
    "AgreementForm",
    "BranchForm",
    "CommandForm",
    "DepartmentForm",
    "EmployeeForm",
    "OrderForm",
    "StockForm",
    "SupplyForm",
    "TransportationForm",
    "UserForm",
    "FORM_MODELS",
    "order_total",
]
