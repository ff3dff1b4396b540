"""Enumerated business values used by the entity forms.

Values match the strings the operations backend stores, including the
mixed-case agreement vocabulary.
"""

from enum import Enum


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    OWNER = "OWNER"
    MANAGER = "MANAGER"
    SUPPLIER = "SUPPLIER"
    BUYER = "BUYER"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class SupplyCategory(str, Enum):
    GENERAL = "GENERAL"
    RAW_MATERIALS = "RAW_MATERIALS"
    EQUIPMENT = "EQUIPMENT"
    PACKAGING = "PACKAGING"
    OFFICE_SUPPLIES = "OFFICE_SUPPLIES"
    MAINTENANCE = "MAINTENANCE"


class SupplyStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    ORDERED = "ORDERED"
    DELIVERED = "DELIVERED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class SupplyUnit(str, Enum):
    PCS = "PCS"
    KG = "KG"
    TONS = "TONS"
    METERS = "METERS"
    LITERS = "LITERS"
    BOXES = "BOXES"
    SETS = "SETS"


class VehicleType(str, Enum):
    TRUCK = "Truck"
    VAN = "Van"
    CONTAINER = "Container"
    TRAILER = "Trailer"
    PICKUP = "Pickup"
    OTHER = "Other"


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    IN_PRODUCTION = "IN_PRODUCTION"
    READY_FOR_DELIVERY = "READY_FOR_DELIVERY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class OrderPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    PARTIAL = "PARTIAL"
    PAID = "PAID"
    OVERDUE = "OVERDUE"


class PaymentMethod(str, Enum):
    CASH = "CASH"
    BANK_TRANSFER = "BANK_TRANSFER"
    CREDIT_CARD = "CREDIT_CARD"
    CHECK = "CHECK"
    OTHER = "OTHER"


class AgreementType(str, Enum):
    EXPORT_CONTRACT = "Export Contract"
    IMPORT_CONTRACT = "Import Contract"
    PARTNERSHIP = "Partnership Agreement"
    SERVICE = "Service Agreement"
    SUPPLY = "Supply Agreement"
    DISTRIBUTION = "Distribution Agreement"
    MANUFACTURING = "Manufacturing Agreement"
    LICENSING = "Licensing Agreement"


class AgreementStatus(str, Enum):
    DRAFT = "Draft"
    UNDER_REVIEW = "Under Review"
    APPROVED = "Approved"
    ACTIVE = "Active"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    EXPIRED = "Expired"
    SUSPENDED = "Suspended"


class AgreementPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class CommandType(str, Enum):
    GENERAL_INSTRUCTION = "GENERAL_INSTRUCTION"
    TASK_ASSIGNMENT = "TASK_ASSIGNMENT"
    POLICY_UPDATE = "POLICY_UPDATE"
    URGENT_NOTICE = "URGENT_NOTICE"
    OPERATIONAL_CHANGE = "OPERATIONAL_CHANGE"
    SAFETY_DIRECTIVE = "SAFETY_DIRECTIVE"
    TRAINING_REQUIREMENT = "TRAINING_REQUIREMENT"
    PERFORMANCE_REVIEW = "PERFORMANCE_REVIEW"
    MAINTENANCE_REQUEST = "MAINTENANCE_REQUEST"
    OTHER = "OTHER"


class CommandPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class CommandStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    ON_HOLD = "ON_HOLD"
