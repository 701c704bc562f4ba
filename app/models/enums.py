import enum


class UserRole(enum.Enum):
    ADMIN = "admin"
    USER = "user"


class RecordStatus(enum.Enum):
    """Visibility of catalogue rows (packages, places, cabs, services)"""
    ACTIVE = "active"
    INACTIVE = "inactive"


class BookingStatus(enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ContactStatus(enum.Enum):
    PENDING = "pending"
    REPLIED = "replied"
    ARCHIVED = "archived"


def enum_values(enum_cls):
    return [member.value for member in enum_cls]
