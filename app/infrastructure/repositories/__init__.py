"""Repository implementations for infrastructure layer."""

from .allowance_promotion_repository import AllowancePromotionRepository
from .appreciation_repository import AppreciationRepository
from .catalog_repositories import (
    CatalogRepository,
    EducationalQualificationRepository,
    JobTitleRepository,
    WorkplaceRepository,
)
from .employee_repository import EmployeeRepository
from .notification_repository import NotificationRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "AllowancePromotionRepository",
    "AppreciationRepository",
    "CatalogRepository",
    "EducationalQualificationRepository",
    "EmployeeRepository",
    "JobTitleRepository",
    "NotificationRepository",
    "RoleRepository",
    "UserRepository",
    "WorkplaceRepository",
]
