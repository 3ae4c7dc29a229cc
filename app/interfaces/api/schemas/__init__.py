from .allowance_promotion import (
    AllowancePromotionCreate,
    AllowancePromotionProcess,
    AllowancePromotionRead,
    AllowancePromotionUpdate,
)
from .appreciation import AppreciationCreate, AppreciationRead, AppreciationUpdate
from .auth import Token
from .catalog import (
    EducationalQualificationCreate,
    EducationalQualificationRead,
    EducationalQualificationUpdate,
    JobTitleCreate,
    JobTitleRead,
    JobTitleUpdate,
    WorkplaceCreate,
    WorkplaceRead,
    WorkplaceUpdate,
)
from .employee import (
    EmployeeCreate,
    EmployeeEntitlementsRead,
    EmployeeRead,
    EmployeeUpdate,
)
from .notification import (
    EntitlementCheckRead,
    MarkAllReadResponse,
    NotificationCreate,
    NotificationRead,
    UnreadCountRead,
)
from .user import RoleRead, UserCreate, UserRead, UserUpdate

__all__ = [
    "AllowancePromotionCreate",
    "AllowancePromotionProcess",
    "AllowancePromotionRead",
    "AllowancePromotionUpdate",
    "AppreciationCreate",
    "AppreciationRead",
    "AppreciationUpdate",
    "Token",
    "EducationalQualificationCreate",
    "EducationalQualificationRead",
    "EducationalQualificationUpdate",
    "JobTitleCreate",
    "JobTitleRead",
    "JobTitleUpdate",
    "WorkplaceCreate",
    "WorkplaceRead",
    "WorkplaceUpdate",
    "EmployeeCreate",
    "EmployeeEntitlementsRead",
    "EmployeeRead",
    "EmployeeUpdate",
    "EntitlementCheckRead",
    "MarkAllReadResponse",
    "NotificationCreate",
    "NotificationRead",
    "UnreadCountRead",
    "RoleRead",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
