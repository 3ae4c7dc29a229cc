"""ORM models used by the application infrastructure."""

from .allowance_promotion import AllowancePromotionModel
from .appreciation import AppreciationModel
from .educational_qualification import EducationalQualificationModel
from .employee import EmployeeModel
from .job_title import JobTitleModel
from .notification import NotificationModel
from .role import RoleModel
from .user import UserModel
from .workplace import WorkplaceModel

__all__ = [
    "AllowancePromotionModel",
    "AppreciationModel",
    "EducationalQualificationModel",
    "EmployeeModel",
    "JobTitleModel",
    "NotificationModel",
    "RoleModel",
    "UserModel",
    "WorkplaceModel",
]
