from green_campus.schemas.user import (
    UserCreate,
    UserLogin,
    AdminLogin,
    ResetRequest,
    PasswordReset,
    PasswordChange,
    ProfileUpdate,
    UserResponse,
    RegisterResponse,
    LoginResponse,
    AdminUser,
    AdminLoginResponse,
    MessageResponse,
    LeaderboardEntry
)
from green_campus.schemas.species import SpeciesResponse
from green_campus.schemas.tree import (
    HealthStatus,
    TreeCreate,
    TreeUpdate,
    TreeResponse,
    AdminTreeResponse,
    MapTree
)
from green_campus.schemas.photo import PhotoType, PhotoResponse
from green_campus.schemas.growth import MeasurementCreate, MeasurementResponse, HealthUpdate
from green_campus.schemas.care import (
    ActivityType,
    CareActivityCreate,
    CareActivityResponse,
    WateringStatus,
    NotifyResponse,
    AdminMessage
)
from green_campus.schemas.dashboard import DashboardOverview, DashboardStatistics

__all__ = [
    "UserCreate",
    "UserLogin",
    "AdminLogin",
    "ResetRequest",
    "PasswordReset",
    "PasswordChange",
    "ProfileUpdate",
    "UserResponse",
    "RegisterResponse",
    "LoginResponse",
    "AdminUser",
    "AdminLoginResponse",
    "MessageResponse",
    "LeaderboardEntry",
    "SpeciesResponse",
    "HealthStatus",
    "TreeCreate",
    "TreeUpdate",
    "TreeResponse",
    "AdminTreeResponse",
    "MapTree",
    "PhotoType",
    "PhotoResponse",
    "MeasurementCreate",
    "MeasurementResponse",
    "HealthUpdate",
    "ActivityType",
    "CareActivityCreate",
    "CareActivityResponse",
    "WateringStatus",
    "NotifyResponse",
    "AdminMessage",
    "DashboardOverview",
    "DashboardStatistics"
]
