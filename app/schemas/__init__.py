from .user import (
	UserBase,
	UserCreate,
	UserUpdate,
	UserResponse,
	PasswordChange,
	TokenResponse,
	MotherListItem,
)
from .child import (
	ChildBase,
	ChildCreate,
	ChildUpdate,
	ChildResponse,
	ChildWithLatestRecord,
)
from .health_record import (
	HealthRecordBase,
	HealthRecordCreate,
	HealthRecordUpdate,
	HealthRecordResponse,
	HealthRecordCreatedResponse,
	HealthRecordListResponse,
	GrowthPoint,
	GrowthTrendResponse,
)
from .mother_health_record import (
	MotherHealthRecordBase,
	MotherHealthRecordCreate,
	MotherHealthRecordUpdate,
	MotherHealthRecordResponse,
	MotherHealthRecordWithMother,
	MotherHealthRecordListResponse,
	MotherHealthTrendPoint,
)
from .immunization import (
	ImmunizationBase,
	ImmunizationCreate,
	ImmunizationUpdate,
	ImmunizationResponse,
	UpcomingImmunization,
	OverdueImmunization,
	ImmunizationListResponse,
)
from .alert import (
	AlertCreate,
	AlertResponse,
	AlertWithChild,
	AlertResolveResponse,
	AlertPurgeResponse,
)
from .report import (
	VaccineCoverage,
	ChildVaccinationStatus,
	VaccinationReportResponse,
	ChildRecordSummary,
	HealthRecordsReportResponse,
)
from .profile import (
	ChildProfileResponse,
	MotherProfileResponse,
)
from .statistics import (
	ChildStatistics,
	HealthRecordStatistics,
	ImmunizationStatistics,
	MotherRecordTypeStatistics,
	DoctorDashboardResponse,
	MotherDashboardResponse,
)

__all__ = [
	# User
	"UserBase",
	"UserCreate",
	"UserUpdate",
	"UserResponse",
	"PasswordChange",
	"TokenResponse",
	"MotherListItem",
	# Child
	"ChildBase",
	"ChildCreate",
	"ChildUpdate",
	"ChildResponse",
	"ChildWithLatestRecord",
	# HealthRecord
	"HealthRecordBase",
	"HealthRecordCreate",
	"HealthRecordUpdate",
	"HealthRecordResponse",
	"HealthRecordCreatedResponse",
	"HealthRecordListResponse",
	"GrowthPoint",
	"GrowthTrendResponse",
	# MotherHealthRecord
	"MotherHealthRecordBase",
	"MotherHealthRecordCreate",
	"MotherHealthRecordUpdate",
	"MotherHealthRecordResponse",
	"MotherHealthRecordWithMother",
	"MotherHealthRecordListResponse",
	"MotherHealthTrendPoint",
	# Immunization
	"ImmunizationBase",
	"ImmunizationCreate",
	"ImmunizationUpdate",
	"ImmunizationResponse",
	"UpcomingImmunization",
	"OverdueImmunization",
	"ImmunizationListResponse",
	# Alert
	"AlertCreate",
	"AlertResponse",
	"AlertWithChild",
	"AlertResolveResponse",
	"AlertPurgeResponse",
	# Reports
	"VaccineCoverage",
	"ChildVaccinationStatus",
	"VaccinationReportResponse",
	"ChildRecordSummary",
	"HealthRecordsReportResponse",
	# Profiles
	"ChildProfileResponse",
	"MotherProfileResponse",
	# Statistics
	"ChildStatistics",
	"HealthRecordStatistics",
	"ImmunizationStatistics",
	"MotherRecordTypeStatistics",
	"DoctorDashboardResponse",
	"MotherDashboardResponse",
]
