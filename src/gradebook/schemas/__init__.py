"""Public schema exports."""

from .common import CreatedResponse, ErrorResponse, HealthStatus, MessageResponse, ServiceBanner
from .course import CourseRead, CourseWrite
from .mark import MarkDetail, MarkWrite, StudentMark
from .student import StudentRead, StudentWrite

__all__ = [
	"CourseRead",
	"CourseWrite",
	"CreatedResponse",
	"ErrorResponse",
	"HealthStatus",
	"MarkDetail",
	"MarkWrite",
	"MessageResponse",
	"ServiceBanner",
	"StudentMark",
	"StudentRead",
	"StudentWrite",
]
