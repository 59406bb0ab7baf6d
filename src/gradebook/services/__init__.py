"""Service layer exports."""

from . import (
	course_service,
	mark_service,
	student_service,
)
from .errors import ConnectivityFailure, ConstraintViolation, RecordNotFound, StoreError

__all__ = [
	"ConnectivityFailure",
	"ConstraintViolation",
	"RecordNotFound",
	"StoreError",
	"course_service",
	"mark_service",
	"student_service",
]
