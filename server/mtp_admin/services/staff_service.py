"""Staff service."""

from ..models.staff import Staff
from .base import CrudService


class StaffService(CrudService[Staff]):
    """Service for staff members."""

    model = Staff
    resource_type = "staff"
    search_fields = ("name", "email", "department")
    sort_options = {
        "created_at": ("created_at", False),
        "name": ("name", False),
        "email": ("email", False),
        "role": ("role", False),
        "department": ("department", False),
        "joining_date": ("joining_date", False),
    }
    default_sort = "name"
    conflict_detail = "A staff member with this e-mail already exists"
