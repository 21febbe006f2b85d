"""Service layer package."""

from .admin_service import AdminService
from .agent_service import AgentService
from .booking_service import BookingService
from .dashboard_service import DashboardService
from .feedback_service import FeedbackService
from .inquiry_service import InquiryService
from .staff_service import StaffService
from .support_ticket_service import SupportTicketService
from .tour_service import TourService
from .upload_service import UploadService
from .user_service import UserService

__all__ = [
    "AdminService",
    "AgentService",
    "BookingService",
    "DashboardService",
    "FeedbackService",
    "InquiryService",
    "StaffService",
    "SupportTicketService",
    "TourService",
    "UploadService",
    "UserService",
]
