"""Models module exporting all database models."""

from .admin import Admin
from .agent import Agent, PersonnelStatus
from .booking import Booking, BookingStatus, PaymentStatus
from .feedback import Feedback, FeedbackCategory, FeedbackStatus
from .inquiry import Inquiry
from .staff import Staff, StaffRole
from .support_ticket import SupportTicket, TicketPriority, TicketStatus
from .tour import Difficulty, Tour, TourStatus
from .user import User

__all__ = [
    # Accounts
    "Admin",
    "User",

    # Personnel
    "Agent",
    "Staff",
    "StaffRole",
    "PersonnelStatus",

    # Catalogue and sales
    "Tour",
    "TourStatus",
    "Difficulty",
    "Booking",
    "BookingStatus",
    "PaymentStatus",

    # Customer messages
    "SupportTicket",
    "Inquiry",
    "TicketStatus",
    "TicketPriority",
    "Feedback",
    "FeedbackStatus",
    "FeedbackCategory",
]
