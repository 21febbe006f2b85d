"""Pydantic schemas for request/response validation."""

from .agent import *  # noqa: F403
from .auth import *  # noqa: F403
from .booking import *  # noqa: F403
from .common import *  # noqa: F403
from .dashboard import *  # noqa: F403
from .feedback import *  # noqa: F403
from .health import *  # noqa: F403
from .inquiry import *  # noqa: F403
from .staff import *  # noqa: F403
from .support_ticket import *  # noqa: F403
from .tour import *  # noqa: F403
from .user import *  # noqa: F403
