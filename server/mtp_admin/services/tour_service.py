"""Tour service for business logic operations."""

import logging
from typing import List
from uuid import UUID

from ..models.tour import Tour
from .base import CrudService

logger = logging.getLogger(__name__)


class TourService(CrudService[Tour]):
    """Service for tour-related operations."""

    model = Tour
    resource_type = "tour"
    search_fields = ("title", "location", "category")
    sort_options = {
        "created_at": ("created_at", True),
        "title": ("title", False),
        "price": ("price", False),
        "duration": ("duration", False),
    }

    async def add_images(self, tour_id: UUID | str, paths: List[str]) -> Tour:
        """
        Append uploaded image paths to a tour's gallery.

        Raises:
            NotFoundError: If the tour does not exist
        """
        tour = await self.get_by_id_or_raise(tour_id)
        tour.images = [*(tour.images or []), *paths]
        await self.db.commit()

        logger.info(
            "Images attached to tour",
            extra={"tour_id": str(tour.id), "image_count": len(paths)}
        )
        return await self.get_by_id(tour.id)
