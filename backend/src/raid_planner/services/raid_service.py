"""Raid creation on top of the repository contract."""

import asyncio
import logging

from raid_planner.models.raid import CreateRaidData, Raid
from raid_planner.repositories.base import RaidRepository, RepositoryError

logger = logging.getLogger(__name__)


class RaidService:
    """Creates raids, bounding the repository call with a timeout."""

    def __init__(self, repository: RaidRepository, timeout_seconds: float = 10.0):
        self.repository = repository
        self.timeout_seconds = timeout_seconds

    async def create_raid(self, data: CreateRaidData) -> Raid:
        """Validate input and store a new raid.

        Raises:
            ValueError: If the raid data is invalid or the creator is unknown
            RepositoryError: If the repository fails or does not answer in time
        """
        if not data.name.strip():
            raise ValueError("Raid name is required")
        if not data.instance.strip():
            raise ValueError("Raid instance is required")
        if data.duration <= 0:
            raise ValueError("Duration must be a positive number of minutes")
        if data.max_players <= 0:
            raise ValueError("Max players must be positive")
        if self.repository.get_user(data.created_by) is None:
            raise ValueError(f"Unknown user: {data.created_by}")

        try:
            return await asyncio.wait_for(
                self.repository.create_raid(data), timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Raid creation timed out after {self.timeout_seconds}s")
            raise RepositoryError("Raid creation timed out") from e
