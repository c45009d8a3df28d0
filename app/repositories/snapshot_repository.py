"""Snapshot repository – bulk read of the ranking inputs.

Reads agents, assignments and bookings through the table repositories
on a single ``AsyncSession`` and converts the rows into immutable
records.  Storage failures become ``DataUnavailableError`` and
malformed rows become ``DataIntegrityError``; a partially loaded
snapshot is never returned.
"""

import logging
from typing import Any, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import DataIntegrityError, DataUnavailableError
from app.repositories.agent_repository import AgentRepository
from app.repositories.assignment_repository import AssignmentRepository
from app.repositories.base import BaseRepository
from app.repositories.booking_repository import BookingRepository
from app.schemas.snapshot import AgentRecord, AssignmentRecord, BookingRecord
from app.services.snapshot import DataSnapshot

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _to_records(model: Type[RecordT], rows: Iterable[Any]) -> List[RecordT]:
    try:
        return [model.model_validate(row) for row in rows]
    except ValidationError as exc:
        logger.error("Malformed %s row: %s", model.__name__, exc)
        raise DataIntegrityError(
            f"Malformed {model.__name__} row: {exc.errors()[0]['msg']}"
        ) from exc


class SnapshotRepository(BaseRepository):
    """Load a consistent, read-only :class:`DataSnapshot`."""

    async def load_snapshot(self) -> DataSnapshot:
        """Read the full agent, assignment and booking tables."""
        try:
            agents = await AgentRepository(self._db).list_all()
            assignments = await AssignmentRepository(self._db).list_all()
            bookings = await BookingRepository(self._db).list_all()
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Failed to read ranking data: %s", exc)
            raise DataUnavailableError("Agent data source unavailable") from exc

        snapshot = DataSnapshot(
            _to_records(AgentRecord, agents),
            _to_records(AssignmentRecord, assignments),
            _to_records(BookingRecord, bookings),
        )
        logger.info("Loaded %r", snapshot)
        return snapshot

    async def load_agent_snapshot(self, agent_id: int) -> Optional[DataSnapshot]:
        """Read one agent together with its own history.

        Returns ``None`` when the agent does not exist.
        """
        try:
            agent = await AgentRepository(self._db).get_by_id(agent_id)
            if agent is None:
                return None
            assignments = await AssignmentRepository(self._db).list_for_agent(
                agent_id
            )
            bookings = await BookingRepository(self._db).list_for_agent(agent_id)
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Failed to read data for agent %s: %s", agent_id, exc)
            raise DataUnavailableError("Agent data source unavailable") from exc

        return DataSnapshot(
            _to_records(AgentRecord, [agent]),
            _to_records(AssignmentRecord, assignments),
            _to_records(BookingRecord, bookings),
        )
