from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    """Thin base class that holds the database session.

    Every concrete repository receives an ``AsyncSession`` at
    construction time so that several repositories can read from the
    same session (and therefore the same snapshot) within one request.
    The ranking data is read-only, so no write helpers live here.
    """

    def __init__(self, db: AsyncSession) -> None:
        self._db = db
