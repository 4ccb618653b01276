"""
Destination Infrastructure Repositories
========================================

SQLAlchemy implementation of the destination repository.

Each operation is a single parameterized statement committed on its own.
"""

import re
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from destination_service.core import RepositoryException
from destination_service.destinations.application import IDestinationRepository
from destination_service.destinations.domain import CountryInfo, Destination
from destination_service.destinations.infrastructure.models import DestinationModel

# Plain ASCII integers only; int() would also take "1_0", " 7 " or other-script digits.
_INTEGER_ID = re.compile(r"-?[0-9]+")


class SQLAlchemyDestinationRepository(IDestinationRepository):
    """
    SQLAlchemy implementation of destination repository.

    Database errors are re-raised as RepositoryException.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_all(self) -> List[Destination]:
        """Return every destination, most recently created first."""
        stmt = select(DestinationModel).order_by(DestinationModel.id.desc())
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise RepositoryException(str(e)) from e
        return [row.to_entity() for row in result.scalars().all()]

    async def create(self, country: str, info: CountryInfo) -> Destination:
        """Insert a destination; the database assigns its id."""
        model = DestinationModel(
            country=country,
            capital=info.capital,
            population=info.population,
            region=info.region,
        )

        self._session.add(model)
        try:
            await self._session.flush()
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise RepositoryException(str(e)) from e
        return model.to_entity()

    async def delete(self, destination_id: str) -> None:
        """Delete by id. Zero affected rows is not an error."""
        if not isinstance(destination_id, str) or not _INTEGER_ID.fullmatch(destination_id):
            raise RepositoryException(f"Invalid destination ID: {destination_id}")
        pk = int(destination_id)

        stmt = delete(DestinationModel).where(DestinationModel.id == pk)
        try:
            await self._session.execute(stmt)
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise RepositoryException(str(e)) from e
