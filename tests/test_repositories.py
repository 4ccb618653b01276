"""
Tests for the SQLAlchemy destination repository and table creation.

Runs against in-memory SQLite through aiosqlite.
"""

import logging

import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from destination_service.core import RepositoryException
from destination_service.destinations.domain import CountryInfo
from destination_service.destinations.infrastructure import SQLAlchemyDestinationRepository
from destination_service.infrastructure.database import create_tables, get_session_context

PARIS = CountryInfo(capital="Paris", population=67000000, region="Europe")
TOKYO = CountryInfo(capital="Tokyo", population=125800000, region="Asia")
LIMA = CountryInfo(capital="Lima", population=32970000, region="Americas")


async def add(country: str, info: CountryInfo):
    async with get_session_context() as session:
        return await SQLAlchemyDestinationRepository(session).create(country, info)


async def list_all():
    async with get_session_context() as session:
        return await SQLAlchemyDestinationRepository(session).list_all()


async def remove(destination_id: str) -> None:
    async with get_session_context() as session:
        await SQLAlchemyDestinationRepository(session).delete(destination_id)


class TestCreate:

    @pytest.mark.asyncio
    async def test_assigns_id_and_stores_fields(self, database):
        destination = await add("France", PARIS)

        assert destination.id == 1
        assert destination.country == "France"
        assert destination.capital == "Paris"
        assert destination.population == 67000000
        assert destination.region == "Europe"

    @pytest.mark.asyncio
    async def test_ids_increase(self, database):
        first = await add("France", PARIS)
        second = await add("Japan", TOKYO)

        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_duplicate_countries_are_allowed(self, database):
        await add("France", PARIS)
        await add("France", PARIS)

        rows = await list_all()
        assert [r.country for r in rows] == ["France", "France"]
        assert rows[0].id != rows[1].id

    @pytest.mark.asyncio
    async def test_deleted_ids_are_not_reused(self, database):
        await add("France", PARIS)
        latest = await add("Japan", TOKYO)
        await remove(str(latest.id))

        replacement = await add("Peru", LIMA)

        assert replacement.id > latest.id


class TestList:

    @pytest.mark.asyncio
    async def test_empty_table(self, database):
        assert await list_all() == []

    @pytest.mark.asyncio
    async def test_newest_first(self, database):
        await add("France", PARIS)
        await add("Japan", TOKYO)
        await add("Peru", LIMA)

        rows = await list_all()

        assert [r.country for r in rows] == ["Peru", "Japan", "France"]
        assert [r.id for r in rows] == sorted((r.id for r in rows), reverse=True)


class TestDelete:

    @pytest.mark.asyncio
    async def test_removes_only_that_record(self, database):
        france = await add("France", PARIS)
        japan = await add("Japan", TOKYO)

        await remove(str(france.id))

        assert [r.id for r in await list_all()] == [japan.id]

    @pytest.mark.asyncio
    async def test_missing_id_is_not_an_error(self, database):
        await add("France", PARIS)

        await remove("999")

        assert len(await list_all()) == 1

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_rejected(self, database):
        with pytest.raises(RepositoryException, match="Invalid destination ID"):
            await remove("abc")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("destination_id", ["1_0", " 7 ", "+7", "7.0", "٧", ""])
    async def test_only_plain_integers_are_accepted(self, database, destination_id):
        await add("France", PARIS)

        with pytest.raises(RepositoryException, match="Invalid destination ID"):
            await remove(destination_id)

        assert len(await list_all()) == 1


class TestCreateTables:

    @pytest.mark.asyncio
    async def test_running_twice_keeps_existing_rows(self, database):
        await add("France", PARIS)

        await create_tables()
        await create_tables()

        rows = await list_all()
        assert [(r.id, r.country) for r in rows] == [(1, "France")]


class TestErrorListeners:

    @pytest.mark.asyncio
    async def test_failed_statement_is_logged(self, database, caplog):
        with caplog.at_level(logging.ERROR, logger="destination_service.infrastructure.database"):
            with pytest.raises(SQLAlchemyError):
                async with get_session_context() as session:
                    await session.execute(text("SELECT * FROM no_such_table"))

        records = [r for r in caplog.records if r.getMessage() == "Database error"]
        assert records
        assert "no_such_table" in records[0].error

    @pytest.mark.asyncio
    async def test_invalidated_connection_is_logged(self, database, caplog):
        with caplog.at_level(logging.ERROR, logger="destination_service.infrastructure.database"):
            async with database.connect() as conn:
                await conn.invalidate(exception=RuntimeError("server closed the connection"))

        records = [r for r in caplog.records if r.getMessage() == "Unexpected error on idle connection"]
        assert records
        assert records[0].error == "server closed the connection"
