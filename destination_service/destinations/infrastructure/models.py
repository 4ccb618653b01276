"""
Destination Infrastructure Models
==================================

SQLAlchemy ORM model for the destinations table.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from destination_service.destinations.domain import Destination
from destination_service.infrastructure.database import Base


class DestinationModel(Base):
    """
    Database model for Destination entity.

    Maps to the 'destinations' table:
    destinations(id serial primary key, country varchar(100) not null,
    capital varchar(100), population integer, region varchar(100))
    """
    __tablename__ = "destinations"
    # SQLite would otherwise hand out a deleted max id again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    capital: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    population: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    region: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    def to_entity(self) -> Destination:
        return Destination(
            id=self.id,
            country=self.country,
            capital=self.capital,
            population=self.population,
            region=self.region,
        )
