from sqlalchemy import BigInteger, FetchedValue, Integer, Text
from sqlalchemy.dialects.postgresql import TSVECTOR
from sqlalchemy.orm import Mapped, mapped_column

# BIGSERIAL on PostgreSQL, plain INTEGER (rowid alias) on SQLite.
IdType = BigInteger().with_variant(Integer(), "sqlite")

class IntIdMixin:
    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

class SearchVectorMixin:
    # Generated by the database (see migrations); the ORM only ever reads it.
    search_vector: Mapped[str | None] = mapped_column(
        TSVECTOR().with_variant(Text(), "sqlite"),
        server_default=FetchedValue(),
        server_onupdate=FetchedValue(),
        deferred=True,
        nullable=True,
    )
