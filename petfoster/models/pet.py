from sqlalchemy import REAL, String
from sqlalchemy.orm import Mapped, mapped_column
from petfoster.db.session import Base
from petfoster.models.common import IntIdMixin, SearchVectorMixin

class Pet(Base, IntIdMixin, SearchVectorMixin):
    __tablename__ = "pets"
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    species: Mapped[str | None] = mapped_column(String(50), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(5), nullable=True)
    age: Mapped[float | None] = mapped_column(REAL, nullable=True)
    description: Mapped[str | None] = mapped_column(String(100), nullable=True)
