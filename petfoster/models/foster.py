from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petfoster.db.session import Base
from petfoster.models.auth_user import AuthUser
from petfoster.models.common import IntIdMixin, SearchVectorMixin
from petfoster.models.pet import Pet


class Foster(Base, IntIdMixin, SearchVectorMixin):
    __tablename__ = "foster"

    user_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("auth_users.id"), nullable=True, index=True)
    description: Mapped[str | None] = mapped_column(String(100), nullable=True)
    pet_id: Mapped[int] = mapped_column(Integer, ForeignKey("pets.id"), nullable=False, index=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    user: Mapped[AuthUser | None] = relationship(AuthUser, lazy="joined")
    pet: Mapped[Pet] = relationship(Pet, lazy="joined")
