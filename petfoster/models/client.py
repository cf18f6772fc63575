from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petfoster.db.session import Base
from petfoster.models.auth_user import AuthUser
from petfoster.models.common import IntIdMixin, SearchVectorMixin


class Client(Base, IntIdMixin, SearchVectorMixin):
    __tablename__ = "clients"

    user_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("auth_users.id"), nullable=True, index=True)
    description: Mapped[str | None] = mapped_column(String(100), nullable=True)

    user: Mapped[AuthUser | None] = relationship(AuthUser, lazy="joined")
