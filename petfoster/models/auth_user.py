from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from petfoster.db.session import Base
from petfoster.models.common import IntIdMixin, SearchVectorMixin

class AuthUser(Base, IntIdMixin, SearchVectorMixin):
    __tablename__ = "auth_users"
    email: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(256), nullable=False)  # pbkdf2 hash
    name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
