from __future__ import annotations

from sqlalchemy import Column, Integer, Numeric, PrimaryKeyConstraint, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID

from users_app.models.base import Base

PRIMARY_KEY_CONSTRAINT = "pk_users"
EMAIL_UNIQUE_CONSTRAINT = "uq_users_email"


class UserModel(Base):
    __tablename__ = "users"
    __table_args__ = (
        PrimaryKeyConstraint("id", name=PRIMARY_KEY_CONSTRAINT),
        UniqueConstraint("email", name=EMAIL_UNIQUE_CONSTRAINT),
    )

    id = Column(UUID(as_uuid=True), nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    # Exact precision; never mapped to float.
    balance = Column(Numeric(asdecimal=True), nullable=False)
