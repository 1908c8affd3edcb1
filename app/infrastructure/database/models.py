# app/infrastructure/database/models.py

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from app.infrastructure.database.session import Base


class BaseModel(Base):
    __abstract__ = True

    id = Column(String, primary_key=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    is_deleted = Column(Boolean, default=False)


class UserModel(BaseModel):
    """ORM model for school members. Students and teachers share the table, told apart by role."""

    __tablename__ = "users"

    ref = Column(String, nullable=False, unique=True)
    email = Column(String, nullable=False, unique=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    role = Column(String, nullable=False, index=True)

    # Optimistic locking: concurrent writers of the same row raise StaleDataError.
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}
