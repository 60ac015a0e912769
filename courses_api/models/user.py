"""User model definitions."""

from sqlalchemy import Column, Integer, String

from courses_api.database import Base


class User(Base):
    """Represents an account that can authenticate and own courses."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    # Not unique: duplicate registrations are accepted, lookups take the first match.
    email_address = Column(String, nullable=False, index=True)
    password = Column(String, nullable=False)  # bcrypt hash
