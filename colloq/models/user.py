"""Model for registered user accounts."""

from datetime import datetime
from typing import Dict, Any
from sqlalchemy import Column, Integer, String, DateTime

from .base import Base

class User(Base):
    """
    A user account created through signup.
    
    Fields:
        id: Unique identifier (auto-generated)
        name: Display name
        email: Login identity, unique across accounts
        password_hash: Salted bcrypt hash, the plain password is never stored
        created_at: When the account was created
    """
    __tablename__ = 'users'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, leaving out the password hash."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'created_at': self.created_at
        }
    
    def __str__(self) -> str:
        """String representation."""
        return f"User(id={self.id}, email={self.email})"
