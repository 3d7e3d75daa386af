# models/user.py
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from .base import Base


class User(Base):
     """
     User model - authentication identity.
     Holds credentials only; everything shown to other users lives on Profile.
     """
     __tablename__ = "users"

     id = Column(Integer, primary_key=True, autoincrement=True)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)  # bcrypt hash
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     profile = relationship("Profile", back_populates="user", uselist=False)

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}')>"
