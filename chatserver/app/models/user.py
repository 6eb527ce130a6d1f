# chatserver/app/models/user.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from chatserver.app.database.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    logged_in_until = Column(DateTime(timezone=True), nullable=True)  # NULL: never logged in

    msgs = relationship("Msg", back_populates="author")
