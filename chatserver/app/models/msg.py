# chatserver/app/models/msg.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Text, func
from sqlalchemy.orm import relationship

from chatserver.app.database.session import Base


class Msg(Base):
    """
    A single chat message
    """
    __tablename__ = "msgs"

    id = Column(Integer, primary_key=True, index=True)
    msg = Column(Text, nullable=False)
    author_id = Column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    author = relationship("User", back_populates="msgs", lazy="joined")
