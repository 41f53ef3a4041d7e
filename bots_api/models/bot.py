# bots_api/models/bot.py
from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, func, true

from bots_api.core.database import Base

class Bot(Base):
    """SQLAlchemy model for the 'bots' table."""
    __tablename__ = "bots"
    # Keep SQLite from handing out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False)
    price = Column(Float, nullable=False)
    availability = Column(Boolean, nullable=False, default=True, server_default=true())
    description = Column(String(255), nullable=True)
    base_personality = Column("basePersonality", String(50), nullable=True)
    formality = Column(String(50), nullable=True)
    enthusiasm = Column(String(50), nullable=True)
    humor = Column(String(50), nullable=True)
    use_case_template = Column("useCaseTemplate", String(100), nullable=True)

    created_at = Column("createdAt", DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column("updatedAt", DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Bot(id={self.id}, name='{self.name}', availability={self.availability})>"
