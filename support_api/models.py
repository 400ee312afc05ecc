"""SQLAlchemy models"""
from datetime import datetime
from sqlalchemy import Column, Integer, Text, DateTime, JSON

from .database import Base


class Helpline(Base):
    """Support helpline

    contact holds one document per contact kind:
    {"voice": {"value": "116 123", "instruction": "...",
               "availability": [{"day": "weekday", "opensAt": "09:00", "closesAt": "17:00"}]},
     "text": {...}, "email": {...}, "webchat": {...}}
    """
    __tablename__ = "helplines"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    contact = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "contact": self.contact,
        }
