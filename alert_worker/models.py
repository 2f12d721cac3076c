from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()

# =========================================================
# DATABASE MODELS
# =========================================================
class Alert(Base):
    __tablename__ = "alerts"
    id = Column(Integer, primary_key=True)
    name = Column(String(100), unique=True, nullable=False)
    date = Column(String(32), nullable=False)  # "dd.mm.yyyy" or "dd.mm.yyyy HH:MM", alert timezone
    description = Column(Text, nullable=False, default="")
    created_by = Column(String(100))
    last_notified_at = Column(DateTime(timezone=True))  # UTC, NULL = never notified
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<Alert id={self.id} name={self.name!r} date={self.date!r}>"
