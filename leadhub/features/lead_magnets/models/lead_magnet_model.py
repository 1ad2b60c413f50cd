from sqlalchemy import Column, Integer, String, Text

from leadhub.platform.db.base import BaseModel


class LeadMagnet(BaseModel):
    """
    A funnel asset (eBook, quiz, checklist...) that captures leads.

    ``leads`` and ``conversion`` are curated counters. Nothing links a Lead
    row to a magnet, so creating leads never touches them.
    """
    __tablename__ = "lead_magnets"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    title = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    industry = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(50), nullable=False, default="draft")  # draft | active | paused
    leads = Column(Integer, nullable=False, default=0)
    conversion = Column(Integer, nullable=False, default=0)  # percentage

    def __repr__(self) -> str:
        return f"<LeadMagnet(id={self.id}, title='{self.title}', status='{self.status}')>"
