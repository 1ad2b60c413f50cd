from sqlalchemy import JSON, Column, Integer, String, Text

from leadhub.platform.db.base import BaseModel


class Lead(BaseModel):
    __tablename__ = "leads"
    # AUTOINCREMENT keeps SQLite from reusing the id of a deleted last row
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone = Column(Text, nullable=True)
    source = Column(Text, nullable=False)
    status = Column(String(50), nullable=False, default="cold")  # cold | warm | hot | qualified, not enforced
    score = Column(Integer, nullable=False, default=0)
    tags = Column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Lead(id={self.id}, email='{self.email}', source='{self.source}')>"
