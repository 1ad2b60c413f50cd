from sqlalchemy import Column, String

from leadhub.platform.db.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"
    # Issued by the identity provider, never generated here
    id = Column(String, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=True, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    profile_image_url = Column(String(500), nullable=True)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
