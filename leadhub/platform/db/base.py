import sqlalchemy
from sqlalchemy import Column
from sqlalchemy.orm import declarative_base

from leadhub.platform.utils.timestamps import utcnow

Base = declarative_base()


class BaseModel(Base):
    __abstract__ = True
    # Storage backends set both timestamps explicitly. These are ORM-side
    # defaults only; raw SQL and alembic op.* inserts must supply values.
    created_at = Column(sqlalchemy.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(sqlalchemy.DateTime(timezone=True), default=utcnow, nullable=False)

# Note: Models will import this Base. Do not import models here to avoid circular imports.
# Import models in alembic/env.py instead for migrations.
