# app/models/base.py
from datetime import datetime
from sqlalchemy import DateTime, func, MetaData
from sqlalchemy.orm import Mapped, mapped_column, declarative_base

# Tables live in the store's default schema; search_path is set per connection
metadata = MetaData()

Base = declarative_base(metadata=metadata)


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps"""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
