from datetime import datetime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import text, DateTime

# millisecond precision so an update right after an insert still moves updatedAt forward
NOW_MS = "(strftime('%Y-%m-%d %H:%M:%f', 'now'))"

class Base(DeclarativeBase):
    pass

class TimestampedMixin:
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, server_default=text(NOW_MS)
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime, server_default=text(NOW_MS)
    )
