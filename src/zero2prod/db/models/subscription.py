import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Text, Uuid

from zero2prod.db.database import Base


class Subscription(Base):
    """
    Database model for newsletter subscribers.

    One row per subscription form accepted by the API.
    """

    __tablename__ = "subscriptions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, nullable=False, unique=True)
    name = Column(Text, nullable=False)
    subscribed_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self):
        return f"<Subscription(id={self.id}, email={self.email!r}, name={self.name!r})>"
