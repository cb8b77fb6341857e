"""Base models and mixins for database models"""

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import DeclarativeBase, declared_attr
from datetime import datetime, timezone

def utcnow() -> datetime:
    """Timezone-aware current time, with microseconds so orderings are stable"""
    return datetime.now(timezone.utc)

# Create declarative base
class Base(DeclarativeBase):
    def __repr__(self):
        class_name = self.__class__.__name__
        return f"<{class_name}(id={getattr(self, 'id', None)!r})>"

class CreatedAtModel:
    """Mixin for adding created_at timestamp"""

    @declared_attr
    def created_at(cls):
        return Column(
            DateTime(timezone=True),
            nullable=False,
            default=utcnow,
            index=True
        )

class TimestampedModel(CreatedAtModel):
    """Mixin for adding created_at and updated_at timestamps"""

    @declared_attr
    def updated_at(cls):
        return Column(
            DateTime(timezone=True),
            nullable=False,
            default=utcnow,
            onupdate=utcnow
        )

    def touch(self):
        """Re-stamp updated_at"""
        self.updated_at = utcnow()

__all__ = [
    'Base',
    'CreatedAtModel',
    'TimestampedModel',
    'utcnow',
]
