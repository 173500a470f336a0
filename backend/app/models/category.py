"""Category model - belongs to a store and points at one of its banners."""

import uuid

from sqlalchemy import String, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Category(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Foreign keys
    store_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True
    )
    banner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("banners.id"), nullable=False, index=True
    )

    # Relationships
    store = relationship("Store", back_populates="categories")
    banner = relationship("Banner", back_populates="categories", lazy="selectin")
    products = relationship("Product", back_populates="category", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Category {self.name}>"
