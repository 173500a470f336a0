"""Product model."""

import uuid
from decimal import Decimal

from sqlalchemy import String, Text, Numeric, Boolean, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Product(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "products"
    __table_args__ = (
        Index("ix_products_store_created", "store_id", "created_at"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Descriptive metadata shown on the storefront
    description: Mapped[str | None] = mapped_column(Text)
    active_ingredients: Mapped[str | None] = mapped_column(Text)
    net_weight: Mapped[str | None] = mapped_column(String(100))
    manufacturer: Mapped[str | None] = mapped_column(String(255))
    shelf_life: Mapped[str | None] = mapped_column(String(100))
    packaging: Mapped[str | None] = mapped_column(String(255))

    # Foreign keys
    store_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("categories.id"), nullable=False, index=True
    )

    # Relationships
    store = relationship("Store", back_populates="products")
    category = relationship("Category", back_populates="products", lazy="selectin")
    images = relationship(
        "Image",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[Image.created_at, Image.id]",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Product {self.id}: {self.name}>"
