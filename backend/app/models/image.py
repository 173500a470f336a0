"""Product image model."""

import uuid

from sqlalchemy import String, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Image(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "images"

    url: Mapped[str] = mapped_column(String(1000), nullable=False)

    product_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )

    product = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        return f"<Image product={self.product_id} url={self.url}>"
