"""Store model - root of a tenant's data."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Store(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "stores"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Caller id from the identity provider
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Relationships (rows are removed by ON DELETE CASCADE)
    banners = relationship(
        "Banner", back_populates="store", cascade="all, delete-orphan", passive_deletes=True
    )
    categories = relationship(
        "Category", back_populates="store", cascade="all, delete-orphan", passive_deletes=True
    )
    products = relationship(
        "Product", back_populates="store", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Store {self.id}: {self.name}>"
