"""Initial database schema - stores, banners, categories, products, images

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # --- Stores ---
    op.create_table(
        "stores",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("owner_id", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_stores_owner_id", "stores", ["owner_id"])

    # --- Banners ---
    op.create_table(
        "banners",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("image_url", sa.String(1000), nullable=False),
        sa.Column("store_id", sa.Uuid, sa.ForeignKey("stores.id", ondelete="CASCADE"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_banners_store_id", "banners", ["store_id"])

    # --- Categories ---
    op.create_table(
        "categories",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("store_id", sa.Uuid, sa.ForeignKey("stores.id", ondelete="CASCADE"), nullable=False),
        sa.Column("banner_id", sa.Uuid, sa.ForeignKey("banners.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_categories_name", "categories", ["name"])
    op.create_index("ix_categories_store_id", "categories", ["store_id"])
    op.create_index("ix_categories_banner_id", "categories", ["banner_id"])

    # --- Products ---
    op.create_table(
        "products",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("is_featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("is_archived", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("description", sa.Text),
        sa.Column("active_ingredients", sa.Text),
        sa.Column("net_weight", sa.String(100)),
        sa.Column("manufacturer", sa.String(255)),
        sa.Column("shelf_life", sa.String(100)),
        sa.Column("packaging", sa.String(255)),
        sa.Column("store_id", sa.Uuid, sa.ForeignKey("stores.id", ondelete="CASCADE"), nullable=False),
        sa.Column("category_id", sa.Uuid, sa.ForeignKey("categories.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_products_name", "products", ["name"])
    op.create_index("ix_products_store_id", "products", ["store_id"])
    op.create_index("ix_products_category_id", "products", ["category_id"])
    op.create_index("ix_products_store_created", "products", ["store_id", "created_at"])

    # --- Images ---
    op.create_table(
        "images",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("url", sa.String(1000), nullable=False),
        sa.Column("product_id", sa.Uuid, sa.ForeignKey("products.id", ondelete="CASCADE"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_images_product_id", "images", ["product_id"])


def downgrade() -> None:
    op.drop_table("images")
    op.drop_table("products")
    op.drop_table("categories")
    op.drop_table("banners")
    op.drop_table("stores")
