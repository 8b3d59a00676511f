"""Create categories, products, product_images and product_sizes tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create catalog tables."""
    op.create_table(
        'categories',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(200), nullable=False),
    )
    op.create_index('ix_categories_slug', 'categories', ['slug'], unique=True)

    op.create_table(
        'products',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('slug', sa.String(300), nullable=False),
        sa.Column('name', sa.String(300), nullable=False),
        sa.Column('club', sa.String(200), nullable=False),
        sa.Column('season', sa.String(50), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('category_id', sa.String(36), sa.ForeignKey('categories.id'), nullable=False),
    )
    op.create_index('ix_products_slug', 'products', ['slug'], unique=True)
    op.create_index('ix_products_is_available', 'products', ['is_available'])
    op.create_index('ix_products_created_at', 'products', ['created_at'])
    op.create_index('ix_products_category_id', 'products', ['category_id'])

    op.create_table(
        'product_images',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('product_id', sa.String(36),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('url', sa.String(1000), nullable=False),
        sa.Column('alt', sa.String(300), nullable=True),
        sa.Column('is_primary', sa.Boolean(), nullable=False, server_default='false'),
    )
    op.create_index('ix_product_images_product_id', 'product_images', ['product_id'])

    op.create_table(
        'product_sizes',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('product_id', sa.String(36),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('size', sa.String(20), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.CheckConstraint('stock >= 0', name='ck_product_sizes_stock_non_negative'),
    )
    op.create_index('ix_product_sizes_product_id', 'product_sizes', ['product_id'])


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_table('product_sizes')
    op.drop_table('product_images')
    op.drop_table('products')
    op.drop_table('categories')
