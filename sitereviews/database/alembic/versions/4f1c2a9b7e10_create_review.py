"""create review

Revision ID: 4f1c2a9b7e10
Revises:
Create Date: 2026-10-19 11:02:41.218330

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from sitereviews.common.settings import get_settings

# revision identifiers, used by Alembic.
revision: str = '4f1c2a9b7e10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = get_settings().db_schema


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto;")

    op.create_table(
        'review',
        sa.Column('id', sa.UUID(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('key', sa.String(length=32), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('rating BETWEEN 1 AND 5', name=op.f('ck_review_rating_1_5')),
        sa.CheckConstraint('length(btrim(name)) > 0', name=op.f('ck_review_name_not_blank')),
        sa.CheckConstraint('length(btrim(text)) > 0', name=op.f('ck_review_text_not_blank')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_review')),
        sa.UniqueConstraint('key', name=op.f('uq_review_key')),
        schema=SCHEMA,
    )
    op.create_index('ix_review_date_key', 'review', ['date', 'key'], unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_review_date_key', table_name='review', schema=SCHEMA)
    op.drop_table('review', schema=SCHEMA)
