"""create_deck_tables

Revision ID: 3c1d8e5a7b20
Revises:
Create Date: 2026-10-18 09:12:40.218374

"""
from alembic import op
import sqlalchemy as sa
import slidedeck.common.model

# revision identifiers, used by Alembic.
revision = '3c1d8e5a7b20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """Create presentation and slide tables."""
    op.create_table('deck_presentation',
        sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), autoincrement=True, nullable=False, comment='Primary key ID'),
        sa.Column('title', sa.String(length=255), nullable=False, comment='Presentation title'),
        sa.Column('prompt', slidedeck.common.model.UniversalText(), nullable=False, comment='Prompt the slides were generated from'),
        sa.Column('description', slidedeck.common.model.UniversalText(), nullable=True, comment='Description'),
        sa.Column('theme', sa.String(length=64), nullable=False, comment='Theme name'),
        sa.Column('primary_color', sa.String(length=16), nullable=False, comment='Primary color'),
        sa.Column('secondary_color', sa.String(length=16), nullable=False, comment='Secondary color'),
        sa.Column('font_family', sa.String(length=64), nullable=False, comment='Font family'),
        sa.Column('created_time', slidedeck.common.model.TimeZone(), nullable=False, comment='Created time'),
        sa.Column('updated_time', slidedeck.common.model.TimeZone(), nullable=True, comment='Updated time'),
        sa.PrimaryKeyConstraint('id'),
        comment='Slide deck presentations'
    )
    op.create_index(op.f('ix_deck_presentation_id'), 'deck_presentation', ['id'], unique=False)

    op.create_table('deck_slide',
        sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), autoincrement=True, nullable=False, comment='Primary key ID'),
        sa.Column('presentation_id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), nullable=False, comment='Owning presentation ID'),
        sa.Column('title', sa.String(length=500), nullable=False, comment='Slide title'),
        sa.Column('content', slidedeck.common.model.UniversalText(), nullable=False, comment='Slide body (markdown)'),
        sa.Column('slide_type', sa.String(length=32), nullable=False, comment='Slide type (TITLE, INTRO, CONTENT, ...)'),
        sa.Column('order', sa.Integer(), nullable=False, comment='Position within the presentation (1-indexed)'),
        sa.Column('layout', sa.String(length=32), nullable=False, comment='Visual layout'),
        sa.Column('narration', slidedeck.common.model.UniversalText(), nullable=True, comment='Speaker notes'),
        sa.Column('image_url', sa.String(length=2048), nullable=True, comment='Image URL'),
        sa.Column('background_color', sa.String(length=16), nullable=True, comment='Background color'),
        sa.Column('text_color', sa.String(length=16), nullable=True, comment='Text color'),
        sa.Column('heading_color', sa.String(length=16), nullable=True, comment='Heading color'),
        sa.Column('text_align', sa.String(length=16), nullable=False, comment='Text alignment'),
        sa.Column('created_time', slidedeck.common.model.TimeZone(), nullable=False, comment='Created time'),
        sa.Column('updated_time', slidedeck.common.model.TimeZone(), nullable=True, comment='Updated time'),
        sa.ForeignKeyConstraint(['presentation_id'], ['deck_presentation.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('presentation_id', 'order', name='uq_deck_slide_presentation_order'),
        comment='Slides of a presentation'
    )
    op.create_index(op.f('ix_deck_slide_id'), 'deck_slide', ['id'], unique=False)
    op.create_index(op.f('ix_deck_slide_presentation_id'), 'deck_slide', ['presentation_id'], unique=False)


def downgrade():
    """Drop presentation and slide tables."""
    op.drop_index(op.f('ix_deck_slide_presentation_id'), table_name='deck_slide')
    op.drop_index(op.f('ix_deck_slide_id'), table_name='deck_slide')
    op.drop_table('deck_slide')
    op.drop_index(op.f('ix_deck_presentation_id'), table_name='deck_presentation')
    op.drop_table('deck_presentation')
