"""Slide database model."""

import sqlalchemy as sa

from sqlalchemy.orm import Mapped, mapped_column

from slidedeck.common.enums import SlideLayout, TextAlign
from slidedeck.common.model import Base, UniversalText, id_key


class Slide(Base):
    """A single slide of a presentation.

    ``order`` is the 1-based position of the slide within its presentation.
    Across one presentation the orders are always exactly ``1..N``; the unique
    constraint on ``(presentation_id, order)`` guards against duplicates.
    """

    __tablename__ = 'deck_slide'

    id: Mapped[id_key] = mapped_column(init=False)
    presentation_id: Mapped[int] = mapped_column(
        sa.BigInteger().with_variant(sa.Integer, 'sqlite'),
        sa.ForeignKey('deck_presentation.id', ondelete='CASCADE'),
        index=True,
        comment='Owning presentation ID',
    )
    title: Mapped[str] = mapped_column(sa.String(500), comment='Slide title')
    content: Mapped[str] = mapped_column(UniversalText, comment='Slide body (markdown)')
    slide_type: Mapped[str] = mapped_column(sa.String(32), comment='Slide type (TITLE, INTRO, CONTENT, ...)')
    order: Mapped[int] = mapped_column(sa.Integer, comment='Position within the presentation (1-indexed)')
    layout: Mapped[str] = mapped_column(sa.String(32), default=SlideLayout.TEXT_ONLY.value, comment='Visual layout')

    # Speaker notes
    narration: Mapped[str | None] = mapped_column(UniversalText, default=None, comment='Speaker notes')

    # Presentational overrides
    image_url: Mapped[str | None] = mapped_column(sa.String(2048), default=None, comment='Image URL')
    background_color: Mapped[str | None] = mapped_column(sa.String(16), default=None, comment='Background color')
    text_color: Mapped[str | None] = mapped_column(sa.String(16), default=None, comment='Text color')
    heading_color: Mapped[str | None] = mapped_column(sa.String(16), default=None, comment='Heading color')
    text_align: Mapped[str] = mapped_column(sa.String(16), default=TextAlign.LEFT.value, comment='Text alignment')

    __table_args__ = (
        sa.UniqueConstraint('presentation_id', 'order', name='uq_deck_slide_presentation_order'),
        {'comment': 'Slides of a presentation'},
    )
