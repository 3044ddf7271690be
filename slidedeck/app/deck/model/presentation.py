"""Presentation database model."""

import sqlalchemy as sa

from sqlalchemy.orm import Mapped, mapped_column

from slidedeck.common.model import Base, UniversalText, id_key
from slidedeck.core.conf import settings


class Presentation(Base):
    """Slide deck generated from a prompt.

    Owns its slides; the slide rows reference it with ``ON DELETE CASCADE``.
    """

    __tablename__ = 'deck_presentation'

    id: Mapped[id_key] = mapped_column(init=False)
    title: Mapped[str] = mapped_column(sa.String(255), comment='Presentation title')
    prompt: Mapped[str] = mapped_column(UniversalText, comment='Prompt the slides were generated from')
    description: Mapped[str | None] = mapped_column(UniversalText, default=None, comment='Description')

    # Theming
    theme: Mapped[str] = mapped_column(sa.String(64), default=settings.DECK_DEFAULT_THEME, comment='Theme name')
    primary_color: Mapped[str] = mapped_column(
        sa.String(16), default=settings.DECK_DEFAULT_PRIMARY_COLOR, comment='Primary color'
    )
    secondary_color: Mapped[str] = mapped_column(
        sa.String(16), default=settings.DECK_DEFAULT_SECONDARY_COLOR, comment='Secondary color'
    )
    font_family: Mapped[str] = mapped_column(
        sa.String(64), default=settings.DECK_DEFAULT_FONT_FAMILY, comment='Font family'
    )

    __table_args__ = ({'comment': 'Slide deck presentations'},)
