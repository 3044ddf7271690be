"""Presentation service layer.

Creates presentations from generated drafts and handles the operations that
touch every slide of a presentation at once (theme, move, playback).
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from slidedeck.app.deck.crud.crud_presentation import presentation_dao
from slidedeck.app.deck.crud.crud_slide import slide_dao
from slidedeck.app.deck.model import Presentation, Slide
from slidedeck.app.deck.schema.presentation import (
    ApplyThemeParam,
    CreatePresentationParam,
    GetDeckDetail,
    GetDeckSlide,
    GetPresentationDetail,
    MoveSlidesParam,
    UpdatePresentationParam,
)
from slidedeck.app.deck.schema.slide import GetSlideDetail
from slidedeck.common.enums import SlideLayout
from slidedeck.common.exception import errors
from slidedeck.common.log import log
from slidedeck.src.generation import DraftSlide, get_slide_generator
from slidedeck.utils.markdown import parse_markdown_to_html
from slidedeck.utils.slide_defaults import placeholder_image, speaker_notes
from slidedeck.utils.theme import ensure_contrast


def draft_to_row(draft: DraftSlide, *, presentation_id: int, order: int) -> dict:
    """Column values for a generated slide stored at ``order``"""
    layout = draft.layout or SlideLayout.TEXT_ONLY.value
    return {
        'presentation_id': presentation_id,
        'title': draft.title,
        'content': draft.content,
        'slide_type': draft.slide_type,
        'order': order,
        'layout': layout,
        'narration': draft.narration or speaker_notes(draft.slide_type, draft.title),
        'image_url': placeholder_image(layout),
    }


class PresentationService:
    """Service for managing presentations."""

    @staticmethod
    async def get_or_404(db: AsyncSession, pk: int) -> Presentation:
        presentation = await presentation_dao.get(db, pk)
        if not presentation:
            raise errors.NotFoundError(msg='Presentation not found')
        return presentation

    @staticmethod
    def build_detail(presentation: Presentation, slides: Sequence[Slide]) -> GetPresentationDetail:
        detail = GetPresentationDetail.model_validate(presentation)
        detail.slides = [GetSlideDetail.model_validate(slide) for slide in slides]
        return detail

    async def get(self, *, db: AsyncSession, pk: int) -> GetPresentationDetail:
        """
        Get a presentation with its slides in order

        :param db: Database session
        :param pk: Presentation ID
        :return:
        """
        presentation = await self.get_or_404(db, pk)
        slides = await slide_dao.get_by_presentation(db, pk)
        return self.build_detail(presentation, slides)

    async def get_list(self, *, db: AsyncSession) -> list[GetPresentationDetail]:
        """Get every presentation, newest first"""
        presentations = await presentation_dao.get_list(db)
        slides = await slide_dao.get_by_presentations(db, [p.id for p in presentations])
        by_presentation: dict[int, list[Slide]] = {}
        for slide in slides:
            by_presentation.setdefault(slide.presentation_id, []).append(slide)
        return [self.build_detail(p, by_presentation.get(p.id, [])) for p in presentations]

    async def create(self, *, db: AsyncSession, obj: CreatePresentationParam) -> GetPresentationDetail:
        """
        Create a presentation with generated slides

        The drafts are generated before anything is written, a generator
        failure leaves the store untouched.

        :param db: Database session
        :param obj: Creation parameters
        :return:
        """
        drafts = await get_slide_generator().generate(obj.prompt, obj.title)

        presentation = await presentation_dao.create(
            db,
            title=obj.title,
            prompt=obj.prompt,
            description=obj.description,
        )
        rows = [
            draft_to_row(draft, presentation_id=presentation.id, order=order)
            for order, draft in enumerate(drafts, 1)
        ]
        slides = await slide_dao.bulk_create(db, rows)
        log.info(f'Created presentation {presentation.id} with {len(slides)} slides')
        return self.build_detail(presentation, slides)

    async def update(self, *, db: AsyncSession, pk: int, obj: UpdatePresentationParam) -> GetPresentationDetail:
        """
        Sparse update, only the fields present in the request are written

        :param db: Database session
        :param pk: Presentation ID
        :param obj: Fields to write
        :return:
        """
        presentation = await self.get_or_404(db, pk)
        await presentation_dao.update(db, presentation, obj.model_dump(exclude_unset=True))
        slides = await slide_dao.get_by_presentation(db, pk)
        return self.build_detail(presentation, slides)

    async def delete(self, *, db: AsyncSession, pk: int) -> None:
        """Delete a presentation and all of its slides"""
        await self.get_or_404(db, pk)
        count = await slide_dao.delete_by_presentation(db, pk)
        await presentation_dao.delete(db, pk)
        log.info(f'Deleted presentation {pk} and {count} slides')

    async def apply_theme(self, *, db: AsyncSession, pk: int, obj: ApplyThemeParam) -> int:
        """
        Write theme colors to every slide of a presentation

        Text and heading colors that are unreadable on the background are
        replaced with black or white.

        :param db: Database session
        :param pk: Presentation ID
        :param obj: Theme colors
        :return: Number of updated slides
        """
        await self.get_or_404(db, pk)
        count = await slide_dao.apply_colors(
            db,
            pk,
            background_color=obj.background_color,
            text_color=ensure_contrast(obj.background_color, obj.text_color),
            heading_color=ensure_contrast(obj.background_color, obj.heading_color),
        )
        log.info(f'Applied theme to {count} slides of presentation {pk}')
        return count

    async def move_slides(self, *, db: AsyncSession, pk: int, obj: MoveSlidesParam) -> list[GetSlideDetail]:
        """
        Rewrite the order of a presentation's slides

        :param db: Database session
        :param pk: Presentation ID
        :param obj: Every slide ID of the presentation, in the new order
        :return: Slides in their new order
        """
        await self.get_or_404(db, pk)
        current_ids = await slide_dao.get_ids(db, pk)
        if sorted(obj.slide_ids) != sorted(current_ids):
            raise errors.RequestError(msg='slide_ids must list every slide of the presentation exactly once')

        await slide_dao.set_orders(db, obj.slide_ids)
        slides = await slide_dao.get_by_presentation(db, pk)
        return [GetSlideDetail.model_validate(slide) for slide in slides]

    async def get_deck(self, *, db: AsyncSession, pk: int) -> GetDeckDetail:
        """Get a presentation rendered for full-screen playback"""
        presentation = await self.get_or_404(db, pk)
        slides = await slide_dao.get_by_presentation(db, pk)
        return GetDeckDetail(
            id=presentation.id,
            title=presentation.title,
            theme=presentation.theme,
            primary_color=presentation.primary_color,
            secondary_color=presentation.secondary_color,
            font_family=presentation.font_family,
            slides=[
                GetDeckSlide(
                    id=slide.id,
                    order=slide.order,
                    title=slide.title,
                    slide_type=slide.slide_type,
                    layout=slide.layout,
                    html=parse_markdown_to_html(slide.content),
                    narration=slide.narration,
                    image_url=slide.image_url,
                    background_color=slide.background_color,
                    text_color=slide.text_color,
                    heading_color=slide.heading_color,
                    text_align=slide.text_align,
                )
                for slide in slides
            ],
        )


# Singleton instance
presentation_service: PresentationService = PresentationService()
