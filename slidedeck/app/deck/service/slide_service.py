"""Slide service layer.

Every operation that moves slides keeps the orders of a presentation equal
to ``1..N``. Multi-step operations rely on the caller's transaction
(``CurrentSessionTransaction``): the shift and the write that follows it
commit or roll back together.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from slidedeck.app.deck.crud.crud_slide import slide_dao
from slidedeck.app.deck.model import Presentation, Slide
from slidedeck.app.deck.schema.slide import (
    CreateSlideParam,
    GetRegeneratePreview,
    InsertSlideParam,
    KeepSlideParam,
    RegenerateOriginal,
    RegeneratedDraft,
    RegenerateSlideParam,
    ReorderSlidesParam,
    UpdateSlideParam,
)
from slidedeck.app.deck.service.presentation_service import draft_to_row, presentation_service
from slidedeck.common.enums import KeepMode, SlideLayout
from slidedeck.common.exception import errors
from slidedeck.common.log import log
from slidedeck.src.generation import DraftSlide, get_slide_generator
from slidedeck.utils.slide_defaults import speaker_notes
from slidedeck.utils.theme import get_theme_defaults


def title_from_prompt(prompt: str) -> str:
    """First four words of the prompt, sentence-cased"""
    title = ' '.join(prompt.split()[:4])
    return title[:1].upper() + title[1:].lower()


def custom_slide_content(prompt: str) -> str:
    """Body of a slide built straight from the user's request"""
    title = title_from_prompt(prompt)
    return f"""## {title}

### Overview
{prompt}

### Key Points
- Main concept and its importance
- Practical applications and use cases
- Benefits and expected outcomes
- Implementation considerations

### Details
This slide addresses the specific request: "{prompt}"

The content is designed to provide comprehensive coverage of the topic while maintaining focus on \
practical, actionable insights that align with the overall presentation objectives.

### Next Considerations
- How this relates to other presentation topics
- Action items for the audience
- Follow-up questions or discussion points"""


class SlideService:
    """Service for managing slides and their order."""

    @staticmethod
    async def get_or_404(db: AsyncSession, pk: int) -> Slide:
        slide = await slide_dao.get(db, pk)
        if not slide:
            raise errors.NotFoundError(msg='Slide not found')
        return slide

    async def get(self, *, db: AsyncSession, pk: int) -> Slide:
        """Get a slide by ID"""
        return await self.get_or_404(db, pk)

    @staticmethod
    async def create(*, db: AsyncSession, obj: CreateSlideParam) -> Slide:
        """
        Create a slide at the given order

        No other slide is moved; the caller owns the position. Colors left
        out of the request come from the presentation's theme.

        :param db: Database session
        :param obj: Slide parameters
        :return:
        """
        presentation = await presentation_service.get_or_404(db, obj.presentation_id)
        data = obj.model_dump()

        theme = get_theme_defaults(presentation.primary_color, presentation.secondary_color)
        data['background_color'] = data['background_color'] or theme.background_color
        data['text_color'] = data['text_color'] or theme.text_color
        data['heading_color'] = data['heading_color'] or theme.heading_color

        return await slide_dao.create(db, **data)

    @staticmethod
    async def _generate_draft(presentation: Presentation, obj: InsertSlideParam) -> DraftSlide:
        drafts = await get_slide_generator().generate(
            f'{presentation.prompt}\n\nSpecific request: {obj.prompt}',
            presentation.title,
        )
        draft = next((d for d in drafts if d.slide_type == obj.slide_type), None)
        if draft is None:
            draft = DraftSlide(
                title=title_from_prompt(obj.prompt),
                content=custom_slide_content(obj.prompt),
                slide_type=obj.slide_type,
            )
        return draft

    async def insert(self, *, db: AsyncSession, obj: InsertSlideParam) -> Slide:
        """
        Insert a slide right after ``insert_after_order``

        Explicit content is stored as given with the presentation's theme
        colors; otherwise the slide is generated from the prompt. Every slide
        behind the insertion point moves back one position, then the new slide
        takes ``insert_after_order + 1``.

        :param db: Database session
        :param obj: Insert parameters
        :return:
        """
        presentation = await presentation_service.get_or_404(db, obj.presentation_id)
        new_order = obj.insert_after_order + 1

        if obj.content is None:
            draft = await self._generate_draft(presentation, obj)
            row = draft_to_row(draft, presentation_id=presentation.id, order=new_order)
        else:
            theme = get_theme_defaults(presentation.primary_color, presentation.secondary_color)
            row = {
                'presentation_id': presentation.id,
                'title': obj.title,
                'content': obj.content,
                'slide_type': obj.slide_type,
                'order': new_order,
                'layout': obj.layout or SlideLayout.TEXT_ONLY.value,
                'narration': speaker_notes(obj.slide_type, obj.title),
                'background_color': theme.background_color,
                'text_color': theme.text_color,
                'heading_color': theme.heading_color,
            }

        await slide_dao.shift(db, presentation.id, new_order, 1)
        slide = await slide_dao.create(db, **row)
        log.info(f'Inserted slide {slide.id} at position {new_order} of presentation {presentation.id}')
        return slide

    async def update(self, *, db: AsyncSession, pk: int, obj: UpdateSlideParam) -> Slide:
        """
        Sparse update of content and styling

        Only the fields present in the request are written, ``order`` is never
        touched.

        :param db: Database session
        :param pk: Slide ID
        :param obj: Fields to write
        :return:
        """
        slide = await self.get_or_404(db, pk)
        return await slide_dao.update(db, slide, obj.model_dump(exclude_unset=True))

    async def delete(self, *, db: AsyncSession, pk: int) -> None:
        """
        Delete a slide and close the gap it leaves

        :param db: Database session
        :param pk: Slide ID
        :return:
        """
        slide = await self.get_or_404(db, pk)
        presentation_id, order = slide.presentation_id, slide.order
        await slide_dao.delete(db, pk)
        moved = await slide_dao.compact_after(db, presentation_id, order)
        log.info(f'Deleted slide {pk} at position {order}, moved {moved} slides up')

    @staticmethod
    async def reorder(*, db: AsyncSession, obj: ReorderSlidesParam) -> int:
        """
        Shift every slide at or after ``from_order`` by ``increment``

        :param db: Database session
        :param obj: Shift parameters
        :return: Number of shifted slides
        """
        await presentation_service.get_or_404(db, obj.presentation_id)
        return await slide_dao.shift(db, obj.presentation_id, obj.from_order, obj.increment)

    async def regenerate(self, *, db: AsyncSession, pk: int, obj: RegenerateSlideParam) -> GetRegeneratePreview:
        """
        Draft a replacement for a slide without storing it

        :param db: Database session
        :param pk: Slide ID
        :param obj: Regeneration parameters
        :return: The original slide next to the proposal
        """
        slide = await self.get_or_404(db, pk)
        presentation = await presentation_service.get_or_404(db, slide.presentation_id)

        original = DraftSlide(
            title=slide.title,
            content=slide.content,
            slide_type=slide.slide_type,
            layout=slide.layout,
            order=slide.order,
        )
        regenerated = await get_slide_generator().regenerate(original, presentation.prompt, obj.additional_context)
        return GetRegeneratePreview(
            original=RegenerateOriginal.model_validate(slide),
            regenerated=RegeneratedDraft(
                title=regenerated.title,
                content=regenerated.content,
                slide_type=regenerated.slide_type,
                layout=regenerated.layout,
                order=slide.order,
            ),
        )

    async def keep(self, *, db: AsyncSession, pk: int, obj: KeepSlideParam) -> Slide:
        """
        Apply the outcome of a regeneration preview

        ``regenerated`` overwrites the original slide in place. ``both`` keeps
        the original and inserts the proposal right after it.

        :param db: Database session
        :param pk: ID of the original slide
        :param obj: The proposal and what to do with it
        :return: The slide holding the proposal
        """
        slide = await self.get_or_404(db, pk)

        if obj.mode == KeepMode.regenerated:
            data = obj.model_dump(include={'title', 'content', 'slide_type', 'layout'}, exclude_none=True)
            return await slide_dao.update(db, slide, data)

        slide_type = obj.slide_type or slide.slide_type
        new_order = slide.order + 1
        await slide_dao.shift(db, slide.presentation_id, new_order, 1)
        copy = await slide_dao.create(
            db,
            presentation_id=slide.presentation_id,
            title=obj.title,
            content=obj.content,
            slide_type=slide_type,
            order=new_order,
            layout=obj.layout or slide.layout,
            narration=speaker_notes(slide_type, obj.title),
            image_url=slide.image_url,
            background_color=slide.background_color,
            text_color=slide.text_color,
            heading_color=slide.heading_color,
            text_align=slide.text_align,
        )
        log.info(f'Kept both versions of slide {pk}, new slide {copy.id} at position {new_order}')
        return copy


# Singleton instance
slide_service: SlideService = SlideService()
