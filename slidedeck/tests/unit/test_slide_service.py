"""Tests for the slide service.

Tests cover:
- Explicit-position creation with theme colors
- Generated insert and the custom-slide fallback
- Sparse update
- Regeneration preview and keep modes
"""

import pytest

from pydantic import ValidationError

from slidedeck.app.deck.crud.crud_slide import slide_dao
from slidedeck.app.deck.schema.slide import (
    CreateSlideParam,
    InsertSlideParam,
    KeepSlideParam,
    RegenerateSlideParam,
    UpdateSlideParam,
)
from slidedeck.app.deck.service.slide_service import custom_slide_content, slide_service, title_from_prompt
from slidedeck.common.exception import errors
from slidedeck.utils.theme import THEME_PRESETS


class TestTitleFromPrompt:
    """Tests for the fallback slide title."""

    def test_first_four_words_sentence_case(self):
        """Keeps four words, capitalises only the first letter."""
        assert title_from_prompt('PRICING tiers For Enterprise customers') == 'Pricing tiers for enterprise'

    def test_short_prompt(self):
        assert title_from_prompt('roadmap') == 'Roadmap'

    def test_custom_content_quotes_request(self):
        content = custom_slide_content('pricing tiers')
        assert content.startswith('## Pricing tiers')
        assert 'This slide addresses the specific request: "pricing tiers"' in content


class TestCreate:
    """Tests for creating a slide at an explicit order."""

    @pytest.mark.asyncio
    async def test_colors_default_to_presentation_theme(self, db, make_presentation):
        """Missing colors come from the preset matching the presentation colors."""
        presentation = await make_presentation(0, primary_color='#1f2937', secondary_color='#374151')

        slide = await slide_service.create(
            db=db, obj=CreateSlideParam(presentation_id=presentation.id, title='New', content='Body', order=1)
        )

        light = THEME_PRESETS['light']
        assert slide.order == 1
        assert slide.background_color == light.background_color
        assert slide.text_color == light.text_color
        assert slide.heading_color == light.heading_color

    @pytest.mark.asyncio
    async def test_explicit_colors_kept(self, db, make_presentation):
        presentation = await make_presentation(0, primary_color='#60A5FA', secondary_color='#93C5FD')

        slide = await slide_service.create(
            db=db,
            obj=CreateSlideParam(
                presentation_id=presentation.id, title='New', content='Body', order=1, text_color='#ABCDEF'
            ),
        )

        assert slide.text_color == '#ABCDEF'
        assert slide.background_color == THEME_PRESETS['dark'].background_color

    @pytest.mark.asyncio
    async def test_unknown_presentation(self, db):
        with pytest.raises(errors.NotFoundError):
            await slide_service.create(
                db=db, obj=CreateSlideParam(presentation_id=42, title='New', content='Body', order=1)
            )

    def test_order_must_be_positive(self):
        with pytest.raises(ValidationError):
            CreateSlideParam(presentation_id=1, title='New', content='Body', order=0)


class TestInsert:
    """Tests for slide inserts."""

    @pytest.mark.asyncio
    async def test_prompt_combines_presentation_and_request(self, db, stub_generator, make_presentation):
        """The generator sees the presentation prompt followed by the specific request."""
        presentation = await make_presentation(1, title='Q3 Review', prompt='Quarterly results')

        await slide_service.insert(
            db=db,
            obj=InsertSlideParam(presentation_id=presentation.id, prompt='churn', insert_after_order=1),
        )

        assert stub_generator.calls == [('Quarterly results\n\nSpecific request: churn', 'Q3 Review')]

    @pytest.mark.asyncio
    async def test_uses_draft_matching_type(self, db, stub_generator, make_presentation):
        presentation = await make_presentation(1)

        slide = await slide_service.insert(
            db=db,
            obj=InsertSlideParam(
                presentation_id=presentation.id, prompt='agenda', slide_type='INTRO', insert_after_order=1
            ),
        )

        assert slide.title == 'Agenda'
        assert slide.slide_type == 'INTRO'
        assert slide.order == 2
        assert slide.narration

    @pytest.mark.asyncio
    async def test_falls_back_to_custom_slide(self, db, stub_generator, make_presentation):
        """No draft of the requested type yields a slide built from the request."""
        presentation = await make_presentation(2)

        slide = await slide_service.insert(
            db=db,
            obj=InsertSlideParam(
                presentation_id=presentation.id,
                prompt='lessons learned from the launch',
                slide_type='CONCLUSION',
                insert_after_order=2,
            ),
        )

        assert slide.title == 'Lessons learned from the'
        assert slide.slide_type == 'CONCLUSION'
        assert slide.layout == 'TEXT_ONLY'
        assert slide.order == 3
        assert 'lessons learned from the launch' in slide.content

    @pytest.mark.asyncio
    async def test_unknown_presentation(self, db, stub_generator):
        with pytest.raises(errors.NotFoundError):
            await slide_service.insert(
                db=db, obj=InsertSlideParam(presentation_id=7, prompt='x', insert_after_order=0)
            )
        assert stub_generator.calls == []

    def test_rejects_negative_position(self):
        with pytest.raises(ValidationError):
            InsertSlideParam(presentation_id=1, prompt='x', insert_after_order=-1)

    def test_rejects_empty_prompt(self):
        with pytest.raises(ValidationError):
            InsertSlideParam(presentation_id=1, prompt='', insert_after_order=0)

    @pytest.mark.asyncio
    async def test_explicit_content_stored_as_given(self, db, stub_generator, make_presentation, read_orders):
        """Title and content skip generation and take the theme colors of the presentation."""
        presentation = await make_presentation(3, primary_color='#60A5FA', secondary_color='#93C5FD')

        slide = await slide_service.insert(
            db=db,
            obj=InsertSlideParam(
                presentation_id=presentation.id,
                title='Roadmap',
                content='## Roadmap\n- Q4 launch',
                layout='TEXT_IMAGE_RIGHT',
                insert_after_order=1,
            ),
        )

        dark = THEME_PRESETS['dark']
        assert stub_generator.calls == []
        assert slide.title == 'Roadmap'
        assert slide.content == '## Roadmap\n- Q4 launch'
        assert slide.layout == 'TEXT_IMAGE_RIGHT'
        assert slide.slide_type == 'CONTENT'
        assert slide.narration
        assert slide.background_color == dark.background_color
        assert slide.text_color == dark.text_color
        assert slide.heading_color == dark.heading_color
        assert await read_orders(presentation.id) == [
            ('Slide 1', 1),
            ('Roadmap', 2),
            ('Slide 2', 3),
            ('Slide 3', 4),
        ]

    @pytest.mark.asyncio
    async def test_explicit_content_default_layout(self, db, stub_generator, make_presentation):
        presentation = await make_presentation(0)

        slide = await slide_service.insert(
            db=db,
            obj=InsertSlideParam(presentation_id=presentation.id, title='Notes', content='', insert_after_order=0),
        )

        assert slide.layout == 'TEXT_ONLY'
        assert slide.content == ''
        assert slide.order == 1
        assert stub_generator.calls == []

    def test_content_requires_title(self):
        with pytest.raises(ValidationError):
            InsertSlideParam(presentation_id=1, content='Body', insert_after_order=0)

    def test_requires_prompt_or_content(self):
        with pytest.raises(ValidationError):
            InsertSlideParam(presentation_id=1, title='Only a title', insert_after_order=0)



class TestUpdate:
    """Tests for sparse slide updates."""

    @pytest.mark.asyncio
    async def test_only_sent_fields_written(self, db, make_presentation):
        presentation = await make_presentation(2)
        slides = await slide_dao.get_by_presentation(db, presentation.id)

        slide = await slide_service.update(db=db, pk=slides[1].id, obj=UpdateSlideParam(content='New body'))

        assert slide.content == 'New body'
        assert slide.title == 'Slide 2'
        assert slide.order == 2
        assert slide.layout == 'TEXT_ONLY'

    @pytest.mark.asyncio
    async def test_nullable_style_field_cleared(self, db, make_presentation):
        """Optional styling can be cleared with an explicit null."""
        presentation = await make_presentation(1)
        slide = (await slide_dao.get_by_presentation(db, presentation.id))[0]
        await slide_service.update(db=db, pk=slide.id, obj=UpdateSlideParam(image_url='https://img/1.png'))

        slide = await slide_service.update(db=db, pk=slide.id, obj=UpdateSlideParam(image_url=None))

        assert slide.image_url is None

    def test_null_title_rejected(self):
        with pytest.raises(ValidationError):
            UpdateSlideParam(title=None)

    def test_order_not_accepted(self):
        """Positions are not part of a content update."""
        assert 'order' not in UpdateSlideParam(order=5).model_dump(exclude_unset=True)

    @pytest.mark.asyncio
    async def test_unknown_slide(self, db):
        with pytest.raises(errors.NotFoundError):
            await slide_service.update(db=db, pk=404, obj=UpdateSlideParam(title='x'))


class TestRegenerate:
    """Tests for regeneration previews and keeping the result."""

    @pytest.mark.asyncio
    async def test_preview_does_not_write(self, db, stub_generator, make_presentation, read_orders):
        presentation = await make_presentation(2, prompt='Cloud costs')
        slide = (await slide_dao.get_by_presentation(db, presentation.id))[1]

        preview = await slide_service.regenerate(
            db=db, pk=slide.id, obj=RegenerateSlideParam(additional_context='shorter')
        )

        assert preview.original.title == 'Slide 2'
        assert preview.regenerated.title == 'Better Slide 2'
        assert preview.regenerated.order == 2
        assert stub_generator.calls == [('Cloud costs', 'shorter')]
        assert await read_orders(presentation.id) == [('Slide 1', 1), ('Slide 2', 2)]

    @pytest.mark.asyncio
    async def test_keep_regenerated_replaces_in_place(self, db, make_presentation, read_orders):
        presentation = await make_presentation(3)
        slide = (await slide_dao.get_by_presentation(db, presentation.id))[1]

        kept = await slide_service.keep(
            db=db, pk=slide.id, obj=KeepSlideParam(mode='regenerated', title='Better', content='Better body')
        )

        assert kept.id == slide.id
        assert kept.content == 'Better body'
        assert kept.slide_type == 'CONTENT'
        assert await read_orders(presentation.id) == [('Slide 1', 1), ('Better', 2), ('Slide 3', 3)]

    @pytest.mark.asyncio
    async def test_keep_both_inserts_after_original(self, db, make_presentation, read_orders):
        """The proposal lands right after the original and inherits its styling."""
        presentation = await make_presentation(3)
        slide = (await slide_dao.get_by_presentation(db, presentation.id))[1]
        await slide_service.update(
            db=db, pk=slide.id, obj=UpdateSlideParam(background_color='#000000', text_align='CENTER')
        )

        kept = await slide_service.keep(
            db=db,
            pk=slide.id,
            obj=KeepSlideParam(mode='both', title='Better', content='Better body', layout='TWO_COLUMN'),
        )

        assert kept.id != slide.id
        assert kept.order == 3
        assert kept.layout == 'TWO_COLUMN'
        assert kept.background_color == '#000000'
        assert kept.text_align == 'CENTER'
        assert await read_orders(presentation.id) == [
            ('Slide 1', 1),
            ('Slide 2', 2),
            ('Better', 3),
            ('Slide 3', 4),
        ]
