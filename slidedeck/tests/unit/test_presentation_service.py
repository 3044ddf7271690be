"""Tests for the presentation service.

Tests cover:
- Creation from generated drafts
- Generator failures leave the store untouched
- Listing, sparse update and deletion
- Theme application with contrast correction
- Playback rendering
"""

from unittest.mock import AsyncMock, patch

import pytest

from pydantic import ValidationError

from slidedeck.app.deck.crud.crud_presentation import presentation_dao
from slidedeck.app.deck.crud.crud_slide import slide_dao
from slidedeck.app.deck.schema.presentation import (
    ApplyThemeParam,
    CreatePresentationParam,
    UpdatePresentationParam,
)
from slidedeck.app.deck.service.presentation_service import draft_to_row, presentation_service
from slidedeck.common.exception import errors
from slidedeck.core.conf import settings
from slidedeck.src.generation import DraftSlide


class TestDraftToRow:
    """Tests for turning drafts into slide rows."""

    def test_fills_notes_and_placeholder(self):
        draft = DraftSlide(title='Pricing', content='## Pricing', slide_type='CONTENT', layout='TEXT_IMAGE_LEFT')

        row = draft_to_row(draft, presentation_id=3, order=2)

        assert row['presentation_id'] == 3
        assert row['order'] == 2
        assert row['image_url'] == settings.DECK_PLACEHOLDER_IMAGE_URL
        assert row['narration'].startswith('This is a key content slide.')

    def test_text_only_without_layout(self):
        draft = DraftSlide(title='Intro', content='text', slide_type='INTRO')

        row = draft_to_row(draft, presentation_id=1, order=1)

        assert row['layout'] == 'TEXT_ONLY'
        assert row['image_url'] is None

    def test_keeps_generated_narration(self):
        draft = DraftSlide(title='Intro', content='text', slide_type='INTRO', narration='Say hello')

        assert draft_to_row(draft, presentation_id=1, order=1)['narration'] == 'Say hello'


class TestCreate:
    """Tests for creating presentations."""

    @pytest.mark.asyncio
    async def test_generator_receives_prompt_and_title(self, db, stub_generator):
        await presentation_service.create(db=db, obj=CreatePresentationParam(title='Deck', prompt='Pricing'))

        assert stub_generator.calls == [('Pricing', 'Deck')]

    @pytest.mark.asyncio
    async def test_defaults_and_generated_fields(self, db, stub_generator):
        detail = await presentation_service.create(
            db=db, obj=CreatePresentationParam(title='Deck', prompt='Pricing', description='Q3')
        )

        assert detail.description == 'Q3'
        assert detail.theme == settings.DECK_DEFAULT_THEME
        assert detail.primary_color == settings.DECK_DEFAULT_PRIMARY_COLOR
        assert all(slide.narration for slide in detail.slides)
        assert [slide.image_url for slide in detail.slides] == [None, None, settings.DECK_PLACEHOLDER_IMAGE_URL]

    @pytest.mark.asyncio
    async def test_generator_failure_writes_nothing(self, db):
        """A failing generator aborts before the presentation row is written."""
        generator = AsyncMock()
        generator.generate.side_effect = errors.GenerationError()
        with patch('slidedeck.app.deck.service.presentation_service.get_slide_generator', return_value=generator):
            with pytest.raises(errors.GenerationError):
                await presentation_service.create(db=db, obj=CreatePresentationParam(title='Deck', prompt='p'))

        assert list(await presentation_dao.get_list(db)) == []

    @pytest.mark.asyncio
    async def test_empty_draft_list_creates_empty_presentation(self, db, stub_generator):
        stub_generator.drafts = []

        detail = await presentation_service.create(db=db, obj=CreatePresentationParam(title='Deck', prompt='p'))

        assert detail.slides == []

    def test_title_required(self):
        with pytest.raises(ValidationError):
            CreatePresentationParam(title='', prompt='p')


class TestRead:
    """Tests for reading presentations."""

    @pytest.mark.asyncio
    async def test_get_includes_ordered_slides(self, db, make_presentation):
        presentation = await make_presentation(3)

        detail = await presentation_service.get(db=db, pk=presentation.id)

        assert [(s.title, s.order) for s in detail.slides] == [('Slide 1', 1), ('Slide 2', 2), ('Slide 3', 3)]

    @pytest.mark.asyncio
    async def test_get_unknown(self, db):
        with pytest.raises(errors.NotFoundError):
            await presentation_service.get(db=db, pk=1)

    @pytest.mark.asyncio
    async def test_list_newest_first(self, db, make_presentation):
        first = await make_presentation(1, title='First')
        second = await make_presentation(2, title='Second')

        result = await presentation_service.get_list(db=db)

        assert [p.id for p in result] == [second.id, first.id]
        assert [len(p.slides) for p in result] == [2, 1]


class TestUpdate:
    """Tests for sparse presentation updates."""

    @pytest.mark.asyncio
    async def test_only_sent_fields_written(self, db, make_presentation):
        presentation = await make_presentation(1, description='Old')

        detail = await presentation_service.update(
            db=db, pk=presentation.id, obj=UpdatePresentationParam(theme='dark')
        )

        assert detail.theme == 'dark'
        assert detail.title == 'Deck'
        assert detail.description == 'Old'

    @pytest.mark.asyncio
    async def test_description_cleared(self, db, make_presentation):
        presentation = await make_presentation(1, description='Old')

        detail = await presentation_service.update(
            db=db, pk=presentation.id, obj=UpdatePresentationParam(description=None)
        )

        assert detail.description is None

    @pytest.mark.asyncio
    async def test_empty_title_written_as_given(self, db, make_presentation):
        presentation = await make_presentation(1)

        detail = await presentation_service.update(db=db, pk=presentation.id, obj=UpdatePresentationParam(title=''))

        assert detail.title == ''


    @pytest.mark.parametrize('payload', [{'title': None}, {'primary_color': 'blue'}, {'theme': None}])
    def test_invalid_values_rejected(self, payload):
        with pytest.raises(ValidationError):
            UpdatePresentationParam(**payload)


class TestDelete:
    """Tests for deleting presentations."""

    @pytest.mark.asyncio
    async def test_removes_slides(self, db, make_presentation):
        presentation = await make_presentation(3)
        other = await make_presentation(2)

        await presentation_service.delete(db=db, pk=presentation.id)

        assert await presentation_dao.get(db, presentation.id) is None
        assert await slide_dao.count_by_presentation(db, presentation.id) == 0
        assert await slide_dao.count_by_presentation(db, other.id) == 2

    @pytest.mark.asyncio
    async def test_store_cascades_slide_rows(self, db, make_presentation):
        """Deleting the presentation row alone also removes its slides."""
        presentation = await make_presentation(2)

        await presentation_dao.delete(db, presentation.id)

        assert await slide_dao.count_by_presentation(db, presentation.id) == 0

    @pytest.mark.asyncio
    async def test_unknown(self, db):
        with pytest.raises(errors.NotFoundError):
            await presentation_service.delete(db=db, pk=9)


class TestApplyTheme:
    """Tests for writing theme colors to every slide."""

    @pytest.mark.asyncio
    async def test_readable_colors_kept(self, db, make_presentation):
        presentation = await make_presentation(2)

        count = await presentation_service.apply_theme(
            db=db,
            pk=presentation.id,
            obj=ApplyThemeParam(background_color='#FFFFFF', text_color='#374151', heading_color='#111827'),
        )

        slides = await slide_dao.get_by_presentation(db, presentation.id)
        assert count == 2
        assert {(s.background_color, s.text_color, s.heading_color) for s in slides} == {
            ('#FFFFFF', '#374151', '#111827')
        }

    @pytest.mark.asyncio
    async def test_low_contrast_replaced(self, db, make_presentation):
        """Unreadable text on a dark background becomes white."""
        presentation = await make_presentation(1)

        await presentation_service.apply_theme(
            db=db,
            pk=presentation.id,
            obj=ApplyThemeParam(background_color='#111111', text_color='#222222', heading_color='#F9FAFB'),
        )

        slide = (await slide_dao.get_by_presentation(db, presentation.id))[0]
        assert slide.text_color == '#FFFFFF'
        assert slide.heading_color == '#F9FAFB'


class TestDeck:
    """Tests for the playback view."""

    @pytest.mark.asyncio
    async def test_renders_markdown(self, db, make_presentation):
        presentation = await make_presentation(0)
        await slide_dao.create(
            db,
            presentation_id=presentation.id,
            title='Agenda',
            content='## Agenda\n- **one**',
            slide_type='INTRO',
            order=1,
        )

        deck = await presentation_service.get_deck(db=db, pk=presentation.id)

        assert deck.title == 'Deck'
        assert deck.slides[0].order == 1
        assert '<h2 class="text-2xl font-bold mb-4">Agenda</h2>' in deck.slides[0].html
        assert '<strong class="font-bold">one</strong>' in deck.slides[0].html
