"""Shared fixtures: an in-memory SQLite database and a stub slide generator."""

from unittest.mock import patch

import pytest
import pytest_asyncio

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from slidedeck.app.deck import model  # noqa: F401
from slidedeck.app.deck.crud.crud_presentation import presentation_dao
from slidedeck.app.deck.crud.crud_slide import slide_dao
from slidedeck.common.model import MappedBase
from slidedeck.database.db import _enable_sqlite_foreign_keys, create_database_url
from slidedeck.src.generation import DraftSlide, SlideGenerator


class StubSlideGenerator(SlideGenerator):
    """Generator returning fixed drafts, records what it was asked"""

    name = 'stub'

    def __init__(self, drafts: list[DraftSlide]) -> None:
        self.drafts = drafts
        self.calls: list[tuple[str, str]] = []

    async def generate(self, prompt: str, title: str) -> list[DraftSlide]:
        self.calls.append((prompt, title))
        return [draft.model_copy() for draft in self.drafts]

    async def regenerate(self, original: DraftSlide, prompt: str, additional_context: str | None = None) -> DraftSlide:
        self.calls.append((prompt, additional_context or ''))
        return original.model_copy(update={'title': f'Better {original.title}', 'content': 'Better content'})


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        create_database_url(unittest=True),
        poolclass=StaticPool,
        connect_args={'check_same_thread': False},
    )
    event.listen(engine.sync_engine, 'connect', _enable_sqlite_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(MappedBase.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    """A session inside one transaction, committed after the test"""
    async with session_factory.begin() as session:
        yield session


@pytest.fixture
def make_presentation(db):
    """Factory creating a presentation whose slides are titled 'Slide 1'..'Slide N' at orders 1..N"""

    async def _make(count: int = 3, **kwargs):
        presentation = await presentation_dao.create(
            db, title=kwargs.pop('title', 'Deck'), prompt=kwargs.pop('prompt', 'Deck prompt'), **kwargs
        )
        await slide_dao.bulk_create(
            db,
            [
                {
                    'presentation_id': presentation.id,
                    'title': f'Slide {i}',
                    'content': f'Body {i}',
                    'slide_type': 'CONTENT',
                    'order': i,
                }
                for i in range(1, count + 1)
            ],
        )
        return presentation

    return _make


@pytest.fixture
def read_orders(db):
    """Read ``(title, order)`` pairs of a presentation in ascending order"""

    async def _read(presentation_id: int) -> list[tuple[str, int]]:
        slides = await slide_dao.get_by_presentation(db, presentation_id)
        return [(slide.title, slide.order) for slide in slides]

    return _read


@pytest.fixture
def stub_drafts() -> list[DraftSlide]:
    return [
        DraftSlide(title='Welcome', content='# Welcome', slide_type='TITLE', layout='TITLE_COVER'),
        DraftSlide(title='Agenda', content='## Agenda\n- one\n- two', slide_type='INTRO', layout='TEXT_ONLY'),
        DraftSlide(title='Pricing', content='## Pricing', slide_type='CONTENT', layout='TEXT_IMAGE_LEFT'),
    ]


@pytest.fixture
def stub_generator(stub_drafts):
    """Route every generator lookup to a stub returning three drafts"""
    generator = StubSlideGenerator(stub_drafts)
    with (
        patch('slidedeck.app.deck.service.presentation_service.get_slide_generator', return_value=generator),
        patch('slidedeck.app.deck.service.slide_service.get_slide_generator', return_value=generator),
    ):
        yield generator
