"""CRUD operations for slides."""

from typing import Any, Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy_crud_plus import CRUDPlus

from slidedeck.app.deck.model import Slide


class CRUDSlide(CRUDPlus[Slide]):
    """
    CRUD operations for the Slide model.

    The bulk statements below bypass the identity map
    (``synchronize_session=False``), so every read here uses
    ``populate_existing`` to pick up positions written in the same transaction.
    """

    async def get(self, db: AsyncSession, pk: int) -> Slide | None:
        """
        Get a slide by ID

        :param db: Database session
        :param pk: Slide ID
        :return:
        """
        stmt = select(self.model).where(self.model.id == pk).execution_options(populate_existing=True)
        result = await db.execute(stmt)
        return result.scalars().first()

    async def get_by_presentation(self, db: AsyncSession, presentation_id: int) -> Sequence[Slide]:
        """
        Get the slides of a presentation in ascending order

        :param db: Database session
        :param presentation_id: Presentation ID
        :return:
        """
        stmt = (
            select(self.model)
            .where(self.model.presentation_id == presentation_id)
            .order_by(self.model.order.asc())
            .execution_options(populate_existing=True)
        )
        result = await db.execute(stmt)
        return result.scalars().all()

    async def get_by_presentations(self, db: AsyncSession, presentation_ids: Sequence[int]) -> Sequence[Slide]:
        """Get the slides of several presentations, ordered by presentation then position"""
        if not presentation_ids:
            return []
        stmt = (
            select(self.model)
            .where(self.model.presentation_id.in_(presentation_ids))
            .order_by(self.model.presentation_id, self.model.order.asc())
            .execution_options(populate_existing=True)
        )
        result = await db.execute(stmt)
        return result.scalars().all()

    async def get_ids(self, db: AsyncSession, presentation_id: int) -> list[int]:
        """Get the IDs of a presentation's slides"""
        result = await db.execute(select(self.model.id).where(self.model.presentation_id == presentation_id))
        return list(result.scalars().all())

    async def count_by_presentation(self, db: AsyncSession, presentation_id: int) -> int:
        """Count the slides of a presentation"""
        stmt = select(func.count()).select_from(self.model).where(self.model.presentation_id == presentation_id)
        result = await db.execute(stmt)
        return result.scalar_one()

    async def create(self, db: AsyncSession, **kwargs: Any) -> Slide:
        """
        Create a slide

        :param db: Database session
        :param kwargs: Slide column values
        :return:
        """
        slide = self.model(**kwargs)
        db.add(slide)
        await db.flush()
        return slide

    async def bulk_create(self, db: AsyncSession, rows: list[dict[str, Any]]) -> list[Slide]:
        """Create several slides in one flush"""
        slides = [self.model(**row) for row in rows]
        db.add_all(slides)
        await db.flush()
        return slides

    async def update(self, db: AsyncSession, slide: Slide, data: dict[str, Any]) -> Slide:
        """
        Write the given columns to a slide

        :param db: Database session
        :param slide: Slide instance
        :param data: Column values, only these are written
        :return:
        """
        for key, value in data.items():
            setattr(slide, key, value)
        await db.flush()
        return slide

    async def delete(self, db: AsyncSession, pk: int) -> int:
        """Delete a slide, returns the number of deleted rows"""
        result = await db.execute(delete(self.model).where(self.model.id == pk))
        return result.rowcount

    async def delete_by_presentation(self, db: AsyncSession, presentation_id: int) -> int:
        """Delete all slides of a presentation"""
        result = await db.execute(delete(self.model).where(self.model.presentation_id == presentation_id))
        return result.rowcount

    async def shift(self, db: AsyncSession, presentation_id: int, from_order: int, increment: int) -> int:
        """
        Add ``increment`` to the order of every slide with ``order >= from_order``

        Runs in two phases so the unique ``(presentation_id, order)`` constraint
        holds after each statement: the affected rows are first parked at their
        negated target positions, then flipped back to positive.

        :param db: Database session
        :param presentation_id: Presentation ID
        :param from_order: First position to shift
        :param increment: Signed amount added to each shifted position
        :return: Number of shifted slides
        """
        stmt = select(self.model.id).where(
            self.model.presentation_id == presentation_id,
            self.model.order >= from_order,
        )
        ids = list((await db.execute(stmt)).scalars().all())
        if not ids or increment == 0:
            return len(ids)

        await db.execute(
            update(self.model)
            .where(self.model.id.in_(ids))
            .values(order=-(self.model.order + increment))
            .execution_options(synchronize_session=False)
        )
        await db.execute(
            update(self.model)
            .where(self.model.id.in_(ids))
            .values(order=-self.model.order)
            .execution_options(synchronize_session=False)
        )
        return len(ids)

    async def compact_after(self, db: AsyncSession, presentation_id: int, order: int) -> int:
        """Close the gap left at ``order`` by moving every later slide down one position"""
        return await self.shift(db, presentation_id, order + 1, -1)

    async def set_orders(self, db: AsyncSession, slide_ids: Sequence[int]) -> None:
        """
        Assign orders 1..N following ``slide_ids``

        :param db: Database session
        :param slide_ids: Slide IDs of one presentation, first one becomes order 1
        :return:
        """
        for index, slide_id in enumerate(slide_ids, 1):
            await db.execute(
                update(self.model)
                .where(self.model.id == slide_id)
                .values(order=-index)
                .execution_options(synchronize_session=False)
            )
        await db.execute(
            update(self.model)
            .where(self.model.id.in_(slide_ids))
            .values(order=-self.model.order)
            .execution_options(synchronize_session=False)
        )

    async def apply_colors(self, db: AsyncSession, presentation_id: int, **colors: str) -> int:
        """Write color overrides to every slide of a presentation"""
        result = await db.execute(
            update(self.model)
            .where(self.model.presentation_id == presentation_id)
            .values(**colors)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount


slide_dao: CRUDSlide = CRUDSlide(Slide)
