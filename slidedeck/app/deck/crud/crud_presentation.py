"""CRUD operations for presentations."""

from typing import Any, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy_crud_plus import CRUDPlus

from slidedeck.app.deck.model import Presentation


class CRUDPresentation(CRUDPlus[Presentation]):
    """CRUD operations for the Presentation model."""

    async def get(self, db: AsyncSession, pk: int) -> Presentation | None:
        """
        Get a presentation by ID

        :param db: Database session
        :param pk: Presentation ID
        :return:
        """
        return await self.select_model(db, pk)

    async def get_list(self, db: AsyncSession) -> Sequence[Presentation]:
        """Get all presentations, newest first"""
        stmt = select(self.model).order_by(self.model.created_time.desc(), self.model.id.desc())
        result = await db.execute(stmt)
        return result.scalars().all()

    async def create(self, db: AsyncSession, **kwargs: Any) -> Presentation:
        """Create a presentation"""
        presentation = self.model(**kwargs)
        db.add(presentation)
        await db.flush()
        return presentation

    async def update(self, db: AsyncSession, presentation: Presentation, data: dict[str, Any]) -> Presentation:
        """Write the given columns to a presentation"""
        for key, value in data.items():
            setattr(presentation, key, value)
        await db.flush()
        return presentation

    async def delete(self, db: AsyncSession, pk: int) -> int:
        """Delete a presentation, returns the number of deleted rows"""
        result = await db.execute(delete(self.model).where(self.model.id == pk))
        return result.rowcount


presentation_dao: CRUDPresentation = CRUDPresentation(Presentation)
