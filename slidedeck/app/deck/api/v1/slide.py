# Copyright (c) 2025
# SPDX-License-Identifier: MIT

"""Slide API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path

from slidedeck.app.deck.schema.slide import (
    CreateSlideParam,
    GetRegeneratePreview,
    GetSlideDetail,
    InsertSlideParam,
    KeepSlideParam,
    RegenerateSlideParam,
    ReorderSlidesParam,
    UpdateSlideParam,
)
from slidedeck.app.deck.service.slide_service import slide_service
from slidedeck.common.response.response_schema import ResponseModel, ResponseSchemaModel, response_base
from slidedeck.database.db import CurrentSession, CurrentSessionTransaction

router = APIRouter()


@router.post(
    '/generate',
    summary='Insert a slide',
    description='Insert a slide right after insert_after_order, generated from prompt unless title and content are given.',
)
async def insert_slide(
    db: CurrentSessionTransaction, obj: InsertSlideParam
) -> ResponseSchemaModel[GetSlideDetail]:
    slide = await slide_service.insert(db=db, obj=obj)
    return response_base.success(data=GetSlideDetail.model_validate(slide))


@router.post(
    '/reorder',
    summary='Shift slides',
    description='Add increment to the order of every slide at or after from_order.',
)
async def reorder_slides(db: CurrentSessionTransaction, obj: ReorderSlidesParam) -> ResponseModel:
    await slide_service.reorder(db=db, obj=obj)
    return response_base.success()


@router.post('', summary='Create a slide', description='Create a slide at an explicit order, no other slide moves.')
async def create_slide(db: CurrentSessionTransaction, obj: CreateSlideParam) -> ResponseSchemaModel[GetSlideDetail]:
    slide = await slide_service.create(db=db, obj=obj)
    return response_base.success(data=GetSlideDetail.model_validate(slide))


@router.get('/{pk}', summary='Get a slide')
async def get_slide(
    db: CurrentSession, pk: Annotated[int, Path(description='Slide ID')]
) -> ResponseSchemaModel[GetSlideDetail]:
    slide = await slide_service.get(db=db, pk=pk)
    return response_base.success(data=GetSlideDetail.model_validate(slide))


@router.put(
    '/{pk}',
    summary='Update a slide',
    description='Only the fields present in the body are written; the order never changes here.',
)
async def update_slide(
    db: CurrentSessionTransaction,
    pk: Annotated[int, Path(description='Slide ID')],
    obj: UpdateSlideParam,
) -> ResponseSchemaModel[GetSlideDetail]:
    slide = await slide_service.update(db=db, pk=pk, obj=obj)
    return response_base.success(data=GetSlideDetail.model_validate(slide))


@router.delete('/{pk}', summary='Delete a slide', description='Later slides move up one position.')
async def delete_slide(db: CurrentSessionTransaction, pk: Annotated[int, Path(description='Slide ID')]) -> ResponseModel:
    await slide_service.delete(db=db, pk=pk)
    return response_base.success()


@router.post(
    '/{pk}/regenerate',
    summary='Regenerate a slide',
    description='Returns the original slide next to a proposed replacement. Nothing is stored.',
)
async def regenerate_slide(
    db: CurrentSession,
    pk: Annotated[int, Path(description='Slide ID')],
    obj: RegenerateSlideParam | None = None,
) -> ResponseSchemaModel[GetRegeneratePreview]:
    data = await slide_service.regenerate(db=db, pk=pk, obj=obj or RegenerateSlideParam())
    return response_base.success(data=data)


@router.post(
    '/{pk}/keep',
    summary='Keep a regenerated slide',
    description='regenerated replaces the original slide, both inserts the proposal right after it.',
)
async def keep_slide(
    db: CurrentSessionTransaction,
    pk: Annotated[int, Path(description='Slide ID')],
    obj: KeepSlideParam,
) -> ResponseSchemaModel[GetSlideDetail]:
    slide = await slide_service.keep(db=db, pk=pk, obj=obj)
    return response_base.success(data=GetSlideDetail.model_validate(slide))
