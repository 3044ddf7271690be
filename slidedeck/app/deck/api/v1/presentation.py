# Copyright (c) 2025
# SPDX-License-Identifier: MIT

"""Presentation API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path

from slidedeck.app.deck.schema.presentation import (
    ApplyThemeParam,
    CreatePresentationParam,
    GetDeckDetail,
    GetPresentationDetail,
    MoveSlidesParam,
    UpdatePresentationParam,
)
from slidedeck.app.deck.schema.slide import GetSlideDetail
from slidedeck.app.deck.service.presentation_service import presentation_service
from slidedeck.common.response.response_schema import ResponseModel, ResponseSchemaModel, response_base
from slidedeck.database.db import CurrentSession, CurrentSessionTransaction

router = APIRouter()


@router.post(
    '',
    summary='Create a presentation',
    description='Generate slides from the prompt and store the presentation with slides ordered 1..N.',
)
async def create_presentation(
    db: CurrentSessionTransaction, obj: CreatePresentationParam
) -> ResponseSchemaModel[GetPresentationDetail]:
    data = await presentation_service.create(db=db, obj=obj)
    return response_base.success(data=data)


@router.get('', summary='List presentations', description='Newest first, each with its slides in order.')
async def get_presentations(db: CurrentSession) -> ResponseSchemaModel[list[GetPresentationDetail]]:
    data = await presentation_service.get_list(db=db)
    return response_base.success(data=data)


@router.get('/{pk}', summary='Get a presentation')
async def get_presentation(
    db: CurrentSession, pk: Annotated[int, Path(description='Presentation ID')]
) -> ResponseSchemaModel[GetPresentationDetail]:
    data = await presentation_service.get(db=db, pk=pk)
    return response_base.success(data=data)


@router.patch(
    '/{pk}',
    summary='Update a presentation',
    description='Only the fields present in the body are written.',
)
async def update_presentation(
    db: CurrentSessionTransaction,
    pk: Annotated[int, Path(description='Presentation ID')],
    obj: UpdatePresentationParam,
) -> ResponseSchemaModel[GetPresentationDetail]:
    data = await presentation_service.update(db=db, pk=pk, obj=obj)
    return response_base.success(data=data)


@router.delete('/{pk}', summary='Delete a presentation', description='Deletes the presentation and all of its slides.')
async def delete_presentation(
    db: CurrentSessionTransaction, pk: Annotated[int, Path(description='Presentation ID')]
) -> ResponseModel:
    await presentation_service.delete(db=db, pk=pk)
    return response_base.success()


@router.put(
    '/{pk}/theme',
    summary='Apply theme colors to every slide',
    description='Text and heading colors are adjusted to stay readable on the background.',
)
async def apply_theme(
    db: CurrentSessionTransaction,
    pk: Annotated[int, Path(description='Presentation ID')],
    obj: ApplyThemeParam,
) -> ResponseModel:
    count = await presentation_service.apply_theme(db=db, pk=pk, obj=obj)
    return response_base.success(data={'updated': count})


@router.put(
    '/{pk}/slides/order',
    summary='Move slides',
    description='Assign orders 1..N following the given list of every slide ID of the presentation.',
)
async def move_slides(
    db: CurrentSessionTransaction,
    pk: Annotated[int, Path(description='Presentation ID')],
    obj: MoveSlidesParam,
) -> ResponseSchemaModel[list[GetSlideDetail]]:
    data = await presentation_service.move_slides(db=db, pk=pk, obj=obj)
    return response_base.success(data=data)


@router.get('/{pk}/deck', summary='Get the playback deck', description='Slides in order with markdown rendered to HTML.')
async def get_deck(
    db: CurrentSession, pk: Annotated[int, Path(description='Presentation ID')]
) -> ResponseSchemaModel[GetDeckDetail]:
    data = await presentation_service.get_deck(db=db, pk=pk)
    return response_base.success(data=data)
