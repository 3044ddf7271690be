# Copyright (c) 2025
# SPDX-License-Identifier: MIT

"""
Deck API Router - v1.

- /presentations/* - Presentations, theme, slide moves and playback
- /slides/* - Slide create, insert, edit, delete, shift and regenerate
"""

from fastapi import APIRouter

from slidedeck.app.deck.api.v1.presentation import router as presentation_router
from slidedeck.app.deck.api.v1.slide import router as slide_router
from slidedeck.core.conf import settings

v1 = APIRouter(prefix=f'{settings.FASTAPI_API_V1_PATH}/deck')

v1.include_router(presentation_router, prefix='/presentations', tags=['Deck Presentations'])
v1.include_router(slide_router, prefix='/slides', tags=['Deck Slides'])

__all__ = ['v1']
