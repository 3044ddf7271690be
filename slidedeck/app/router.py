from fastapi import APIRouter

from slidedeck.app.deck.api.router import v1 as deck_v1

router = APIRouter()

router.include_router(deck_v1)
