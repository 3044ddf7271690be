"""Deck models package."""

from slidedeck.app.deck.model.presentation import Presentation
from slidedeck.app.deck.model.slide import Slide

__all__ = ['Presentation', 'Slide']
