# Copyright (c) 2025
# SPDX-License-Identifier: MIT

"""Slide content generation adapters."""

from slidedeck.src.generation.base import DraftSlide, SlideGenerator, get_slide_generator

__all__ = ['DraftSlide', 'SlideGenerator', 'get_slide_generator']
