# Copyright (c) 2025
# SPDX-License-Identifier: MIT

"""Generator interface and selection."""

from abc import ABC, abstractmethod

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from slidedeck.common.enums import SlideLayout, SlideType
from slidedeck.core.conf import settings


class DraftSlide(BaseModel):
    """Slide proposed by a generator, not yet persisted"""

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)

    title: str = Field(..., min_length=1)
    content: str
    slide_type: SlideType = Field(..., validation_alias=AliasChoices('slide_type', 'slideType'))
    layout: SlideLayout | None = None
    order: int | None = None
    narration: str | None = None


class SlideGenerator(ABC):
    """Produces slide drafts from a prompt"""

    name: str

    @abstractmethod
    async def generate(self, prompt: str, title: str) -> list[DraftSlide]:
        """
        Draft the slides of a presentation

        :param prompt: topic of the presentation
        :param title: presentation title
        :return: drafts in presentation order
        """

    @abstractmethod
    async def regenerate(self, original: DraftSlide, prompt: str, additional_context: str | None = None) -> DraftSlide:
        """
        Draft a replacement for an existing slide

        :param original: the slide being replaced
        :param prompt: topic of the presentation
        :param additional_context: extra guidance from the user
        :return:
        """


_generators: dict[str, SlideGenerator] = {}


def get_slide_generator() -> SlideGenerator:
    """Get the generator selected by ``SLIDE_GENERATOR``"""
    kind = settings.SLIDE_GENERATOR
    if kind not in _generators:
        if kind == 'llm':
            from slidedeck.src.generation.llm_generator import LLMSlideGenerator

            _generators[kind] = LLMSlideGenerator()
        else:
            from slidedeck.src.generation.template_generator import TemplateSlideGenerator

            _generators[kind] = TemplateSlideGenerator()
    return _generators[kind]
