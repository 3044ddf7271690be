# Copyright (c) 2025
# SPDX-License-Identifier: MIT

"""Slide generator backed by a LangChain chat model."""

import json
import logging
import re

from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from pydantic import TypeAdapter, ValidationError

from slidedeck.common.exception import errors
from slidedeck.src.generation.base import DraftSlide, SlideGenerator
from slidedeck.src.generation.prompts import (
    DEFAULT_VOICE,
    LAYOUTS,
    SLIDE_GENERATION_PROMPT,
    SLIDE_REGENERATION_PROMPT,
    SLIDE_TYPES,
    SYSTEM_PROMPT,
)
from slidedeck.src.llms.llm import get_llm

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r'^```(?:json)?\s*|\s*```$')
_DRAFT_LIST = TypeAdapter(list[DraftSlide])


def _error_details(e: ValidationError) -> list[dict]:
    return e.errors(include_url=False, include_context=False, include_input=False)


def message_text(content: str | list[Any]) -> str:
    """Flatten chat model content, which may be a list of content blocks"""
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get('type') == 'text':
            parts.append(block.get('text', ''))
    return ''.join(parts)


def parse_json_payload(text: str) -> Any:
    """
    Parse a model answer that should be bare JSON

    Markdown code fences around the payload are tolerated.

    :param text: raw model output
    :return:
    """
    cleaned = _CODE_FENCE_RE.sub('', text.strip())
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise errors.GenerationError(msg='Slide generator returned invalid JSON') from e


def parse_slides(text: str) -> list[DraftSlide]:
    """Validate a JSON array of slides"""
    payload = parse_json_payload(text)
    try:
        slides = _DRAFT_LIST.validate_python(payload)
    except ValidationError as e:
        raise errors.GenerationError(msg='Slide generator returned malformed slides', data=_error_details(e)) from e
    if not slides:
        raise errors.GenerationError(msg='Slide generator returned no slides')
    return slides


def parse_slide(text: str) -> DraftSlide:
    """Validate a single JSON slide object"""
    payload = parse_json_payload(text)
    try:
        return DraftSlide.model_validate(payload)
    except ValidationError as e:
        raise errors.GenerationError(msg='Slide generator returned a malformed slide', data=_error_details(e)) from e


class LLMSlideGenerator(SlideGenerator):
    """Generator prompting the configured chat model for JSON slides"""

    name = 'llm'

    def __init__(self, llm: BaseChatModel | None = None) -> None:
        self._llm = llm

    @property
    def llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = get_llm()
        return self._llm

    async def _ask(self, prompt: str) -> str:
        messages = [SystemMessage(content=SYSTEM_PROMPT), HumanMessage(content=prompt)]
        try:
            response = await self.llm.ainvoke(messages)
        except Exception as e:
            logger.error(f'Slide generation request failed: {e}')
            raise errors.GenerationError() from e
        return message_text(response.content)

    async def generate(self, prompt: str, title: str) -> list[DraftSlide]:
        text = await self._ask(
            SLIDE_GENERATION_PROMPT.format(
                topic=prompt,
                title=title,
                voice=DEFAULT_VOICE,
                slide_types=SLIDE_TYPES,
                layouts=LAYOUTS,
            )
        )
        slides = parse_slides(text)
        logger.info(f'LLM generator drafted {len(slides)} slides for {title!r}')
        return slides

    async def regenerate(self, original: DraftSlide, prompt: str, additional_context: str | None = None) -> DraftSlide:
        text = await self._ask(
            SLIDE_REGENERATION_PROMPT.format(
                original_title=original.title,
                original_content=original.content,
                slide_type=original.slide_type,
                layout=original.layout or '',
                topic=prompt,
                additional_context=additional_context or 'None',
                voice=DEFAULT_VOICE,
                order=original.order or 1,
            )
        )
        slide = parse_slide(text)
        # Position is owned by the caller
        slide.order = original.order
        return slide
