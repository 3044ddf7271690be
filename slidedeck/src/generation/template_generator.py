# Copyright (c) 2025
# SPDX-License-Identifier: MIT

"""Deterministic slide generator that works without any model provider.

Topics are pulled out of the prompt sentences and poured into canned
section bodies: a title slide, an introduction, up to four content slides,
a conclusion and next steps.
"""

import logging
import re

from slidedeck.common.enums import SlideLayout, SlideType
from slidedeck.src.generation.base import DraftSlide, SlideGenerator

logger = logging.getLogger(__name__)

_STOPWORDS = frozenset({
    'about', 'on', 'for', 'with', 'in', 'to', 'and', 'the', 'a', 'an',
    'is', 'are', 'was', 'were', 'be', 'been', 'being',
})

FALLBACK_TOPICS = (
    'Key Concepts and Fundamentals',
    'Implementation Strategies',
    'Best Practices and Guidelines',
    'Common Challenges and Solutions',
)

CONTENT_LAYOUTS = (
    SlideLayout.TEXT_IMAGE_LEFT,
    SlideLayout.TEXT_IMAGE_RIGHT,
    SlideLayout.BULLETS_IMAGE,
    SlideLayout.TWO_COLUMN,
)

_SENTENCE_SPLIT_RE = re.compile(r'[.!?]+')
_NON_WORD_RE = re.compile(r'[^\w\s]')


def extract_topics(prompt: str) -> list[str]:
    """
    Pull up to four short topics out of a prompt

    Each sentence longer than ten characters contributes its first three
    significant words. Topics already contained in an earlier one are
    skipped. When fewer than three are found the generic fallbacks are
    appended.

    :param prompt: free text prompt
    :return:
    """
    topics: list[str] = []
    for sentence in _SENTENCE_SPLIT_RE.split(prompt):
        if len(sentence.strip()) <= 10:
            continue
        words = [word for word in sentence.split() if len(word) > 3 and word.lower() not in _STOPWORDS]
        if len(words) < 2:
            continue
        topic = _NON_WORD_RE.sub('', ' '.join(words[:3])).strip()
        if topic and not any(topic.lower() in existing.lower() for existing in topics):
            topics.append(topic)

    if len(topics) < 3:
        topics.extend(FALLBACK_TOPICS)

    return topics[:4]


def _key_points(topic: str) -> list[str]:
    return [
        f'Understanding the core principles of {topic.lower()}',
        'Practical applications and real-world examples',
        'Benefits and expected outcomes',
        'Implementation considerations and requirements',
    ]


def _detailed_content(topic: str) -> str:
    return (
        f'This section covers the essential aspects of {topic.lower()}, '
        'providing both theoretical foundation and practical guidance.\n\n'
        'The content builds upon established best practices while adapting to current needs and constraints. '
        'Key considerations include resource allocation, timing, stakeholder engagement, and measurable outcomes.\n\n'
        'Success in this area requires a systematic approach combined with flexibility to adapt '
        'as circumstances change.'
    )


def _bullets(items: list[str]) -> str:
    return '\n'.join(f'- {item}' for item in items)


def intro_content(prompt: str) -> str:
    topics = extract_topics(prompt)
    return f"""## Welcome & Overview

### Today's Agenda
{_bullets(topics[:3])}

### Why This Matters
This presentation addresses critical challenges and opportunities in our field, \
providing actionable insights for immediate implementation.

### What You'll Learn
By the end of this session, you'll have a clear understanding of key concepts \
and practical strategies to move forward."""


def content_body(topic: str) -> str:
    return f"""## {topic}

### Key Points
{_bullets(_key_points(topic))}

### Details
{_detailed_content(topic)}

### Why It Matters
This concept is crucial because it directly impacts our ability to achieve our objectives \
and create meaningful results."""


def enhanced_content_body(topic: str) -> str:
    return f"""## {topic} - Enhanced Version

### Advanced Concepts
{_bullets(_key_points(topic))}

### Deep Dive Analysis
{_detailed_content(topic)}

### Case Studies and Examples
Real-world applications demonstrate the effectiveness of these approaches across various contexts and industries.

### Advanced Implementation
This enhanced version includes additional considerations for complex scenarios and advanced use cases."""


CONCLUSION_CONTENT = """## Key Takeaways

### Summary of Main Points
- We've explored the fundamental concepts and their applications
- Discussed practical strategies for implementation
- Identified key opportunities for growth and improvement

### Remember This
The insights shared today provide a foundation for moving forward with confidence and clarity.

### Questions & Discussion
Let's discuss how these concepts apply to your specific situation."""

NEXT_STEPS_CONTENT = """## Action Items

### Immediate Actions (Next 7 Days)
1. Review and prioritize the key concepts discussed
2. Identify specific areas for immediate implementation
3. Gather necessary resources and stakeholders

### Short-term Goals (Next 30 Days)
1. Develop detailed implementation plans
2. Begin pilot programs or test implementations
3. Establish metrics for measuring success

### Long-term Vision (Next 90 Days)
1. Full implementation of strategies
2. Regular review and optimization
3. Scale successful approaches across the organization

### Resources & Support
- Documentation and reference materials
- Follow-up sessions and check-ins
- Community and peer support networks"""


class TemplateSlideGenerator(SlideGenerator):
    """Offline generator built from canned section bodies"""

    name = 'template'

    async def generate(self, prompt: str, title: str) -> list[DraftSlide]:
        slides = [
            DraftSlide(
                title=title,
                content=f'# {title}\n\nA comprehensive presentation covering key insights and actionable strategies.',
                slide_type=SlideType.TITLE,
                layout=SlideLayout.TITLE_COVER,
            ),
            DraftSlide(
                title='Introduction',
                content=intro_content(prompt),
                slide_type=SlideType.INTRO,
                layout=SlideLayout.TEXT_ONLY,
            ),
        ]
        for index, topic in enumerate(extract_topics(prompt)):
            slides.append(
                DraftSlide(
                    title=topic,
                    content=content_body(topic),
                    slide_type=SlideType.CONTENT,
                    layout=CONTENT_LAYOUTS[index % len(CONTENT_LAYOUTS)],
                )
            )
        slides.append(
            DraftSlide(
                title='Conclusion',
                content=CONCLUSION_CONTENT,
                slide_type=SlideType.CONCLUSION,
                layout=SlideLayout.TEXT_ONLY,
            )
        )
        slides.append(
            DraftSlide(
                title='Next Steps',
                content=NEXT_STEPS_CONTENT,
                slide_type=SlideType.NEXT_STEPS,
                layout=SlideLayout.BULLETS_IMAGE,
            )
        )
        for order, slide in enumerate(slides, 1):
            slide.order = order

        logger.debug(f'Template generator drafted {len(slides)} slides for {title!r}')
        return slides

    async def regenerate(self, original: DraftSlide, prompt: str, additional_context: str | None = None) -> DraftSlide:
        enhanced_prompt = f'{prompt}\n\nAdditional context: {additional_context}' if additional_context else prompt

        match original.slide_type:
            case SlideType.TITLE:
                title = original.title
                content = f'# {original.title}\n\nAn enhanced presentation with deeper insights and refined strategies.'
            case SlideType.INTRO:
                title, content = 'Enhanced Introduction', intro_content(enhanced_prompt)
            case SlideType.CONTENT:
                title, content = f'Enhanced: {original.title}', enhanced_content_body(original.title)
            case SlideType.CONCLUSION:
                title, content = 'Enhanced Conclusion', CONCLUSION_CONTENT
            case SlideType.NEXT_STEPS:
                title, content = 'Enhanced Next Steps', NEXT_STEPS_CONTENT
            case _:
                return original.model_copy()

        return original.model_copy(update={'title': title, 'content': content})
