# Copyright (c) 2025
# SPDX-License-Identifier: MIT

"""Prompts for the LLM slide generator."""

from slidedeck.common.enums import SlideLayout, SlideType

SYSTEM_PROMPT = """You are a professional presentation creator. Your role is to generate compelling, \
well-structured presentation content that engages audiences and achieves the presenter's objectives.

Key principles:
- Create content that is clear, engaging, and actionable
- Maintain consistent tone and style throughout
- Structure information logically and persuasively
- Use appropriate formatting for presentation slides
- Ensure content is relevant to the intended audience"""

DEFAULT_VOICE = 'Use a professional, clear, and engaging tone suitable for business presentations.'

SLIDE_TYPES = '|'.join(SlideType.get_member_values())
LAYOUTS = '|'.join(SlideLayout.get_member_values())

SLIDE_GENERATION_PROMPT = """Generate presentation slides based on the following requirements:

TOPIC: {topic}
PRESENTATION TITLE: {title}

{voice}

OUTPUT FORMAT:
Return a JSON array of slide objects with this exact structure:
[
  {{
    "title": "slide title",
    "content": "slide content in markdown format with proper headings and bullet points",
    "narration": "speaker notes the presenter reads while showing this slide",
    "slideType": "{slide_types}",
    "layout": "{layouts}",
    "order": 1
  }}
]

CONTENT REQUIREMENTS:
- Use markdown formatting (##, ###, -, etc.)
- Create engaging, actionable content
- Ensure each slide serves a clear purpose
- Include specific examples and actionable insights where relevant
- Keep content concise but comprehensive
- Use bullet points effectively for key information

TITLE SLIDE REQUIREMENTS:
- ONLY include the presentation title, nothing else
- Simple format: just "# Title"

IMPORTANT: Return ONLY the JSON array, no additional text or explanations."""

SLIDE_REGENERATION_PROMPT = """Regenerate and enhance the following slide:

ORIGINAL SLIDE:
Title: {original_title}
Content: {original_content}
Type: {slide_type}
Layout: {layout}

ENHANCEMENT CONTEXT:
Topic: {topic}
Additional Context: {additional_context}

{voice}

REQUIREMENTS:
- Significantly improve the content while maintaining the slide's purpose
- Keep the same slideType and layout unless improvement requires a change
- Make content more engaging, specific, and actionable
- Add relevant examples or insights where appropriate

OUTPUT FORMAT:
Return a JSON object with this exact structure:
{{
  "title": "enhanced slide title",
  "content": "enhanced slide content in markdown format",
  "slideType": "same or improved slide type",
  "layout": "same or improved layout",
  "order": {order}
}}

IMPORTANT: Return ONLY the JSON object, no additional text or explanations."""
