"""Defaults filled in for newly generated slides."""

from slidedeck.common.enums import IMAGE_LAYOUTS, SlideLayout, SlideType
from slidedeck.core.conf import settings

_SPEAKER_NOTES = {
    SlideType.TITLE: (
        'Welcome everyone to this presentation on "{title}". '
        "This opening slide sets the stage for what we'll be covering today."
    ),
    SlideType.INTRO: (
        'This slide introduces the main topic. Take your time to explain the key concepts '
        'and make sure the audience understands the context.'
    ),
    SlideType.CONTENT: (
        'This is a key content slide. Walk through each point clearly and provide examples where relevant. '
        'Engage with the audience and check for understanding.'
    ),
    SlideType.CONCLUSION: (
        "We're now reaching the conclusion. Summarize the main points "
        'and reinforce the key takeaways from this presentation.'
    ),
    SlideType.NEXT_STEPS: (
        'Conclude with clear next steps. Make sure the audience knows what actions to take '
        'and provide any necessary resources or contact information.'
    ),
}

_FALLBACK_NOTES = (
    'Speaker notes for "{title}": Review the content on this slide and present it clearly to your audience. '
    'Take time to explain any complex concepts.'
)


def speaker_notes(slide_type: str, title: str) -> str:
    """Basic speaker notes for a slide of the given type"""
    try:
        template = _SPEAKER_NOTES[SlideType(slide_type)]
    except ValueError:
        template = _FALLBACK_NOTES
    return template.format(title=title)


def placeholder_image(layout: str | None) -> str | None:
    """Placeholder image URL for layouts that show an image, None otherwise"""
    if layout is None:
        return None
    try:
        needs_image = SlideLayout(layout) in IMAGE_LAYOUTS
    except ValueError:
        return None
    return settings.DECK_PLACEHOLDER_IMAGE_URL if needs_image else None
