"""Presentation request/response schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from slidedeck.app.deck.schema.slide import GetSlideDetail
from slidedeck.common.schema import HEX_COLOR_PATTERN, SchemaBase


class CreatePresentationParam(SchemaBase):
    """Create a presentation and generate its slides"""

    title: str = Field(..., min_length=1, max_length=255, description='Presentation title')
    prompt: str = Field(..., min_length=1, description='Topic the slides are generated from')
    description: str | None = Field(None, description='Description')

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'title': 'Quarterly Review',
                'prompt': 'Summarize revenue growth in the APAC region. Highlight churn reduction initiatives.',
                'description': 'Q3 business review',
            }
        }
    )


class UpdatePresentationParam(SchemaBase):
    """Sparse presentation update, same convention as slide updates"""

    title: str | None = Field(None, max_length=255, description='Presentation title')
    description: str | None = Field(None, description='Description')
    theme: str | None = Field(None, max_length=64, description='Theme name')
    primary_color: str | None = Field(None, pattern=HEX_COLOR_PATTERN, description='Primary color')
    secondary_color: str | None = Field(None, pattern=HEX_COLOR_PATTERN, description='Secondary color')
    font_family: str | None = Field(None, max_length=64, description='Font family')

    @field_validator('title', 'theme', 'primary_color', 'secondary_color', 'font_family')
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError('may not be null')
        return v


class ApplyThemeParam(SchemaBase):
    """Colors written to every slide of a presentation"""

    background_color: str = Field(..., pattern=HEX_COLOR_PATTERN, description='Background color')
    text_color: str = Field(..., pattern=HEX_COLOR_PATTERN, description='Text color')
    heading_color: str = Field(..., pattern=HEX_COLOR_PATTERN, description='Heading color')


class MoveSlidesParam(SchemaBase):
    """Full list of the presentation's slide ids in their new order"""

    slide_ids: list[int] = Field(..., min_length=1, description='Slide IDs, first one becomes order 1')


class GetPresentationDetail(SchemaBase):
    """Presentation detail with its slides in order"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    prompt: str
    theme: str
    primary_color: str
    secondary_color: str
    font_family: str
    created_time: datetime
    updated_time: datetime | None = None
    slides: list[GetSlideDetail] = Field(default_factory=list)


class GetDeckSlide(SchemaBase):
    """Slide rendered for playback"""

    id: int
    order: int
    title: str
    slide_type: str
    layout: str
    html: str
    narration: str | None = None
    image_url: str | None = None
    background_color: str | None = None
    text_color: str | None = None
    heading_color: str | None = None
    text_align: str


class GetDeckDetail(SchemaBase):
    """Presentation rendered for full-screen playback"""

    id: int
    title: str
    theme: str
    primary_color: str
    secondary_color: str
    font_family: str
    slides: list[GetDeckSlide] = Field(default_factory=list)
