"""Slide request/response schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator, model_validator

from slidedeck.common.enums import KeepMode, SlideLayout, SlideType, TextAlign
from slidedeck.common.schema import SchemaBase


class SlideStyleSchema(SchemaBase):
    """Presentational overrides shared by slide schemas"""

    image_url: str | None = Field(None, description='Image URL')
    background_color: str | None = Field(None, description='Background color')
    text_color: str | None = Field(None, description='Text color')
    heading_color: str | None = Field(None, description='Heading color')
    narration: str | None = Field(None, description='Speaker notes')


class CreateSlideParam(SlideStyleSchema):
    """Create a slide at an explicit position"""

    presentation_id: int = Field(..., description='Owning presentation ID')
    title: str = Field(..., description='Slide title')
    content: str = Field(..., description='Slide body (markdown)')
    slide_type: SlideType = Field(SlideType.CONTENT, description='Slide type')
    layout: SlideLayout = Field(SlideLayout.TEXT_ONLY, description='Visual layout')
    order: int = Field(..., ge=1, description='Position the slide is created at')
    text_align: TextAlign = Field(TextAlign.LEFT, description='Text alignment')


class UpdateSlideParam(SlideStyleSchema):
    """
    Sparse slide update.

    Omitted fields are left untouched; fields that are sent are written as
    given. ``order`` is not accepted here, positions only change through the
    ordering endpoints.
    """

    title: str | None = Field(None, description='Slide title')
    content: str | None = Field(None, description='Slide body (markdown)')
    layout: SlideLayout | None = Field(None, description='Visual layout')
    text_align: TextAlign | None = Field(None, description='Text alignment')

    @field_validator('title', 'content', 'layout', 'text_align')
    @classmethod
    def not_null(cls, v):
        # Only runs for values that were actually sent
        if v is None:
            raise ValueError('may not be null')
        return v


class InsertSlideParam(SchemaBase):
    """
    Insert a slide after a position.

    With ``content`` the slide is stored as given; without it, ``prompt`` is
    sent to the slide generator.
    """

    presentation_id: int = Field(..., description='Owning presentation ID')
    prompt: str | None = Field(None, min_length=1, description='What the new slide should cover')
    title: str | None = Field(None, description='Slide title, required together with content')
    content: str | None = Field(None, description='Slide body (markdown), skips generation')
    slide_type: SlideType = Field(SlideType.CONTENT, description='Requested slide type')
    layout: SlideLayout | None = Field(None, description='Visual layout of an explicit slide')
    insert_after_order: int = Field(
        ..., ge=0, description='Position to insert after, 0 inserts at the front of the deck'
    )

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'presentation_id': 1,
                'prompt': 'Pricing model comparison for enterprise customers',
                'slide_type': 'CONTENT',
                'insert_after_order': 2,
            }
        }
    )

    @model_validator(mode='after')
    def check_source(self) -> 'InsertSlideParam':
        if self.content is None:
            if self.prompt is None:
                raise ValueError('prompt is required when no content is given')
        elif self.title is None:
            raise ValueError('title is required together with content')
        return self


class ReorderSlidesParam(SchemaBase):
    """Shift every slide at or after ``from_order`` by ``increment``"""

    presentation_id: int = Field(..., description='Owning presentation ID')
    from_order: int = Field(..., description='First position to shift')
    increment: int = Field(..., description='Signed amount added to each shifted position')


class RegenerateSlideParam(SchemaBase):
    """Regenerate a slide (preview only)"""

    additional_context: str | None = Field(None, description='Extra guidance for the generator')


class KeepSlideParam(SchemaBase):
    """Follow-up of a regeneration preview"""

    mode: KeepMode = Field(..., description='regenerated: replace the original, both: insert after it')
    title: str = Field(..., description='Regenerated title')
    content: str = Field(..., description='Regenerated content')
    slide_type: SlideType | None = Field(None, description='Slide type, defaults to the original one')
    layout: SlideLayout | None = Field(None, description='Layout, defaults to the original one')


class GetSlideDetail(SlideStyleSchema):
    """Slide detail"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    presentation_id: int
    title: str
    content: str
    slide_type: str
    layout: str
    order: int
    text_align: str
    created_time: datetime
    updated_time: datetime | None = None


class RegenerateOriginal(SchemaBase):
    """Original slide shown next to the regenerated one"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    slide_type: str
    order: int


class RegeneratedDraft(SchemaBase):
    """Proposed replacement, not persisted"""

    title: str
    content: str
    slide_type: str
    layout: str | None = None
    order: int


class GetRegeneratePreview(SchemaBase):
    """Regeneration preview"""

    original: RegenerateOriginal
    regenerated: RegeneratedDraft
