"""Tests for theme presets, contrast helpers and slide defaults."""

import pytest

from slidedeck.core.conf import settings
from slidedeck.utils.slide_defaults import placeholder_image, speaker_notes
from slidedeck.utils.theme import (
    THEME_PRESETS,
    calculate_contrast,
    ensure_contrast,
    get_theme_defaults,
    hex_to_rgb,
)


class TestThemeDefaults:
    """Tests for mapping presentation colors to slide presets."""

    def test_known_pair_case_insensitive(self):
        assert get_theme_defaults('#10b981', '#34d399') == THEME_PRESETS['forest']

    def test_unknown_pair_falls_back_to_light(self):
        assert get_theme_defaults('#123456', '#654321') == THEME_PRESETS['light']

    def test_default_presentation_colors_are_light(self):
        defaults = get_theme_defaults(settings.DECK_DEFAULT_PRIMARY_COLOR, settings.DECK_DEFAULT_SECONDARY_COLOR)
        assert defaults == THEME_PRESETS['light']


class TestContrast:
    """Tests for WCAG contrast helpers."""

    @pytest.mark.parametrize(
        ('color', 'expected'),
        [('#FFFFFF', (255, 255, 255)), ('#0f0', (0, 255, 0)), ('#12345', None), ('#GGGGGG', None)],
    )
    def test_hex_to_rgb(self, color, expected):
        assert hex_to_rgb(color) == expected

    def test_black_on_white(self):
        assert calculate_contrast('#000000', '#FFFFFF') == pytest.approx(21.0)

    def test_same_color(self):
        assert calculate_contrast('#777777', '#777777') == pytest.approx(1.0)

    def test_unparseable_color(self):
        assert calculate_contrast('red', '#FFFFFF') == 1.0

    def test_readable_color_kept(self):
        assert ensure_contrast('#FFFFFF', '#374151') == '#374151'

    def test_light_background_gets_black(self):
        assert ensure_contrast('#FFFFFF', '#EEEEEE') == '#000000'

    def test_dark_background_gets_white(self):
        assert ensure_contrast('#1F2937', '#374151') == '#FFFFFF'

    def test_custom_threshold(self):
        assert ensure_contrast('#FFFFFF', '#767676', min_contrast=7.0) == '#000000'

    def test_presets_are_readable(self):
        for preset in THEME_PRESETS.values():
            assert calculate_contrast(preset.background_color, preset.text_color) >= 4.5
            assert calculate_contrast(preset.background_color, preset.heading_color) >= 4.5


class TestSlideDefaults:
    """Tests for speaker notes and placeholder images."""

    def test_title_notes_mention_title(self):
        assert '"Pricing"' in speaker_notes('TITLE', 'Pricing')

    def test_unknown_type_notes(self):
        assert speaker_notes('POEM', 'Ode').startswith('Speaker notes for "Ode"')

    @pytest.mark.parametrize(
        ('layout', 'expected'),
        [
            ('TEXT_IMAGE_RIGHT', settings.DECK_PLACEHOLDER_IMAGE_URL),
            ('COMPARISON', settings.DECK_PLACEHOLDER_IMAGE_URL),
            ('TEXT_ONLY', None),
            ('TITLE_COVER', None),
            ('UNKNOWN', None),
            (None, None),
        ],
    )
    def test_placeholder_image(self, layout, expected):
        assert placeholder_image(layout) == expected
