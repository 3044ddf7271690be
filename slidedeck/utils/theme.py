"""Theme presets and WCAG contrast helpers."""

from dataclasses import dataclass

from slidedeck.core.conf import settings


@dataclass(frozen=True)
class ThemeColors:
    background_color: str
    text_color: str
    heading_color: str


THEME_PRESETS: dict[str, ThemeColors] = {
    'light': ThemeColors('#FFFFFF', '#374151', '#111827'),
    'dark': ThemeColors('#1F2937', '#D1D5DB', '#F9FAFB'),
    'midnight': ThemeColors('#0F0F23', '#C7D2FE', '#E0E7FF'),
    'forest': ThemeColors('#064E3B', '#A7F3D0', '#D1FAE5'),
    'sunset': ThemeColors('#FEF3C7', '#92400E', '#78350F'),
    'ocean': ThemeColors('#F0F9FF', '#0C4A6E', '#0B4B66'),
    'corporate': ThemeColors('#F9FAFB', '#4B5563', '#1F2937'),
}

# (primary, secondary) color pair of the presentation -> slide color preset
_PRESET_BY_COLORS: dict[tuple[str, str], str] = {
    ('#3B82F6', '#1E40AF'): 'light',
    ('#60A5FA', '#93C5FD'): 'dark',
    ('#A855F7', '#C084FC'): 'midnight',
    ('#10B981', '#34D399'): 'forest',
    ('#F59E0B', '#EF4444'): 'sunset',
    ('#0EA5E9', '#0284C7'): 'ocean',
    ('#374151', '#6B7280'): 'corporate',
}


def get_theme_defaults(primary_color: str, secondary_color: str) -> ThemeColors:
    """
    Slide colors matching a presentation's primary/secondary colors

    Unknown pairs fall back to the light preset.
    """
    name = _PRESET_BY_COLORS.get((primary_color.upper(), secondary_color.upper()), 'light')
    return THEME_PRESETS[name]


def hex_to_rgb(color: str) -> tuple[int, int, int] | None:
    """Parse ``#rrggbb`` or ``#rgb``, returns None for anything else"""
    value = color.lstrip('#')
    if len(value) == 3:
        value = ''.join(c * 2 for c in value)
    if len(value) != 6:
        return None
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError:
        return None


def relative_luminance(r: int, g: int, b: int) -> float:
    """WCAG relative luminance of an sRGB color"""

    def channel(c: int) -> float:
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def calculate_contrast(color1: str, color2: str) -> float:
    """
    WCAG contrast ratio between two hex colors

    Unparseable colors give a ratio of 1.
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    if rgb1 is None or rgb2 is None:
        return 1.0

    lum1 = relative_luminance(*rgb1)
    lum2 = relative_luminance(*rgb2)
    return (max(lum1, lum2) + 0.05) / (min(lum1, lum2) + 0.05)


def ensure_contrast(background_color: str, text_color: str, min_contrast: float | None = None) -> str:
    """
    Return ``text_color`` if it is readable on ``background_color``, else black or white

    :param background_color: background hex color
    :param text_color: candidate text color
    :param min_contrast: minimum ratio, defaults to ``DECK_MIN_TEXT_CONTRAST``
    :return:
    """
    if min_contrast is None:
        min_contrast = settings.DECK_MIN_TEXT_CONTRAST

    if calculate_contrast(background_color, text_color) >= min_contrast:
        return text_color

    rgb = hex_to_rgb(background_color)
    if rgb is None:
        return text_color
    return '#000000' if relative_luminance(*rgb) > 0.5 else '#FFFFFF'
