"""
Lightweight markdown to HTML conversion for slide bodies.

Only the subset the slide editor produces is handled: ``#``/``##``/``###``
headers, ``**bold**``, ``*italic*``, ``- `` bullets and plain paragraphs.
Classes are Tailwind utility classes used by the playback view.
"""

import re

_H1_RE = re.compile(r'^# (.*)$', re.MULTILINE)
_H2_RE = re.compile(r'^## (.*)$', re.MULTILINE)
_H3_RE = re.compile(r'^### (.*)$', re.MULTILINE)
_BOLD_RE = re.compile(r'\*\*(.*?)\*\*')
_ITALIC_RE = re.compile(r'\*(.*?)\*')
_BULLET_RE = re.compile(r'^- (.*)$', re.MULTILINE)
_LIST_RUN_RE = re.compile(r'(<li.*</li>\s*)+')
_BLANK_LINES_RE = re.compile(r'\n\s*\n')

_BLOCK_PREFIXES = ('<h', '<li', '<ul', '</ul>')


def parse_markdown_to_html(text: str) -> str:
    """
    Render slide markdown to HTML

    :param text: markdown body
    :return:
    """
    html = _H3_RE.sub(r'<h3 class="text-xl font-semibold mb-3">\1</h3>', text)
    html = _H2_RE.sub(r'<h2 class="text-2xl font-bold mb-4">\1</h2>', html)
    html = _H1_RE.sub(r'<h1 class="text-4xl font-bold mb-6">\1</h1>', html)

    html = _BOLD_RE.sub(r'<strong class="font-bold">\1</strong>', html)
    html = _ITALIC_RE.sub(r'<em class="italic">\1</em>', html)

    html = _BULLET_RE.sub(r'<li class="mb-2 ml-4">• \1</li>', html)
    html = _LIST_RUN_RE.sub(r'<ul class="space-y-1 mb-4">\g<0></ul>', html)

    lines = []
    for line in html.split('\n'):
        stripped = line.strip()
        if stripped and not stripped.startswith(_BLOCK_PREFIXES) and '<' not in stripped:
            line = f'<p class="mb-3 leading-relaxed">{stripped}</p>'
        lines.append(line)

    return _BLANK_LINES_RE.sub('\n', '\n'.join(lines))

