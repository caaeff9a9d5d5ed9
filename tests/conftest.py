"""Shared test fixtures."""

from __future__ import annotations

import pytest

from icontree.engine.config import BuildConfig


CLOSE_SVG = '''<svg viewBox="64 64 896 896" focusable="false" xmlns="http://www.w3.org/2000/svg">
  <path d="M563.8 512l262.5-312.9c4.4-5.2.7-13.1-6.1-13.1h-79.8c-4.7 0-9.2 2.1-12.3 5.7L511.6 449.8 295.1 191.7c-3-3.6-7.5-5.7-12.3-5.7H203c-6.8 0-10.5 7.9-6.1 13.1L459.4 512 196.9 824.9c-4.4 5.2-.7 13.1 6.1 13.1h79.8c4.7 0 9.2-2.1 12.3-5.7l216.5-258.1 216.5 258.1c3 3.6 7.5 5.7 12.3 5.7h79.8c6.8 0 10.5-7.9 6.1-13.1L563.8 512z"/>
</svg>'''

TWOTONE_SVG = '''<svg viewBox="64 64 896 896" xmlns="http://www.w3.org/2000/svg">
  <path d="M512 64C264.6 64 64 264.6 64 512s200.6 448 448 448 448-200.6 448-448S759.4 64 512 64z" fill="#333"/>
  <path d="M512 140c-205.4 0-372 166.6-372 372s166.6 372 372 372 372-166.6 372-372-166.6-372-372-372z" fill="#E6E6E6"/>
  <g fill="#333">
    <path d="M464 688a48 48 0 1096 0 48 48 0 10-96 0z"/>
    <path d="M488 576h48c4.4 0 8-3.6 8-8V296c0-4.4-3.6-8-8-8h-48c-4.4 0-8 3.6-8 8v272c0 4.4 3.6 8 8 8z"/>
  </g>
</svg>'''

# Comments and an XML declaration must not reach the tree builder
COMMENTED_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!-- exported by hand -->
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 24 24">
  <!-- the only shape -->
  <use xlink:href="#dot"/>
  <circle cx="12" cy="12" r="10"/>
</svg>'''

STYLE_AND_GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <style>.a { fill: red; }</style>
  <defs><path id="p" d="M0 0h24v24H0z"/></defs>
  <g><circle cx="12" cy="12" r="10"/></g>
</svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

# Hand-exported file: xlink prefix used without its declaration
UNDECLARED_XLINK_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <use xlink:href="#dot"/>
  <circle cx="12" cy="12" r="10"/>
</svg>'''


class RecordingReporter:
    """Keeps reporter messages in memory instead of logging them."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def notice(self, message: str) -> None:
        self.messages.append(("notice", message))


@pytest.fixture
def close_svg() -> str:
    return CLOSE_SVG


@pytest.fixture
def twotone_svg() -> str:
    return TWOTONE_SVG


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def svg_dir(tmp_path):
    """Source tree with close in outline+fill, alert in twotone only, broken in outline only."""
    root = tmp_path / "svg"
    files = {
        "outline/close.svg": CLOSE_SVG,
        "fill/close.svg": CLOSE_SVG,
        "twotone/alert.svg": TWOTONE_SVG,
        "outline/broken.svg": NO_VIEWBOX_SVG,
    }
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def build_config(svg_dir) -> BuildConfig:
    return BuildConfig(svg_dir=svg_dir)
