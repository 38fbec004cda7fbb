"""Shared icon sources and assertion helpers for tabler_components tests."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

SVG_NS = "http://www.w3.org/2000/svg"

HOME_OUTLINE = (
    f'<svg xmlns="{SVG_NS}" width="24" height="24" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
    '<path d="M5 12l-2 0l9 -9l9 9l-2 0"/><path d="M5 12v7a2 2 0 0 0 2 2h10"/></svg>'
)

STAR_FILLED = (
    f'<svg xmlns="{SVG_NS}" width="24" height="24" viewBox="0 0 24 24" fill="currentColor">'
    '<path d="M8.243 7.34l-6.38 .925z"/></svg>'
)

STYLED_OUTLINE = (
    f'<svg xmlns="{SVG_NS}" width="48" height="48" viewBox="0 0 24 24" '
    'class="brand-mark" style="color: red;">'
    '<path d="M12 5l0 14"/></svg>'
)

NOT_SVG = "<html><body>not an icon</body></html>"

ICON_SOURCES = {
    "outline/home": HOME_OUTLINE,
    "outline/arrow-left": (
        f'<svg xmlns="{SVG_NS}" width="24" height="24" viewBox="0 0 24 24">'
        '<path d="M5 12l14 0"/></svg>'
    ),
    "outline/settings": (
        f'<svg xmlns="{SVG_NS}" width="24" height="24" viewBox="0 0 24 24">'
        '<path d="M9 12a3 3 0 1 0 6 0a3 3 0 0 0 -6 0"/></svg>'
    ),
    "outline/styled": STYLED_OUTLINE,
    "outline/no-namespace": '<svg width="24" height="24"><path d="M1 1"/></svg>',
    "outline/not-svg": NOT_SVG,
    "filled/star": STAR_FILLED,
}


def parse_svg(markup: str) -> Tag:
    """Parse rendered markup and return its root <svg> element."""
    svg = BeautifulSoup(str(markup), "xml").find("svg")
    assert svg is not None, f"No <svg> in output: {markup!r}"
    return svg


def parse_html(markup: str) -> BeautifulSoup:
    """Parse rendered component markup for structural assertions."""
    return BeautifulSoup(str(markup), "html.parser")


def assert_contains(result: str, *expected_parts: str) -> None:
    """Assert rendered output contains all expected parts.

    Args:
        result: The rendered markup.
        expected_parts: Strings that should all be present in the result.
    """
    for part in expected_parts:
        assert part in result, (
            f"Rendered output missing expected content:\n"
            f"  Missing: {part!r}\n"
            f"  Actual: {result!r}"
        )
