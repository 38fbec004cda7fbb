"""Tests for the page_preview example."""


class TestPagePreviewApp:
    """Verify the page layout composes navbar, header, and body."""

    def test_plain_page(self, example_app) -> None:
        assert example_app.plain_output == (
            '<div class="page"><div class="page-wrapper">'
            "This is the page content 123</div></div>"
        )

    def test_navbar_before_wrapper(self, example_app) -> None:
        output = example_app.output
        assert output.startswith('<div class="page"><header class="navbar')
        assert output.index("</header>") < output.index('class="page-wrapper"')

    def test_navbar_items(self, example_app) -> None:
        assert 'aria-current="page"' in example_app.output
        assert '<span class="nav-link-title">Settings</span>' in example_app.output
        assert "icon-tabler-home" in example_app.output

    def test_header_actions(self, example_app) -> None:
        output = example_app.output
        assert '<a href="/export" class="btn">Export</a>' in output
        assert output.index("Export") < output.index("New project")
        assert "icon-tabler-plus" in output

    def test_body_contains_card(self, example_app) -> None:
        assert '<div class="page-body"><div class="container-xl"><div class="card">' in (
            example_app.output
        )

    def test_bundled_icons_found(self, example_app) -> None:
        assert "Icon not found" not in example_app.output
