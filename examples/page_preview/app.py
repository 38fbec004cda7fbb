"""Page preview -- page shell with a navbar, header, and body.

Composes a full Tabler page: a navbar with icon links, a page header
with two actions, and a page body holding a card.

Run:
    python app.py
"""

from tabler_components import CardComponent, PageComponent
from tabler_components.components import page

projects = CardComponent()
projects.with_body("Projects").with_content("This is the page content 123")

content = page.ContentComponent()
header = content.with_header("Overview", subtitle="Dashboard")
header.with_secondary_action("Export", url="/export")
header.with_primary_action("New project", url="/projects/new", icon="plus")
content.with_body().with_content(projects)

layout = PageComponent().with_content(content)
navbar = layout.with_navbar()
navbar.with_item("Home", "/", active=True, icon="home")
navbar.with_item("Settings", "/settings", icon="settings")

output = layout.render()

plain_output = PageComponent().with_content("This is the page content 123").render()


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
