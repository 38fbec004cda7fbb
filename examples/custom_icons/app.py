"""Custom icons -- extend the bundled icon set and see the fallback.

An application icon set is searched before the bundled icons. Unknown
names render the "no entry" placeholder instead of raising.

Run:
    python app.py
"""

from tabler_components import (
    ChoiceIconLoader,
    DictIconLoader,
    IconComponent,
    PackageIconLoader,
    settings_context,
)

app_icons = DictIconLoader(
    {
        "outline/acme-logo": (
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none" '
            'stroke="currentColor"><path d="M4 20l8 -16l8 16"/></svg>'
        ),
    }
)
loader = ChoiceIconLoader([app_icons, PackageIconLoader("tabler_components")])

with settings_context(icon_loader=loader, icon_size=32):
    logo = IconComponent("Acme-Logo", class_="text-primary", aria_label="Acme").render()
    home = IconComponent("home", stroke_width=1.5).render()
    star = IconComponent("star", variant="filled", size=16).render()
    missing = IconComponent("does-not-exist").render()

output = "\n".join([logo, home, star, missing])


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
