"""Card preview -- status strip, header, bodies, and footer.

Builds the standard card: a danger status strip, a titled header with a
back action, two body sections, and a footer.

Run:
    python app.py
"""

from tabler_components import CardComponent

card = CardComponent()
card.with_status("danger")
header = card.with_header("Card Title", subtitle="Card Subtitle")
header.with_action("Back", url="/")
card.with_body().with_content("Card content goes here")
card.with_body().with_content("Card content 2 goes here")
card.with_footer().with_content("Card footer content")

output = card.render()


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
