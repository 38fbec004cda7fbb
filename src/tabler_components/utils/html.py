"""HTML utilities for building component markup.

Provides the `Markup` safe-string type and the small set of helpers every
component uses to emit tags:

- `html_escape`: Single-pass escaping via `str.translate()`
- `dasherize`: Python keyword names → HTML attribute names
- `class_names`: Join CSS class tokens, dropping blanks
- `render_attrs`: Attribute mapping → escaped attribute string
- `content_tag`: Build a complete element around escaped children

Escaping Model:
Anything implementing `__html__` (Markup, every component) is trusted and
inserted verbatim. Everything else is converted to `str` and escaped.

Thread-Safety:
All functions are pure. The translation table is built once at import.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from tabler_components.utils.constants import BOOLEAN_ATTRS, NESTED_ATTR_PREFIXES, VOID_ELEMENTS

_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&#34;",
        "'": "&#39;",
    }
)


class Markup(str):
    """A string that is already safe to insert into HTML.

    Concatenating or formatting a `Markup` with a plain string escapes the
    plain string, so the result stays safe:

        >>> Markup("<b>") + "<i>"
        Markup('<b>&lt;i&gt;')

    """

    __slots__ = ()

    def __new__(cls, value: Any = "") -> Markup:
        if hasattr(value, "__html__"):
            value = value.__html__()
        return super().__new__(cls, value)

    def __html__(self) -> Markup:
        return self

    def __add__(self, other: Any) -> Markup:
        if isinstance(other, str) or hasattr(other, "__html__"):
            return Markup(str.__add__(self, html_escape(other)))
        return NotImplemented

    def __radd__(self, other: Any) -> Markup:
        if isinstance(other, str) or hasattr(other, "__html__"):
            return Markup(str.__add__(html_escape(other), self))
        return NotImplemented

    def __repr__(self) -> str:
        return f"Markup({str.__repr__(self)})"

    def join(self, iterable: Iterable[Any]) -> Markup:
        return Markup(str.join(self, (html_escape(item) for item in iterable)))

    def format(self, *args: Any, **kwargs: Any) -> Markup:
        args = tuple(html_escape(a) for a in args)
        kwargs = {k: html_escape(v) for k, v in kwargs.items()}
        return Markup(str.format(self, *args, **kwargs))

    @classmethod
    def escape(cls, value: Any) -> Markup:
        """Escape `value` unless it is already safe."""
        return html_escape(value)


def html_escape(value: Any) -> Markup:
    """Escape a value for inclusion in HTML text or attribute values.

    Values with `__html__` are returned as-is (wrapped in Markup).
    `None` becomes the empty string.

    Example:
        >>> html_escape('<a href="x">')
        Markup('&lt;a href=&#34;x&#34;&gt;')
    """
    if hasattr(value, "__html__"):
        return Markup(value.__html__())
    if value is None:
        return Markup("")
    return Markup(str(value).translate(_ESCAPE_TABLE))


def dasherize(name: str) -> str:
    """Convert a Python-style keyword name to an HTML attribute name.

    A single trailing underscore (used to dodge keywords such as ``class_``
    or ``for_``) is dropped, then underscores become dashes. Case is kept,
    so SVG names like ``viewBox`` survive unchanged.

    Example:
        >>> dasherize("data_turbo_method")
        'data-turbo-method'
        >>> dasherize("class_")
        'class'
    """
    if name.endswith("_") and len(name) > 1:
        name = name[:-1]
    return name.replace("_", "-")


def is_present(value: Any) -> bool:
    """True unless `value` is None, empty, or whitespace only."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, set, dict)):
        return bool(value)
    return True


def class_names(*tokens: Any) -> str:
    """Join class tokens with single spaces.

    Accepts strings, None, and nested iterables of the same. Blank tokens
    are dropped; duplicates are kept.

    Example:
        >>> class_names("btn", None, ["btn-sm", ""], "w-100")
        'btn btn-sm w-100'
    """
    parts: list[str] = []
    for token in tokens:
        if token is None:
            continue
        if isinstance(token, str):
            if token.strip():
                parts.append(token.strip())
        elif isinstance(token, Iterable):
            nested = class_names(*token)
            if nested:
                parts.append(nested)
        else:
            parts.append(str(token))
    return " ".join(parts)


def pop_class(options: dict[str, Any]) -> str:
    """Remove ``class``/``class_`` from keyword options and return the joined classes."""
    return class_names(options.pop("class", None), options.pop("class_", None))


def expand_attrs(attrs: Mapping[str, Any]) -> list[tuple[str, Any]]:
    """Dasherize names and flatten ``data``/``aria`` mappings into (name, value) pairs."""
    expanded: list[tuple[str, Any]] = []
    for key, value in attrs.items():
        name = dasherize(key)
        if name in NESTED_ATTR_PREFIXES and isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                expanded.append((f"{name}-{dasherize(sub_key)}", sub_value))
        else:
            expanded.append((name, value))
    return expanded


def render_attrs(attrs: Mapping[str, Any]) -> Markup:
    """Render an attribute mapping to a leading-space attribute string.

    - Keyword-style names are converted with `dasherize`
    - ``data`` and ``aria`` mappings expand to ``data-*`` / ``aria-*``
    - None and False values are omitted
    - True renders the bare attribute name for boolean attributes,
      otherwise ``name="true"``

    Example:
        >>> render_attrs({"href": "/", "data": {"turbo_method": "post"}})
        Markup(' href="/" data-turbo-method="post"')
    """
    parts: list[str] = []
    for name, value in expand_attrs(attrs):
        if value is None or value is False:
            continue
        if value is True:
            if name in BOOLEAN_ATTRS:
                parts.append(f" {name}")
                continue
            value = "true"
        parts.append(f' {name}="{html_escape(value)}"')
    return Markup("".join(parts))


def content_tag(tag: str, *children: Any, **attrs: Any) -> Markup:
    """Build an element with escaped children.

    Children may be strings, Markup, components, None (skipped), or
    iterables of these.

    Example:
        >>> content_tag("div", "Hi & bye", class_="card-title")
        Markup('<div class="card-title">Hi &amp; bye</div>')
    """
    opening = f"<{tag}{render_attrs(attrs)}>"
    if tag in VOID_ELEMENTS:
        return Markup(opening)
    return Markup(f"{opening}{join_markup(children)}</{tag}>")


def join_markup(children: Iterable[Any]) -> Markup:
    """Concatenate children into one Markup, escaping unsafe strings."""
    buf: list[str] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, str) or hasattr(child, "__html__"):
            buf.append(html_escape(child))
        elif isinstance(child, Iterable):
            buf.append(join_markup(child))
        else:
            buf.append(html_escape(child))
    return Markup("".join(buf))
