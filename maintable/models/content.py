from numbers import Real
from typing import Any, NamedTuple, Optional

from ..types.protocols import ContentType


class Hyperlink(NamedTuple):
    """A link shown inside a header or cell. Its label doubles as its text."""

    url: str
    text: str

    def as_text(self) -> Optional[str]:
        return self.text


class Markup(NamedTuple):
    """Arbitrary rendering-layer content (an element, an icon, a widget...).

    The table never inspects `value`. `text` is only set when the markup
    has a meaningful plain text equivalent.
    """

    value: Any
    text: Optional[str] = None

    def as_text(self) -> Optional[str]:
        return self.text


def content_as_text(content: Any) -> Optional[str]:
    """Returns the plain text representation of a renderable, if it has one.

    Strings are returned unchanged and numbers are formatted with `str()`.
    Content handles are asked through `ContentType.as_text()`.
    Anything else (including booleans and None) has no text representation.
    """
    if isinstance(content, str):
        return content
    # bool is a subclass of int, but True is not a label
    if isinstance(content, bool):
        return None
    if isinstance(content, Real):
        return str(content)
    if isinstance(content, ContentType):
        return content.as_text()
    return None
