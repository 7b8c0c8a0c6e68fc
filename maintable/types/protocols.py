from typing import Any, Optional, Protocol, runtime_checkable

# Anything a cell, header or expansion region can hold. Plain text and
# numbers are passed through as-is, everything else is an opaque handle
# owned by the rendering layer.
Renderable = Any


@runtime_checkable
class ContentType(Protocol):
    """Opaque content handed through to the rendering layer.

    Implementations report whether they can be represented as plain text,
    which is what responsive headings are built from.
    """

    def as_text(self) -> Optional[str]:
        """Plain text representation of the content, or None if there is none."""
