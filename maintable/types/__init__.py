from .protocols import ContentType, Renderable

__all__ = [
    "ContentType",
    "Renderable",
]
