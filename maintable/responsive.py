from typing import Optional, Sequence

from .models import Header, content_as_text


def heading_for(header: Optional[Header], responsive: bool) -> Optional[str]:
    """Computes the heading attached to cells of a column in a responsive table.

    Parameters
    ----------
    header : `Optional[Header]`
        Header of the cell's column, or None if the column has no header.
    responsive : `bool`
        Whether the table is responsive.

    Returns
    -------
    `Optional[str]`
        The header's explicit `heading`, else its content if that is
        representable as text. None if the table isn't responsive or there
        is no usable label, in which case no heading is emitted at all.
    """
    if not responsive or header is None:
        return None
    if header.heading:
        return header.heading
    return content_as_text(header.content) or None


def column_headings(
    headers: Sequence[Header], n_columns: int, responsive: bool
) -> list[Optional[str]]:
    """Positional headings for the first `n_columns` cells of a row."""
    return [
        heading_for(headers[i] if i < len(headers) else None, responsive)
        for i in range(n_columns)
    ]
