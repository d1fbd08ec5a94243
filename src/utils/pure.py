from math import ceil
from typing import List, Literal, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

PAGE_SIZE = 5


def format_currency(amount: float) -> str:
    """Render an amount the way the cart and order views show it, e.g. $999.90"""
    return f"${amount:.2f}"


def paginate(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> Tuple[List[T], int]:
    """
    Slice out one page of items. Pages start from 1, anything lower is page 1.

    Returns:
        (items for page, total item count)
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1.")
    offset = max(page - 1, 0) * page_size
    return list(items[offset : offset + page_size]), len(items)


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
    # always at least one (possibly empty) page
    return max(ceil(total / page_size), 1)


def generate_markdown_table(
    headers: Optional[List[str]],
    rows: List[List[str]],
    aligns: Optional[List[Literal["l", "c", "r"]]] = None,
) -> str:
    """
    Generate a Markdown table.

    Args:
        headers: List of column headers, or None to use first row as headers.
        rows: List of rows, each a list of strings.
        aligns: List of alignments ('l', 'c', 'r') for each column.
                Defaults to all center ('c').

    Returns:
        str: Markdown formatted table.
    """
    if not rows:
        return ""

    # If no headers, take the first row as header and remove it from rows
    if not headers:
        headers, rows = rows[0], rows[1:]

    headers = list(map(str, headers))
    rows = [list(map(str, row)) for row in rows]

    num_cols = len(headers)
    if aligns is None:
        aligns = ["c"] * num_cols
    elif len(aligns) != num_cols:
        raise ValueError("Length of aligns must match number of headers.")

    align_map = {
        "l": ":---",
        "c": ":---:",
        "r": "---:",
    }

    header_line = "| " + " | ".join(headers) + " |"
    align_line = "| " + " | ".join(align_map[a] for a in aligns) + " |"
    row_lines = ["| " + " | ".join(row) + " |" for row in rows]

    return "\n".join([header_line, align_line, *row_lines])
