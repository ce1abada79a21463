"""Default auditorium layout: row id -> number of seats in that row."""

DEFAULT_LAYOUT: tuple[tuple[str, int], ...] = (
    ("BOX-A", 7),
    ("BOX-B", 7),
    ("BOX-C", 8),
    ("SC-A", 26),
    ("SC-B", 26),
    ("SC-C", 26),
    ("SC-D", 26),
    ("CB-A", 26),
    ("CB-B", 24),
    ("CB-C", 24),
    ("CB-D", 24),
    ("CB-E", 24),
    ("CB-F", 24),
    ("CB-G", 24),
    ("CB-H", 24),
    ("FC-A", 30),
    ("FC-B", 30),
    ("FC-C", 30),
    ("FC-D", 30),
    ("FC-E", 30),
    ("FC-F", 30),
    ("FC-G", 30),
    ("SC2-A", 30),
    ("SC2-B", 30),
)


def iter_layout_seats(layout=DEFAULT_LAYOUT):
    """Yield ``(row, number)`` for every seat in the layout."""
    for row, count in layout:
        for number in range(1, count + 1):
            yield row, number
