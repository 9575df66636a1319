"""Text patterns built from stars and digits, plus a small command line."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence


def star_triangle(n: int) -> list[str]:
    """Rows of a right triangle of stars that grows by one star per row."""
    return ["*" * row for row in range(1, n + 1)]


def inverted_star_triangle(n: int) -> list[str]:
    """Rows of a right triangle of stars that shrinks by one star per row."""
    return ["*" * (n + 1 - row) for row in range(1, n + 1)]


def number_decrease(n: int) -> list[str]:
    """Rows counting from 1, each row one number shorter than the last."""
    return [
        "".join(str(k) for k in range(1, n + 2 - row)) for row in range(1, n + 1)
    ]


def number_triangle(n: int) -> list[str]:
    """Rows counting from 1, each row one number longer than the last."""
    return ["".join(str(k) for k in range(1, row + 1)) for row in range(1, n + 1)]


def star_pyramid(n: int) -> list[str]:
    """Rows of a centred pyramid with an odd number of stars per row."""
    return [" " * (n - row) + "*" * (2 * row - 1) for row in range(1, n + 1)]


def number_pyramid(n: int) -> list[str]:
    """Rows counting up to the row number, followed by the previous row number repeated."""
    rows = []
    for row in range(1, n + 1):
        padding = " " * max(0, n - row - 1)
        rising = "".join(str(k) for k in range(1, row + 1))
        tail = str(row - 1) * (row - 1)
        rows.append(padding + rising + tail)
    return rows


PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "star": star_triangle,
    "inverted-star": inverted_star_triangle,
    "number-decrease": number_decrease,
    "number-triangle": number_triangle,
    "pyramid": star_pyramid,
    "number-pyramid": number_pyramid,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the chosen pattern; ask for the row count when it is not given."""
    parser = argparse.ArgumentParser(description="Print a text pattern.")
    parser.add_argument("pattern", choices=sorted(PATTERNS))
    parser.add_argument("rows", type=int, nargs="?")
    args = parser.parse_args(argv)

    rows = args.rows
    if rows is None:
        rows = int(input("Enter number of rows: "))

    for line in PATTERNS[args.pattern](rows):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())