"""Workload Source - Logical write request sequences."""

import re
from pathlib import Path
from typing import Iterator

NUM_STRINGS = 22
NUM_PER_STRING = 10

# Reference strings (22 x 10)
REFERENCE_STRINGS: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 2, 2, 3, 3, 3, 1, 1),
    (2, 2, 2, 2, 2, 10, 11, 11, 12, 1),
    (134, 77, 203, 12, 89, 255, 47, 163, 58, 211),
    (45, 198, 27, 120, 3, 242, 76, 151, 94, 187),
    (222, 54, 11, 193, 65, 144, 239, 37, 200, 18),
    (92, 8, 216, 174, 49, 138, 253, 67, 102, 33),
    (183, 22, 131, 250, 79, 5, 121, 201, 162, 40),
    (9, 111, 170, 63, 230, 142, 32, 184, 93, 217),
    (57, 149, 244, 14, 71, 112, 191, 99, 129, 224),
    (25, 233, 56, 196, 186, 64, 145, 88, 241, 179),
    (152, 115, 19, 227, 84, 2, 205, 46, 108, 159),
    (175, 59, 90, 209, 132, 7, 202, 125, 50, 248),
    (19, 28, 23, 13, 17, 30, 12, 21, 26, 10),
    (22, 18, 25, 27, 15, 29, 24, 11, 16, 20),
    (13, 19, 30, 22, 18, 17, 28, 25, 14, 23),
    (16, 29, 11, 21, 20, 12, 15, 27, 30, 25),
    (24, 10, 17, 28, 19, 22, 16, 13, 26, 18),
    (27, 15, 30, 14, 12, 20, 11, 23, 28, 25),
    (17, 24, 13, 19, 26, 21, 18, 16, 29, 30),
    (20, 28, 11, 25, 23, 14, 12, 19, 27, 18),
    (15, 17, 29, 10, 16, 22, 20, 28, 13, 30),
    (26, 19, 14, 24, 18, 21, 25, 29, 15, 11),
)

TOTAL_WRITES = NUM_STRINGS * NUM_PER_STRING

_SEPARATORS = re.compile(r"[\s,]+")


def reference_workload() -> Iterator[int]:
    """Yield the reference corpus, string by string."""
    for string in REFERENCE_STRINGS:
        yield from string


def parse_workload(text: str) -> list[int]:
    """
    Parse logical addresses separated by whitespace or commas.

    Text after '#' is a comment. Negative values are kept so
    invalid requests can be replayed.

    Raises:
        ValueError: If a token is not an integer
    """
    addresses = []
    for line in text.splitlines():
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        for token in _SEPARATORS.split(line):
            if token:
                addresses.append(int(token))
    return addresses


def load_workload(path: Path | str) -> list[int]:
    """Read a workload file."""
    return parse_workload(Path(path).read_text())
