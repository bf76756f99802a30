"""Input parsing and validation for the algorithm commands.

Graph input is whitespace delimited: a header "N E" followed by E pairs
"tail head" of 0-indexed node ids. String-pair input is two raw lines of text.
All validation happens here; the algorithms assume well-formed input.
"""

import logging
from pathlib import Path
import sys

from classic_algos.analysis.graph_types import GraphInput

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


class InputValidationError(ValueError):
    """Raised when input text does not describe a valid problem instance."""


def _parse_int(token: str, line_number: int) -> int:
    try:
        return int(token)
    except ValueError as e:
        logger.warning("Non-integer token '%s' on line %d", token, line_number)
        raise InputValidationError(f"Line {line_number}: expected an integer, got '{token}'") from e


def parse_graph(text: str) -> GraphInput:
    """Parse a graph from "N E" followed by E "tail head" lines.

    Tokens are read as a whitespace separated stream, so line breaks between
    pairs are not significant. Line numbers in error messages count from 1.

    Args:
        text: Raw input text.

    Returns:
        Validated GraphInput.

    Raises:
        InputValidationError: If the header is missing or negative, a token is
            not an integer, the number of pairs differs from E, or a node id is
            outside 0..N-1.
    """
    tokens: list[tuple[str, int]] = [
        (token, line_number)
        for line_number, line in enumerate(text.splitlines(), start=1)
        for token in line.split()
    ]

    if len(tokens) < 2:
        logger.warning("Graph input is missing the 'N E' header")
        raise InputValidationError("Missing header: expected 'N E' (node and edge counts)")

    node_count = _parse_int(*tokens[0])
    edge_count = _parse_int(*tokens[1])
    if node_count < 0 or edge_count < 0:
        logger.warning("Negative counts in header: N=%d, E=%d", node_count, edge_count)
        raise InputValidationError(
            f"Node and edge counts must be non-negative, got N={node_count}, E={edge_count}"
        )

    body = tokens[2:]
    if len(body) != 2 * edge_count:
        logger.warning("Expected %d edge tokens, found %d", 2 * edge_count, len(body))
        raise InputValidationError(
            f"Expected {edge_count} edges ({2 * edge_count} ids), found {len(body)} ids"
        )

    edges: list[tuple[int, int]] = []
    for k in range(0, len(body), 2):
        tail_token, tail_line = body[k]
        head_token, head_line = body[k + 1]
        tail = _parse_int(tail_token, tail_line)
        head = _parse_int(head_token, head_line)
        for node, line_number in ((tail, tail_line), (head, head_line)):
            if not 0 <= node < node_count:
                logger.warning("Node id %d out of range on line %d", node, line_number)
                raise InputValidationError(
                    f"Line {line_number}: node id {node} out of range 0..{node_count - 1}"
                )
        edges.append((tail, head))

    return GraphInput(node_count=node_count, edges=tuple(edges))


def parse_string_pair(text: str) -> tuple[str, str]:
    """Parse the two strings to align from the first two lines of text.

    Lines end at a line feed, and a carriage return before it is dropped.
    Every other character, including leading and trailing spaces and form
    feeds, is kept. Lines after the second are ignored.

    Raises:
        InputValidationError: If fewer than two lines are present.
    """
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    if len(lines) < 2:
        logger.warning("String-pair input has %d line(s), expected 2", len(lines))
        raise InputValidationError(f"Expected two lines of input, found {len(lines)}")
    return lines[0], lines[1]


def read_input(path: str | Path | None = None) -> str:
    """Read raw input text from a file, or from stdin when path is None or "-".

    Raises:
        FileNotFoundError: If path does not exist.
    """
    if path is None or str(path) == STDIN_PATH:
        return sys.stdin.read()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    with open(path, "r") as f:
        return f.read()
