"""
Decoder for the legacy packed coordinate format.

Each point is a group of seven symbols from a base-62 alphabet
(A-Z = 0-25, a-z = 26-51, 0-9 = 52-61):

    w0 w1 w2 w3 w4 w5 w6 [extra1 [extra2]]

w1-w3 are latitude degrees, minutes and seconds, w4-w6 the same for
longitude. w0 holds flags:

    bit 0   extension symbols follow
    bit 1   latitude is South
    bit 2   add 60 degrees to latitude
    bit 3   longitude is West
    bit 4-5 add 60 degrees times this value to longitude

With the extension flag, extra1 >= 60 highlights the point; otherwise extra1
and extra2 describe a hold (course = 6 * extra1, +3 if bit 5 of extra2; bit 4
of extra2 is left turns; bits 0-3 are the leg length in nm).

Between groups, '-' is a discontinuity and '(TEXT)' labels the previous
point. A leading '@' is ignored.
"""

import logging
from typing import Optional, Tuple

from .base import RouteSource
from ..errors import MalformedInputError
from ..models.route import Route, Node, Hold

logger = logging.getLogger(__name__)

GROUP_SIZE = 7
HIGHLIGHT_THRESHOLD = 60


def decode_symbol(char: str) -> int:
    """
    Decode one alphabet symbol.

    Returns:
        The symbol value (0-61), or -1 if the character is not in the alphabet
    """
    if 'A' <= char <= 'Z':
        return ord(char) - ord('A')
    if 'a' <= char <= 'z':
        return 26 + ord(char) - ord('a')
    if '0' <= char <= '9':
        return 52 + ord(char) - ord('0')
    return -1


class CoordsSource(RouteSource):
    """Plot a string of coordinates encoded in the legacy format."""

    def help_arguments(self) -> str:
        return "<STRING>"

    def help_description(self) -> str:
        return "Plot a string of coordinates, encoded in the legacy format"

    def parse(self, text: str) -> Tuple[Optional[str], Route]:
        name, body = self._split_name(text)
        if body.startswith('@'):
            body = body[1:]
        return name, self.decode(body)

    def _split_name(self, text: str) -> Tuple[Optional[str], str]:
        """Separate an optional leading route name from the encoded body."""
        text = text.lstrip(' ')
        tokens = text.split()
        if not tokens:
            raise MalformedInputError("missing string")

        if len(tokens) > 1 and '(' not in tokens[0]:
            name = tokens[0]
            return name, text[len(name):].lstrip(' ')
        return None, text

    def decode(self, body: str) -> Route:
        """
        Decode the body of a legacy coordinate string.

        Raises:
            MalformedInputError: On the first invalid or missing character
        """
        route = Route()
        i = 0

        while i < len(body):
            char = body[i]

            if char == '(' and route:
                if route[-1].is_discontinuity():
                    raise MalformedInputError("label without a point", token=body[i:])
                end = self._find_closing_bracket(body, i)
                route[-1].label = body[i + 1:end]
                i = end + 1
                continue

            if char == '-':
                route.append(Node.discontinuity())
                i += 1
                continue

            if decode_symbol(char) < 0:
                raise MalformedInputError("invalid structural character", token=char)

            node, i = self._decode_group(body, i)
            route.append(node)

        logger.debug(f"Decoded {len(route)} nodes from legacy coordinate string")
        return route

    def _find_closing_bracket(self, body: str, start: int) -> int:
        """Index of the ')' matching the '(' at `start`, honouring nesting."""
        depth = 0
        for i in range(start, len(body)):
            if body[i] == '(':
                depth += 1
            elif body[i] == ')':
                depth -= 1
                if depth == 0:
                    return i
        raise MalformedInputError("missing closing bracket", token=body[start:])

    def _read_symbol(self, body: str, index: int) -> int:
        value = decode_symbol(body[index]) if index < len(body) else -1
        if value < 0:
            raise MalformedInputError("invalid character", token=body[index] if index < len(body) else None)
        return value

    def _decode_group(self, body: str, start: int) -> Tuple[Node, int]:
        """
        Decode one point group starting at `start`.

        Returns:
            Tuple of (node, index just past the group)
        """
        word = [self._read_symbol(body, start + k) for k in range(GROUP_SIZE)]
        i = start + GROUP_SIZE

        lat = word[1] + (word[2] + word[3] / 60) / 60
        lon = word[4] + (word[5] + word[6] / 60) / 60

        flags = word[0]
        lat += 60.0 * ((flags >> 2) & 0b01)
        lon += 60.0 * ((flags >> 4) & 0b11)

        if flags & 0b0010:
            lat = -lat
        if flags & 0b1000:
            lon = -lon

        node = Node(lat, lon)

        if flags & 1:
            extra1 = self._read_symbol(body, i)
            i += 1
            if extra1 >= HIGHLIGHT_THRESHOLD:
                node.highlight = True
            else:
                extra2 = self._read_symbol(body, i)
                i += 1
                node.hold = Hold(
                    length=float(extra2 & 0b1111),
                    course=6.0 * extra1 + (3.0 if extra2 >> 5 else 0.0),
                    left_turns=((extra2 >> 4) & 1) == 1,
                )
                if node.hold.length == 0:
                    logger.warning(f"Zero-length hold at ({lat}, {lon})")

        return node, i
