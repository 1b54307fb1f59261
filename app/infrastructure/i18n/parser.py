"""Parser for the line-oriented locale file format.

Each data line is ``key = value``. Blank lines and lines starting with ``#``
are ignored. Values run to the end of the line; there is no escaping.
"""

import io
from typing import BinaryIO, Dict, Iterable, Optional

from infrastructure.i18n.exceptions import MalformedLocaleFileError

COMMENT_PREFIX = "#"
SEPARATOR = "="
ENCODING = "utf-8-sig"


def parse_lines(lines: Iterable[str], source: Optional[str] = None) -> Dict[str, str]:
    """Parse locale lines into a translation table.

    Args:
        lines: Lines of a locale file, with or without trailing newlines.
        source: Resource name used in error messages.

    Returns:
        Dict mapping translation key to template.

    Raises:
        MalformedLocaleFileError: If a data line has no '=' separator or a
            key appears twice.
    """
    table: Dict[str, str] = {}
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        key, separator, value = line.partition(SEPARATOR)
        if not separator:
            raise MalformedLocaleFileError(
                f"missing '{SEPARATOR}' separator in line {stripped!r}",
                source=source,
                line_number=line_number,
            )

        key = key.strip()
        if key in table:
            raise MalformedLocaleFileError(
                f"duplicate key '{key}'",
                source=source,
                line_number=line_number,
            )
        table[key] = value.strip()

    return table


def parse_stream(stream: BinaryIO, source: Optional[str] = None) -> Dict[str, str]:
    """Decode a binary stream as UTF-8 and parse it.

    The stream is left open; closing it is the caller's job.

    Args:
        stream: Readable binary stream.
        source: Resource name used in error messages.

    Returns:
        Dict mapping translation key to template.

    Raises:
        MalformedLocaleFileError: If the stream is not valid UTF-8 or a line
            is malformed.
    """
    reader = io.TextIOWrapper(stream, encoding=ENCODING, newline=None)
    try:
        return parse_lines(reader, source=source)
    except UnicodeDecodeError as e:
        raise MalformedLocaleFileError(f"invalid UTF-8: {e}", source=source) from e
    finally:
        reader.detach()
