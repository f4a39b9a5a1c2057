"""
Line splitting for .sii definition files.

Definition files come from several toolchains, so both CRLF and LF endings
occur. The convention is detected once per file: CRLF wins whenever the text
contains it, so the LF inside each CRLF pair is never split on separately.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CRLF = "\r\n"
LF = "\n"
BOM = "\ufeff"


def decode_bytes(raw: bytes) -> str:
    """
    Decode file bytes as UTF-8, replacing undecodable bytes.

    Invalid sequences become U+FFFD instead of aborting the parse. A leading
    byte order mark is dropped.

    Args:
        raw: File contents

    Returns:
        Decoded text
    """
    text = raw.decode("utf-8", errors="replace")
    if text.startswith(BOM):
        text = text[len(BOM) :]
    return text


def split_lines(text: str) -> list[str]:
    """
    Split text into lines using the detected line-ending convention.

    Text without any line terminator (for example a single-line file) yields
    no lines at all, the same as an unreadable file.

    Args:
        text: Decoded file contents

    Returns:
        Lines without terminators, in file order
    """
    if CRLF in text:
        return text.split(CRLF)
    if LF in text:
        return text.split(LF)
    return []


def read_lines(path: str | Path) -> list[str]:
    """
    Read a definition file and split it into lines.

    Args:
        path: Path to the definition file

    Returns:
        Lines of the file, or an empty list if it could not be read
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        logger.debug(f"Failed to read file {path}: {e}")
        return []
    return split_lines(decode_bytes(raw))
