import os
import stat
from typing import List, Optional, TextIO

END_MARKER = "END"


def read_multiline_prompt(stream: TextIO) -> str:
    """
    Read prompt lines until EOF (Ctrl+D) or a line containing only END.
    Returns the collected text with surrounding whitespace stripped.
    """
    lines = []
    while True:
        line = stream.readline()
        if not line:
            break
        if line.strip() == END_MARKER:
            break
        lines.append(line)
    return "".join(lines).strip()


def stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def stream_is_piped(stream: TextIO) -> bool:
    """
    True when the stream is a pipe or a redirected file. Terminals, sockets
    and character devices are never read. In-memory streams without a file
    descriptor count as piped unless they report a terminal.
    """
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return not stream_is_tty(stream)
    mode = os.fstat(fd).st_mode
    return stat.S_ISFIFO(mode) or stat.S_ISREG(mode)


def read_piped_input(stream: TextIO) -> str:
    """Return everything piped on stdin, or an empty string when nothing is piped."""
    if not stream_is_piped(stream):
        return ""
    return stream.read().strip()


def build_prompt(words: Optional[List[str]], piped: str = "") -> str:
    """Join inline prompt words and append any piped text after a blank line."""
    prompt = " ".join(words or []).strip()
    if piped:
        prompt = f"{prompt}\n\n{piped}" if prompt else piped
    return prompt
