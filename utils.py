# utils.py

import re

from engine import InvalidConfiguration, ReplacementPolicy

# Defaults shared by the web app and the console runner
DEFAULT_FRAME_COUNT = 3
MAX_FRAME_COUNT = 32
DEFAULT_REFERENCE_STRING = "7,0,1,2,0,3,0,4,2,3,0,3,2"
POLICY_CHOICES = {1: ReplacementPolicy.FIFO, 2: ReplacementPolicy.OPT, 3: ReplacementPolicy.LRU}

EMPTY_SLOT = "-"


def get_color(hit):
    """Return a color for hit/fault cells."""
    if hit:
        return "#b7e4c7"  # light green
    return "#f4a6a6"  # light red


def parse_reference_string(text):
    """
    Parse page numbers separated by commas and/or whitespace.

    Raises InvalidConfiguration on anything that is not an integer.
    """
    tokens = [t for t in re.split(r"[,\s]+", text.strip()) if t != ""]
    pages = []
    for t in tokens:
        try:
            pages.append(int(t))
        except ValueError:
            raise InvalidConfiguration(f"Not a page number: {t!r}") from None
    return pages


def format_frames(frames):
    """Render a frame snapshot as ``[1 | 2 | -]``."""
    return "[" + " | ".join(EMPTY_SLOT if p is None else str(p) for p in frames) + "]"
