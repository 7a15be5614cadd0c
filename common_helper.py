import math
import re
from pathlib import Path

from label_config import LOGO_FILENAME


def clean_year(y):
    """Return the release year as text, or None when it is blank.

    Spreadsheet-style sources hand numeric years back as floats (1999.0) and
    empty cells as NaN, and a CSV round-trip turns those floats into text such
    as "1999.0"; all of them are folded into plain text here.
    """
    if y is None:
        return None

    if isinstance(y, float):
        if math.isnan(y):
            return None
        if y.is_integer():
            return str(int(y))

    text = str(y).strip()
    if re.fullmatch(r"\d+\.0+", text):
        text = text.split(".")[0]
    return text or None


def clean_text(value):
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def get_downloads_dir():
    return Path.home() / "Downloads"


def get_logo_path():
    return get_downloads_dir() / LOGO_FILENAME
