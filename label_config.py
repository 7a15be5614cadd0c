# label_config.py
from dataclasses import dataclass
from pathlib import Path

# 600 dpi ~= 24 dpmm
DESIRED_DPMM = 24

MM_PER_INCH = 25.4

# Label layout (pixels)
PADDING = 20
LINE_PADDING = PADDING * 2
SHEET_MARGIN = 20

# Logo placement
LOGO_SIZE = 120
LOGO_FILENAME = "md30wiki_color.png"

# Typography
TEXT_SIZE = 60
TEXT_COLOR = "white"
LABEL_BACKGROUND = "black"
SHEET_BACKGROUND = "white"

# Bundled bold sans face (Bitstream Vera license, see label_fonts/)
FONT_PATH = Path(__file__).parent / "label_fonts" / "DejaVuSans-Bold.ttf"


def mm_to_px(mm, dpmm=DESIRED_DPMM):
    return int(mm * dpmm)


@dataclass(frozen=True)
class PhysicalSpec:
    """Label and sheet dimensions in millimeters at a fixed print resolution."""

    label_width: float
    label_height: float
    sheet_width: float
    sheet_height: float
    dpmm: int = DESIRED_DPMM

    def __post_init__(self):
        for name in ("label_width", "label_height", "sheet_width", "sheet_height"):
            if mm_to_px(getattr(self, name), self.dpmm) <= 0:
                raise ValueError(f"{name} must be a positive size, got {getattr(self, name)!r}")

    @property
    def label_width_px(self) -> int:
        return mm_to_px(self.label_width, self.dpmm)

    @property
    def label_height_px(self) -> int:
        return mm_to_px(self.label_height, self.dpmm)

    @property
    def sheet_width_px(self) -> int:
        return mm_to_px(self.sheet_width, self.dpmm)

    @property
    def sheet_height_px(self) -> int:
        return mm_to_px(self.sheet_height, self.dpmm)

    @property
    def dpi(self) -> int:
        return round(self.dpmm * MM_PER_INCH)


# MD labels (on Sony disks) are 53 x 36 mm safely.
# Printable Zink sheets are 2 x 3 inches (50 x 76 mm).
ZINK_2X3 = PhysicalSpec(label_width=36, label_height=53, sheet_width=50, sheet_height=76)

# DYMO LabelWriter 4XL 4x6 landscape
DYMO_4X6 = PhysicalSpec(label_width=36, label_height=53, sheet_width=152, sheet_height=101)

MEDIA = {
    "zink-2x3": ZINK_2X3,
    "dymo-4x6": DYMO_4X6,
}

DEFAULT_MEDIA = "zink-2x3"


def get_media(name):
    return MEDIA[name]
