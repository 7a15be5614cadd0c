# sheet_manager.py
from PIL import Image

from label_config import ZINK_2X3, SHEET_MARGIN, SHEET_BACKGROUND
from label_errors import IoError, SheetOverflowError


def label_offset_x(pos, label_width_px, margin=SHEET_MARGIN):
    return pos * label_width_px + margin * (pos + 2)


def label_offsets(count, spec=ZINK_2X3, margin=SHEET_MARGIN):
    return [(label_offset_x(pos, spec.label_width_px, margin), 0) for pos in range(count)]


def check_sheet_fit(spec, count, margin=SHEET_MARGIN):
    if count < 1:
        raise SheetOverflowError("No labels to place on the sheet")

    if spec.label_height_px > spec.sheet_height_px:
        raise SheetOverflowError(
            f"Label height {spec.label_height_px}px exceeds sheet height {spec.sheet_height_px}px"
        )

    right_edge = label_offset_x(count - 1, spec.label_width_px, margin) + spec.label_width_px
    if right_edge > spec.sheet_width_px:
        raise SheetOverflowError(
            f"{count} label(s) need {right_edge}px but the sheet is {spec.sheet_width_px}px wide"
        )


def new_sheet(spec=ZINK_2X3):
    return Image.new("RGB", (spec.sheet_width_px, spec.sheet_height_px), SHEET_BACKGROUND)


def assemble_sheet(labels, spec=ZINK_2X3, margin=SHEET_MARGIN):
    """Paste composed labels left-to-right onto a fresh sheet.

    Anything past the sheet edge is clipped by ``Image.paste``; callers that
    care run ``check_sheet_fit`` first.
    """
    labels = list(labels)
    sheet = new_sheet(spec)

    for label, offset in zip(labels, label_offsets(len(labels), spec, margin)):
        sheet.paste(label, offset)

    return sheet


def save_sheet(sheet, out_path, spec=ZINK_2X3):
    try:
        sheet.save(out_path, dpi=(spec.dpi, spec.dpi))
    except (OSError, ValueError) as e:
        raise IoError(f"Cannot write {out_path}: {e}") from e
    return out_path
