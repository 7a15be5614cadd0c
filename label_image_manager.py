from PIL import Image, ImageDraw, ImageFont

from label_config import (
    ZINK_2X3,
    PADDING,
    LINE_PADDING,
    LOGO_SIZE,
    TEXT_SIZE,
    TEXT_COLOR,
    LABEL_BACKGROUND,
    FONT_PATH,
)
from label_errors import ImageLoadError, FontLoadError


def load_label_font(path=None, size=TEXT_SIZE):
    """Load the bold sans face used for every text line.

    Defaults to the font bundled next to the modules; ``path`` overrides it.
    """
    path = path or FONT_PATH
    try:
        return ImageFont.truetype(str(path), size)
    except OSError as e:
        raise FontLoadError(f"Cannot load font {path}: {e}") from e


def load_image(path):
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except OSError as e:
        raise ImageLoadError(f"Cannot load image {path}: {e}") from e


def text_line_positions(spec=ZINK_2X3, has_year=True):
    # Cover is a square of side label_width, text goes in the band below it
    text_area_height = spec.label_height_px - spec.label_width_px
    line_height = text_area_height // 3

    first_line_y = spec.label_width_px + LINE_PADDING
    second_line_y = first_line_y + TEXT_SIZE + LINE_PADDING
    third_line_y = second_line_y + line_height + LINE_PADDING

    positions = [(PADDING, first_line_y), (PADDING, second_line_y)]
    if has_year:
        positions.append((PADDING, third_line_y))
    return positions


def logo_position(spec=ZINK_2X3):
    return (
        spec.label_width_px - PADDING // 2 - LOGO_SIZE,
        spec.label_height_px - PADDING // 2 - LOGO_SIZE,
    )


def overlay_logo(label, logo, spec=ZINK_2X3):
    md_logo = logo.convert("RGBA").resize(
        (LOGO_SIZE, LOGO_SIZE), Image.Resampling.BICUBIC
    )
    label.paste(md_logo, logo_position(spec), md_logo)


def overlay_text(label, title, artist, release_year, font, spec=ZINK_2X3):
    draw = ImageDraw.Draw(label)

    lines = [title, artist]
    if release_year:
        lines.append(release_year)

    positions = text_line_positions(spec, has_year=bool(release_year))
    for (x, y), text in zip(positions, lines):
        draw.text((x, y), text, fill=TEXT_COLOR, font=font)


def compose_label(cover, logo, title, artist, release_year, font, spec=ZINK_2X3):
    label_w = spec.label_width_px
    label_h = spec.label_height_px

    label = Image.new("RGB", (label_w, label_h), LABEL_BACKGROUND)

    # COVER (forced square, top left)
    cover_img = cover.convert("RGB").resize((label_w, label_w), Image.Resampling.BILINEAR)
    label.paste(cover_img, (0, 0))

    # LOGO (bottom right)
    overlay_logo(label, logo, spec)

    # TITLE / ARTIST / YEAR
    overlay_text(label, title, artist, release_year, font, spec)

    return label


def generate_label_image(descriptor, logo_path, font, spec=ZINK_2X3):
    cover = load_image(descriptor.cover_path)
    logo = load_image(logo_path)

    return compose_label(
        cover,
        logo,
        descriptor.title,
        descriptor.artist,
        descriptor.release_year,
        font,
        spec,
    )
