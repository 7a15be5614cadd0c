# md_to_label.py
import argparse
import sys

from common_helper import get_logo_path
from label_config import MEDIA, DEFAULT_MEDIA, get_media
from label_errors import LabelError
from label_image_manager import generate_label_image, load_label_font
from label_source import collect_labels
from sheet_manager import assemble_sheet, check_sheet_fit, save_sheet


def build_parser():
    p = argparse.ArgumentParser(
        description="Generate a printable MiniDisc label sheet from cover art and text"
    )
    p.add_argument("-c", "--cover", help="cover art image")
    p.add_argument("-t", "--title", help="album title")
    p.add_argument("-a", "--artist", help="album artist")
    p.add_argument("-r", "--release-year", help="release year (optional third line)")
    p.add_argument("-o", "--output", required=True, help="output image path")
    p.add_argument(
        "-l", "--layout",
        help="TOML or CSV file declaring several labels; --cover/--title/--artist/--release-year are ignored",
    )
    p.add_argument(
        "-m", "--media",
        choices=sorted(MEDIA),
        default=DEFAULT_MEDIA,
        help=f"label and sheet size preset (default: {DEFAULT_MEDIA})",
    )
    p.add_argument("-f", "--font", help="TTF font to use instead of the bundled bold sans face")
    return p


def generate_sheet(args, print_func=print):
    spec = get_media(args.media)

    labels = collect_labels(
        layout=args.layout,
        title=args.title,
        artist=args.artist,
        cover=args.cover,
        release_year=args.release_year,
    )
    check_sheet_fit(spec, len(labels))

    font = load_label_font(args.font)
    logo_path = get_logo_path()

    images = []
    for label in labels:
        year = f" ({label.release_year})" if label.release_year else ""
        print_func(f"Composing: {label.artist} - {label.title}{year}")
        images.append(generate_label_image(label, logo_path, font, spec))

    sheet = assemble_sheet(images, spec)
    save_sheet(sheet, args.output, spec)

    print_func(f"Generated: {args.output}")
    return args.output


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        generate_sheet(args)
    except LabelError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
