import argparse
import os
import shutil
import sys

from .errors import ThemeError
from .export import PALETTE_FORMATS, export_json, format_palette
from .kdl_format import read_theme_family, write_kdl
from .logging import get_logger, setup_logging
from .migrate import generate_kdl
from .schema import read_json_theme_family
from .zed import generate_json

logger = get_logger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="zed-theme-compiler",
        description=(
            "Generate Zed themes from a KDL format that allows naming colors, "
            "reusing components and sharing a common base between variants"
        ),
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR). Defaults to $ZED_THEME_LOG or INFO.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser(
        "generate", help="Generate a theme family JSON file from a KDL file"
    )
    generate.add_argument("infile", help="Path to the KDL theme family")
    generate.add_argument(
        "--output", "-o",
        metavar="FILE",
        default=None,
        help="Output JSON file (default: the input path with a .json extension)",
    )

    install = subparsers.add_parser(
        "install", help="Generate a theme family JSON file and copy it to an install location"
    )
    install.add_argument("infile", help="Path to the KDL theme family")
    install.add_argument(
        "--output", "-o",
        metavar="FILE",
        default=None,
        help="Output JSON file (default: the input path with a .json extension)",
    )
    install.add_argument(
        "--install-location", "-i",
        metavar="FILE",
        required=True,
        help="Where to copy the generated theme, e.g. ~/.config/zed/themes/my-theme.json",
    )

    migrate = subparsers.add_parser(
        "migrate",
        help="Convert an existing JSON theme family into the KDL format, naming its colors",
    )
    migrate.add_argument("infile", help="Path to the Zed theme JSON file")
    migrate.add_argument(
        "--output", "-o",
        metavar="FILE",
        default=None,
        help="Output KDL file (default: the input path with a .kdl extension)",
    )

    export_palette = subparsers.add_parser(
        "export-palette", help="Print the resolved palette of a KDL theme family"
    )
    export_palette.add_argument("infile", help="Path to the KDL theme family")
    export_palette.add_argument("format", choices=PALETTE_FORMATS, help="Output format")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    commands = {
        "generate": _run_generate,
        "install": _run_install,
        "migrate": _run_migrate,
        "export-palette": _run_export_palette,
    }
    try:
        commands[args.command](args)
    except (ThemeError, OSError) as e:
        logger.error(f"Failed to {args.command} {args.infile}: {e}")
        return 1
    return 0


def _default_output(infile, extension):
    return os.path.splitext(infile)[0] + extension


def _ensure_parent(path):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _generate(infile, output):
    logger.debug(f"Reading KDL data from {infile}")
    family = read_theme_family(infile)
    flat_family = generate_json(family)

    logger.debug(f"Writing JSON data to {output}")
    _ensure_parent(output)
    export_json(flat_family, output)
    return flat_family


def _run_generate(args):
    """Generate a Zed theme JSON file from a KDL file."""
    output = args.output or _default_output(args.infile, ".json")
    flat_family = _generate(args.infile, output)

    print("=" * 60)
    print("Exported:")
    print(f"  - {output} (contains {', '.join(repr(t.name) for t in flat_family.themes)})")
    print("=" * 60)


def _run_install(args):
    """Generate, then copy the theme to its install location."""
    output = args.output or _default_output(args.infile, ".json")
    _generate(args.infile, output)

    _ensure_parent(args.install_location)
    shutil.copy(output, args.install_location)

    print("=" * 60)
    print("Installed:")
    print(f"  - {output} -> {args.install_location}")
    print("=" * 60)


def _run_migrate(args):
    """Convert a Zed theme JSON file into the KDL format."""
    output = args.output or _default_output(args.infile, ".kdl")

    flat_family = read_json_theme_family(args.infile)
    family = generate_kdl(flat_family)

    _ensure_parent(output)
    write_kdl(family, output)

    print("=" * 60)
    print("Exported:")
    print(f"  - {output}")
    print(f"\nPalette: {len(family.palette)} colors")
    if family.common is not None:
        print("Shared entries moved into `common`")
    print("=" * 60)


def _run_export_palette(args):
    """Print the resolved palette of a KDL file."""
    logger.debug(f"Reading KDL data from {args.infile}")
    family = read_theme_family(args.infile)
    resolved = family.palette.resolve()
    print(format_palette(resolved, args.format))


if __name__ == "__main__":
    sys.exit(main())
