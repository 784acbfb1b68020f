"""css-colour — Build RGB(A)/HSL(A) colours and print them as CSS values.

Usage: css-colour <command> <values...> [options]

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, css-colour looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from css_colour.core.config import Settings, load_env, load_settings
from css_colour.core.errors import InvalidColourArguments
from css_colour.core.report import format_json, format_text
from css_colour.core.types import HSLColour, RGBColour, rgb
from css_colour.swatch import write_swatch


def _coerce(text: str) -> int | float | str:
    """'255' -> 255, '0.5' -> 0.5, anything else passes through unchanged."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def _add_colour_options(p: argparse.ArgumentParser) -> None:
    p.add_argument('-a', '--alpha', type=float, default=None, help='Override the alpha channel (0-1)')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        "  css-colour rgb '#f00'\n"
        '  css-colour rgb 255 0 0 0.5\n'
        "  css-colour rgb '#0f0' --alpha 0.25 --json\n"
        '  css-colour hsl 210 50 40\n'
        '  css-colour swatch out.png 37 99 235 --size 32\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  CSS_COLOUR_JSON=1          JSON output by default\n'
        '  CSS_COLOUR_SWATCH_SIZE=64  default swatch size in pixels\n'
    )
    parser = argparse.ArgumentParser(
        prog='css-colour',
        description='Build RGB(A)/HSL(A) colours and print them as CSS values.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Colour model or action')

    p = sub.add_parser('rgb', help="RGB colour from '#rgb', '#rrggbb' or R G B [A]")
    p.add_argument('values', nargs='+', help='One hex string, or 3-4 numbers')
    _add_colour_options(p)
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    p = sub.add_parser('hsl', help='HSL colour from H S L [A]')
    p.add_argument('values', nargs='+', help='Hue 0-360, saturation and lightness 0-100, optional alpha 0-1')
    _add_colour_options(p)
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    p = sub.add_parser('swatch', help='Write a solid PNG swatch of an RGB colour')
    p.add_argument('output', help='Path of the PNG to write')
    p.add_argument('values', nargs='+', help='One hex string, or 3-4 numbers')
    _add_colour_options(p)
    p.add_argument('-s', '--size', type=int, default=None, metavar='N', help='Edge length in pixels')

    return parser


def _build_rgb(args: argparse.Namespace) -> RGBColour:
    colour = rgb(*(_coerce(v) for v in args.values))
    if args.alpha is not None:
        colour = colour.alpha(args.alpha)
    return colour


def _build_hsl(args: argparse.Namespace) -> HSLColour:
    values = [_coerce(v) for v in args.values]
    if len(values) not in (3, 4):
        raise InvalidColourArguments(f'Invalid HSLColour arguments: {", ".join(args.values)}')
    colour = HSLColour(*values)
    if args.alpha is not None:
        colour = colour.alpha(args.alpha)
    return colour


def _run(args: argparse.Namespace, settings: Settings) -> None:
    if args.command == 'swatch':
        colour = _build_rgb(args)
        size = args.size if args.size is not None else settings.swatch_size
        write_swatch(colour, args.output, size)
        print(f'css-colour: wrote {size}x{size} swatch {colour} to {args.output}', file=sys.stderr)
        return

    colour = _build_hsl(args) if args.command == 'hsl' else _build_rgb(args)
    if args.json or settings.json_output:
        print(format_json(colour))
    else:
        print(format_text(colour))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'css-colour: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # ColourError, ConfigError and bad swatch sizes are ValueErrors; an unwritable swatch path is an OSError
    try:
        settings = load_settings()
        _run(args, settings)
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
