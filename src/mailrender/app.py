# =============================================================================
# mailrender Command-Line Filter
# =============================================================================
# Reads an email body from a file or stdin, renders it, and writes the
# result to a file or stdout. This is the shape mutt's mailcap expects:
#
#   text/html; mailrender -i %s; copiousoutput
#
# Logging goes to stderr so it never mixes with the rendered body.
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from mailrender import __version__, __app_name__
from mailrender.config import KNOWN_STRATEGIES, Config, ConfigError, print_paths
from mailrender.rendering import RenderEngine, RenderError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Render HTML or plain email bodies as colored terminal text",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-i", "--input",
        type=Path,
        help="Input file (default: stdin)",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "--keep-urls",
        action="store_true",
        help="Keep long URLs and link targets in the output",
    )

    parser.add_argument(
        "--strategy",
        action="append",
        choices=KNOWN_STRATEGIES,
        help="HTML conversion strategy to try (repeatable, overrides config order)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def setup_logging(level: str, debug: bool = False) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=logging.DEBUG if debug else level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_input(path: Path | None) -> str:
    """Read the body from a file, or stdin when no path is given."""
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8", errors="replace")


def write_output(path: Path | None, content: str) -> None:
    """Write the rendered body to a file, or stdout when no path is given."""
    if path is None:
        sys.stdout.write(content)
        return
    path.write_text(content, encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for mailrender.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration and sets up logging
        4. Renders the input and writes the output

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    args = parse_args(argv)

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    try:
        config = Config.load(args.config)
    except ConfigError as e:
        print(f"{__app_name__}: config error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, args.debug)

    if args.strategy:
        config.rendering.strategies = args.strategy
    strip_urls = config.strip_urls and not args.keep_urls

    try:
        content = read_input(args.input)
        engine = RenderEngine(config=config.rendering)
        rendered = engine.render(content, strip_urls=strip_urls)
        write_output(args.output, rendered)
    except RenderError as e:
        print(f"{__app_name__}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.debug("I/O failure", exc_info=True)
        print(f"{__app_name__}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
