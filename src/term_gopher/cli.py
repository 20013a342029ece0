"""Command-line interface for the terminal Gopher client."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import yaml

from .config import Config, DEFAULT_CONFIG_PATH, load_config
from .core import parse_address
from .display import TerminalDisplay
from .errors import AddressError
from .transport import SocketTransport
from .client import GopherClient


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Configure logging.

    Logs go to standard error unless a file is given; only warnings are
    shown by default so they do not clutter the browsing screen.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    kwargs = {}
    if log_file:
        kwargs["filename"] = str(Path(log_file).expanduser())
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        **kwargs,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="term-gopher",
        description="term-gopher - Browse Gopherspace from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s gopher.floodgap.com            # Open the root menu on port 70
  %(prog)s sdf.org:70                     # Explicit port
  %(prog)s -c config.yaml localhost:7070  # Use specific config file
""",
    )

    parser.add_argument(
        "address",
        metavar="HOST[:PORT]",
        help="Server to open (default port 70)",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colours",
    )

    return parser.parse_args(argv)


def _load_configuration(path: str | None) -> Config:
    if path:
        return load_config(path)

    default_path = Path(DEFAULT_CONFIG_PATH).expanduser()
    if default_path.exists():
        return load_config(default_path)

    return Config()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = _load_configuration(args.config)
    except FileNotFoundError:
        setup_logging(args.verbose)
        logging.getLogger(__name__).error(f"Config file not found: {args.config}")
        return 1
    except (yaml.YAMLError, OSError, ValueError) as e:
        setup_logging(args.verbose)
        logging.getLogger(__name__).error(f"Cannot read config file: {e}")
        return 1

    setup_logging(args.verbose, config.log_file)
    logger = logging.getLogger(__name__)

    # Override config with command line arguments
    if args.no_color:
        config = replace(config, color=False)

    try:
        address = parse_address(args.address, default_port=config.default_port)
    except AddressError as e:
        logger.error(str(e))
        return 1

    # Create components
    transport = SocketTransport(timeout=config.timeout_seconds, encoding=config.encoding)
    display = TerminalDisplay(styles=config.styles, color=config.color)
    client = GopherClient(transport, display, config)

    logger.info(f"Opening {address}")
    logger.debug(f"  Timeout: {config.timeout_seconds}s")
    logger.debug(f"  Download directory: {config.get_download_path()}")

    client.start(address)
    client.run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
