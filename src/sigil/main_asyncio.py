"""
main_asyncio.py - Application entry point for sigil
---------------------------------------------------

Responsible for:
- loading configuration and configuring the logger
- building identifier source, display and pattern engine
- running the render loop
- graceful shutdown on Ctrl+C / SIGTERM (display blanked, reader closed)
"""

import sys

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX (important for Raspberry Pi)
# ---------------------------------------------------------------------------

# Set UTF-8 encoding for output BEFORE any output (fixes Unicode symbol rendering)
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and sys.stderr.encoding != 'UTF-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import argparse
import asyncio
import signal
from dataclasses import replace
from typing import List, Optional

from sigil import __version__
from sigil.engine.pattern_engine import PatternEngine
from sigil.hardware.factory import create_grid_display, create_identifier_source
from sigil.hardware.reader.scripted_reader import pinned_source
from sigil.managers.config_manager import ConfigManager
from sigil.models.enums import DisplayType, LogLevel, LogCategory
from sigil.models.errors import IdentifierError
from sigil.models.identifier import Identifier
from sigil.runtime.pattern_runtime import PatternRuntime
from sigil.utils.enum_helper import EnumHelper
from sigil.utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sigil",
        description="Render an animated symmetric pattern from an NFC tag identifier",
    )
    parser.add_argument("--config", help="Path to config.yaml (default: packaged config)")
    parser.add_argument(
        "--display",
        choices=EnumHelper.list_names(DisplayType, lowercase=True),
        help="Override display type",
    )
    parser.add_argument("--identifier", metavar="HEX", help="Pin one identifier, e.g. 04:1A:2B:3C:05:10:07")
    parser.add_argument("--frames", type=int, metavar="N", help="Stop after N frames")
    parser.add_argument(
        "--log-level",
        choices=EnumHelper.list_names(LogLevel, lowercase=True),
        help="Override log level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# ---------------------------------------------------------------------------
# MAIN
# ---------------------------------------------------------------------------

async def run(args: argparse.Namespace) -> int:
    config = ConfigManager(args.config).load()

    display_config = config.display
    if args.display:
        display_config = replace(display_config, type=EnumHelper.to_enum(DisplayType, args.display))

    # The terminal display owns stdout
    level = EnumHelper.to_enum(LogLevel, args.log_level) if args.log_level else config.logging.level
    log_stream = sys.stderr if display_config.type is DisplayType.TERMINAL else None
    configure_logger(level, config.logging.colors, stream=log_stream)

    if args.identifier:
        try:
            identifier = Identifier.from_hex(args.identifier)
        except IdentifierError as ex:
            log.error("Invalid --identifier", error=str(ex))
            return 2
        source = pinned_source(identifier)
    else:
        source = create_identifier_source(config.reader)

    display = create_grid_display(display_config)
    engine = PatternEngine(error_color=config.error_color)
    runtime = PatternRuntime(
        engine,
        source,
        display,
        fps=config.fps,
        poll_interval_ms=config.reader.poll_interval_ms,
    )

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, runtime.stop)
        except NotImplementedError:
            # Windows: KeyboardInterrupt still ends asyncio.run()
            pass

    log.info(
        "🏁 sigil started",
        display=type(display).__name__,
        source=type(source).__name__,
        fps=config.fps,
    )

    try:
        await runtime.run(max_frames=args.frames)
    finally:
        runtime.shutdown()
        log.info("👋 sigil shut down cleanly.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
        return 0


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
