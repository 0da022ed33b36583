"""Command-line entry point for aicommit.

This module handles:
- Flag parsing (help, version, default config bootstrap)
- Logging setup with secret sanitization
- Configuration loading and provider resolution
- Adapter instantiation and the single pipeline run
"""

import argparse
import asyncio
import sys
from pathlib import Path

import structlog

from aicommit._version import __version__
from aicommit.utils.errors import AICommitError, ConfigError
from aicommit.utils.logging import LogEventNames, LogFormat, LogLevel, configure_logging

log = structlog.get_logger()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument namespace
    """
    from aicommit.config.loader import default_config_path

    parser = argparse.ArgumentParser(
        prog="aicommit",
        description="Suggest commit messages for the staged changes and copy one to the clipboard",
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version {__version__}",
    )

    parser.add_argument(
        "--copy-default-config",
        action="store_true",
        help="Write the default configuration file and exit",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=default_config_path(),
        help="Path to configuration file (default: ~/.aicommit/config.json)",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        default=None,
        help="Log output format (default: console)",
    )

    return parser.parse_args(argv)


async def run_assistant(
    config_path: Path,
    debug: bool = False,
    log_format: str | None = None,
) -> int:
    """Load configuration and run the pipeline once.

    Args:
        config_path: Path to configuration file
        debug: Keep debug logging regardless of the configured level
        log_format: Log format chosen on the command line, if any

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    from aicommit.adapters.clipboard.system import SystemClipboard
    from aicommit.adapters.llm.local_server import LocalServerHook
    from aicommit.adapters.vcs.git import GitCli
    from aicommit.config.loader import ensure_config, resolve_active_provider
    from aicommit.core.assistant import CommitAssistant
    from aicommit.core.completion_client import CompletionClient
    from aicommit.core.selection import Console

    console = Console()
    errors = Console(sys.stderr)

    try:
        config = ensure_config(config_path)

        configure_logging(
            level=LogLevel.DEBUG if debug else config.logging.level,
            log_format=log_format or config.logging.format,
        )

        provider = resolve_active_provider(config)
        log.debug(LogEventNames.PROVIDER_RESOLVED, provider=provider.name, model=provider.model)

        async with CompletionClient() as client:
            assistant = CommitAssistant(
                provider=provider,
                retry=config.retry,
                vcs=GitCli(),
                client=client,
                clipboard=SystemClipboard(),
                console=console,
                hook=LocalServerHook(),
            )
            outcome = await assistant.run()

        log.debug("run_finished", outcome=outcome.value)
        return 0

    except ConfigError as e:
        errors.warn(str(e))
        return 1
    except AICommitError as e:
        log.debug("run_failed", error_type=type(e).__name__)
        errors.warn(f"❌ {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    configure_logging(
        level=LogLevel.DEBUG if args.debug else LogLevel.WARNING,
        log_format=args.log_format or LogFormat.CONSOLE,
    )

    if args.copy_default_config:
        from aicommit.config.loader import copy_default_config

        try:
            path = copy_default_config(args.config)
        except OSError as e:
            print(f"Could not write default config to {args.config}: {e}", file=sys.stderr)
            return 1
        print(f"Default configuration written to {path}")
        return 0

    try:
        return asyncio.run(run_assistant(args.config, args.debug, args.log_format))
    except KeyboardInterrupt:
        log.info("interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
