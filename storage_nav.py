#!/usr/bin/env python3
"""
gcsnav - Browse a Google Cloud Storage bucket from the terminal.

Picks a configuration and a bucket, then hands over to the navigator.
"""

import argparse
import sys
from datetime import datetime

from gcsnav import __version__
from gcsnav.config import (
    GcpConfiguration,
    NavigatorSettings,
    list_configurations,
    write_example_configuration,
)
from gcsnav.core.errors import ConfigurationError
from gcsnav.core.logging import TeeOutput, debug_log
from gcsnav.core.paths import (
    get_configurations_dir,
    get_global_config_dir,
    get_global_configurations_dir,
    get_global_credentials_dir,
    get_global_settings_path,
    get_logs_dir,
)
from gcsnav.nav import NavigationController, select_bucket, select_configuration
from gcsnav.storage import StorageClient
from gcsnav.ui.primitives import Colors, colorize
from gcsnav.ui.widgets import ScreenRenderer


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="gcsnav - Browse and manage a Google Cloud Storage bucket"
    )
    parser.add_argument("--config", metavar="NAME",
                        help="configuration to use (gcp-options-NAME.json)")
    parser.add_argument("--bucket", metavar="NAME",
                        help="bucket to open instead of asking")
    parser.add_argument("--max-items", type=int, metavar="N",
                        help="maximum folder/file entries shown per directory")
    parser.add_argument("--init", action="store_true",
                        help="create the global configuration folders with an example configuration")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def fail(message: str) -> int:
    print(colorize(message, Colors.RED))
    return 1


def init_command() -> int:
    """Create the global configuration layout and an example configuration."""
    renderer = ScreenRenderer()
    config_dir = get_global_config_dir()
    configurations_dir = get_global_configurations_dir()
    credentials_dir = get_global_credentials_dir()

    renderer.show_info("Initializing gcsnav configuration...")
    print(f"Config directory: {config_dir}")

    try:
        configurations_dir.mkdir(parents=True, exist_ok=True)
        credentials_dir.mkdir(parents=True, exist_ok=True)
        example_path = write_example_configuration(configurations_dir)

        settings = NavigatorSettings(get_global_settings_path())
        settings_created = not settings.path.exists()
        if settings_created:
            settings.save()
    except OSError as e:
        return fail(f"Could not initialize {config_dir}: {e}")

    if example_path:
        print(colorize(f"Created: {example_path}", Colors.GREEN))
    else:
        print(colorize("Example config already exists.", Colors.YELLOW))
    if settings_created:
        print(colorize(f"Created: {settings.path}", Colors.GREEN))

    print()
    renderer.show_info("Setup complete!")
    print("\nNext steps:")
    print(f"1. Add your service account JSON key to: {credentials_dir}/")
    print(f"2. Edit configuration files in: {configurations_dir}/")
    print("3. Run: gcsnav")
    return 0


def run(args: argparse.Namespace) -> int:
    """Resolve configuration and bucket, then browse. Returns the exit code."""
    settings = NavigatorSettings.load()
    if args.max_items is not None and not settings.set_max_items(args.max_items):
        return fail(f"--max-items must be a positive number, got {args.max_items}")

    config_name = args.config
    if not config_name:
        names = list_configurations()
        if not names:
            return fail(
                f"No configurations found in {get_configurations_dir()}. "
                "Run 'gcsnav --init' to create an example configuration."
            )
        config_name = select_configuration(names)
        if config_name is None:
            return 0

    configuration = GcpConfiguration.load(config_name)
    debug_log(f"Configuration: {configuration.name} (project {configuration.project_id})")

    storage = StorageClient(configuration)
    renderer = ScreenRenderer()

    bucket = args.bucket
    if not bucket:
        buckets = storage.list_buckets()
        if not buckets:
            return fail("No buckets configured. Add 'buckets' array or 'defaultBucket' to your configuration.")
        bucket = select_bucket(buckets, renderer=renderer)
        if bucket is None:
            return 0

    navigator = NavigationController(
        storage,
        bucket,
        max_items=settings.max_items,
        renderer=renderer,
    )
    navigator.run()
    debug_log(f"Session API calls: {storage.api_calls}")
    return 0


def main(argv=None) -> int:
    """Entry point."""
    args = parse_args(argv)

    if args.init:
        return init_command()

    if not sys.stdin.isatty():
        return fail("gcsnav needs an interactive terminal.")

    # Always log to <global dir>/logs/YYYY-MM-DD.log
    log_path = get_logs_dir() / f"{datetime.now().strftime('%Y-%m-%d')}.log"
    tee = TeeOutput(log_path, version=__version__)
    sys.stdout = tee

    try:
        return run(args)
    except ConfigurationError as e:
        return fail(f"Configuration error: {e}")
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        return 0
    finally:
        sys.stdout = tee.terminal
        tee.close()


if __name__ == "__main__":
    sys.exit(main())
