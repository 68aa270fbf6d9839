#!/usr/bin/env python3
"""
CLI script to run update checks manually.

Usage:
    python run_check.py --current-version 1.2.0              # Run one check cycle
    python run_check.py --current-version 1.2.0 --schedule   # Check every interval
    python run_check.py --current-version 1.2.0 --async      # Check on a worker thread
    python run_check.py --list                               # List configured providers
    python run_check.py --test-connection                    # Probe every provider
"""

import argparse
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.events import EventBus
from core.registry import ProviderRegistry
from core.scheduler import UpdateScheduler
from models.events import UpdateCompleteEvent, UpdateFailedEvent
from models.exceptions import ConfigurationError
from utils.logger import setup_logging, setup_logging_from_settings


def print_event(event) -> None:
    print(event)


def main():
    parser = argparse.ArgumentParser(
        description='Version Sentinel - Release Update Checker'
    )
    parser.add_argument(
        '--current-version',
        type=str,
        help='Version currently installed (required unless --list or --test-connection)'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to updater.yaml (default: config/updater.yaml)'
    )
    parser.add_argument(
        '--schedule',
        action='store_true',
        help='Keep checking every configured interval on this thread'
    )
    parser.add_argument(
        '--async',
        dest='run_async',
        action='store_true',
        help='Keep checking every configured interval on a worker thread'
    )
    parser.add_argument(
        '--list',
        action='store_true',
        help='List all configured providers'
    )
    parser.add_argument(
        '--test-connection',
        action='store_true',
        help='Test the connection to every configured provider'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args()

    registry = ProviderRegistry(args.config)

    if args.verbose:
        setup_logging(level='DEBUG')
    else:
        setup_logging_from_settings(registry.get_settings())

    if args.list:
        print("\nConfigured Providers:")
        print("-" * 50)
        for provider in registry.get_providers():
            print(f"  {provider.get_provider_name()}")
            print(f"    Adapter: {provider.get_provider_author()} v{provider.get_provider_version()}")
            print(f"    URL:     {provider.remote_url}")
            print()
        return 0

    if args.test_connection:
        for provider in registry.get_providers():
            status = provider.test_connection()
            print(f"  {provider.get_provider_name():10} {status if status is not None else 'unreachable'}")
        return 0

    if not args.current_version:
        parser.error('--current-version is required')

    with EventBus() as bus:
        bus.subscribe(UpdateCompleteEvent, print_event)
        bus.subscribe(UpdateFailedEvent, print_event)

        try:
            updater = registry.create_updater_builder(
                args.current_version,
                publish=bus.publish
            ).build()
        except ConfigurationError as e:
            print(f"Configuration error: {e}")
            return 2

        scheduler = UpdateScheduler(updater)

        if args.run_async:
            if scheduler.schedule_async() is None:
                print("Update checks are disabled")
                return 0
            try:
                while scheduler.is_running:
                    scheduler.wait(1.0)
            except KeyboardInterrupt:
                scheduler.stop(timeout=5)
        elif args.schedule:
            try:
                scheduler.schedule()
            except KeyboardInterrupt:
                scheduler.stop()
        else:
            result = scheduler.run_once()
            print(f"\nResult: {result.name}")
            artifact = updater.latest_artifact
            if artifact is not None:
                print(f"  Current: {args.current_version}")
                print(f"  Latest:  {artifact}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
