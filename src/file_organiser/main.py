"""
File Organiser - Main Entry Point

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

This is the command line entry point. It exposes organizing a folder,
opening the file map, listing the rules and running the web dashboard.

NOTICE: This software is proprietary and confidential. Unauthorized copying,
modification, distribution, or use is strictly prohibited.
See LICENSE.txt for full terms and conditions.

Version: 1.0.0
Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

import argparse
import json
import sys
from typing import List, Optional

from .config import Config
from .core.errors import ConfigError
from .organiser import FileOrganiser, ERROR_PREFIX, expand_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-organiser",
        description="File Organiser - sort a folder's files into category subfolders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s organize ~/Downloads             # Organize with the configured backup setting
  %(prog)s organize ~/Downloads --no-backup # Skip the backup archive
  %(prog)s organize ~/Downloads --dry-run   # Show what would happen
  %(prog)s rules                            # Show the loaded file map
  %(prog)s open-config                      # Edit the file map
  %(prog)s dashboard                        # Run web dashboard
        """
    )

    parser.add_argument(
        '--config',
        metavar='PATH',
        help='Settings file (default: bundled config.json)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    organize = subparsers.add_parser('organize', help='Organize a folder')
    organize.add_argument('path', help='Folder to organize')
    backup = organize.add_mutually_exclusive_group()
    backup.add_argument('--backup', dest='backup', action='store_true', default=None,
                        help='Create a backup archive first')
    backup.add_argument('--no-backup', dest='backup', action='store_false',
                        help='Do not create a backup archive')
    organize.add_argument('--dry-run', action='store_true', default=None,
                          help='Plan the moves without touching any file')

    subparsers.add_parser('open-config', help='Open the file map in the default editor')
    subparsers.add_parser('rules', help='Print the loaded file map')

    dashboard = subparsers.add_parser('dashboard', help='Run the web dashboard')
    dashboard.add_argument('--host', default='127.0.0.1', help='Dashboard host (default: 127.0.0.1)')
    dashboard.add_argument('--port', type=int, default=5000, help='Dashboard port (default: 5000)')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = Config(args.config)
    except (FileNotFoundError, ConfigError) as e:
        print(f"{ERROR_PREFIX}{e}", file=sys.stderr)
        return 1

    if args.command == 'dashboard':
        from .ui.dashboard import AppState, set_state, run_dashboard

        set_state(AppState(config))
        run_dashboard(args.host, args.port)
        return 0

    organiser = FileOrganiser(config)

    if args.command == 'organize':
        report = organiser.organize(expand_path(args.path), make_backup=args.backup, dry_run=args.dry_run)
        print(report.message)
        for failure in report.failures:
            print(f"  skipped: {failure['message']}", file=sys.stderr)
        if report.prune_error:
            print(f"  cleanup stopped: {report.prune_error}", file=sys.stderr)
        return 0 if report.success else 1

    if args.command == 'open-config':
        message = organiser.open_config_file()
        print(message)
        return 1 if message.startswith(ERROR_PREFIX) else 0

    if args.command == 'rules':
        try:
            rule_table = organiser.load_rules()
        except ConfigError as e:
            print(f"{ERROR_PREFIX}{e}", file=sys.stderr)
            return 1
        print(json.dumps(rule_table.to_dict(), indent=2))
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
