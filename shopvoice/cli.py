#!/usr/bin/env python3
"""
shopvoice Command Line Interface

Main entry point for the `shopvoice` command.

Usage:
    shopvoice process "add 2 bottles of water and milk"
    shopvoice process "agregar leche y pan" --language es --json
    shopvoice languages               # Supported languages
    shopvoice history alice           # Recent commands for a user
    shopvoice stats alice             # Command success stats
    shopvoice --version               # Show version
"""

import argparse
import json
import sys


def cmd_version(args):
    """Print version."""
    from shopvoice import __version__

    print(f"shopvoice {__version__}")


def cmd_process(args):
    """Interpret one command and print the result."""
    from shopvoice.voice.config import load_config
    from shopvoice.voice.languages import is_supported
    from shopvoice.voice.pipeline import build_pipeline

    if args.language and not is_supported(args.language):
        print(
            f"Warning: {args.language} is not a supported language, replying in English",
            file=sys.stderr,
        )

    config = load_config(args.config)
    if args.no_history:
        config.pipeline.record_history = False
    pipeline = build_pipeline(config)

    result = pipeline.process_command_sync(args.text, args.user_id, args.language)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0 if result.success else 1

    print(result.response)
    print(f"  action:     {result.action}")
    print(f"  confidence: {result.confidence:.2f}")
    for item in result.items:
        details = [f"x{item.quantity}"]
        if item.unit:
            details.append(item.unit)
        if item.category:
            details.append(item.category)
        if item.organic:
            details.append("organic")
        if item.brand:
            details.append(f"brand={item.brand}")
        if item.price_ceiling is not None:
            details.append(f"under {item.price_ceiling}")
        print(f"  - {item.name} ({', '.join(details)})")
    return 0 if result.success else 1


def cmd_languages(args):
    """List supported languages."""
    from shopvoice.voice.languages import list_languages

    languages = list_languages()
    if args.json:
        print(json.dumps({"success": True, "languages": languages}, indent=2, ensure_ascii=False))
        return
    for language in languages:
        print(f"  {language['icon']}  {language['code']:<6} {language['display_name']}")


def _history_store(args):
    from shopvoice.voice.config import load_config
    from shopvoice.voice.history import HistoryStore

    config = load_config(args.config)
    return HistoryStore(config.history.resolved_path()), config


def cmd_history(args):
    """Show recent commands for a user."""
    store, config = _history_store(args)
    commands = store.get_history(args.user_id, limit=args.limit or config.history.limit)
    if args.json:
        print(json.dumps({"success": True, "commands": commands}, indent=2, ensure_ascii=False))
        return
    if not commands:
        print(f"No commands recorded for {args.user_id}.")
        return
    for entry in commands:
        marker = "ok" if entry["success"] else "!!"
        print(f"  [{marker}] {entry['processed_at']}  {entry['command_text']}")


def cmd_stats(args):
    """Show command statistics for a user."""
    store, _config = _history_store(args)
    stats = store.get_stats(args.user_id)
    if args.json:
        print(json.dumps({"success": True, "stats": stats}, indent=2))
        return
    print(f"Total:        {stats['total_commands']}")
    print(f"Successful:   {stats['successful_commands']}")
    print(f"Failed:       {stats['failed_commands']}")
    print(f"Success rate: {stats['success_rate']}%")


def main(argv=None):
    """Main CLI entry point."""
    from shopvoice.logging_config import setup_logging

    parser = argparse.ArgumentParser(
        prog="shopvoice",
        description="shopvoice - Voice commands for shopping lists",
    )
    parser.add_argument(
        "--version", "-V", action="store_true", help="Show version and exit"
    )
    parser.add_argument(
        "--config", default=None, help="Path to voice.yaml (default: args/voice.yaml)"
    )
    parser.add_argument(
        "--log-level", default=None, help="Log level (default: $SHOPVOICE_LOG_LEVEL or INFO)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    process_parser = subparsers.add_parser(
        "process", help="Interpret a transcribed voice command"
    )
    process_parser.add_argument("text", help="The command, e.g. 'add milk and bread'")
    process_parser.add_argument(
        "--language", "-l", default=None, help="Language tag (default: from config)"
    )
    process_parser.add_argument(
        "--user-id", "-u", default=None, help="Record the command in this user's history"
    )
    process_parser.add_argument(
        "--no-history", action="store_true", help="Do not record the command"
    )
    process_parser.add_argument("--json", action="store_true", help="Print JSON")
    process_parser.set_defaults(func=cmd_process)

    languages_parser = subparsers.add_parser(
        "languages", help="List supported languages"
    )
    languages_parser.add_argument("--json", action="store_true", help="Print JSON")
    languages_parser.set_defaults(func=cmd_languages)

    history_parser = subparsers.add_parser(
        "history", help="Show recent commands for a user"
    )
    history_parser.add_argument("user_id", help="User id")
    history_parser.add_argument(
        "--limit", type=int, default=None, help="Max commands to show (default: from config)"
    )
    history_parser.add_argument("--json", action="store_true", help="Print JSON")
    history_parser.set_defaults(func=cmd_history)

    stats_parser = subparsers.add_parser(
        "stats", help="Show command statistics for a user"
    )
    stats_parser.add_argument("user_id", help="User id")
    stats_parser.add_argument("--json", action="store_true", help="Print JSON")
    stats_parser.set_defaults(func=cmd_stats)

    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    # Handle --version at top level
    if args.version:
        cmd_version(args)
        return

    # If no command given, show help
    if not args.command:
        parser.print_help()
        return

    # Execute command
    result = args.func(args)

    # Commands may return an exit code
    if isinstance(result, int) and result != 0:
        sys.exit(result)


if __name__ == "__main__":
    main()
