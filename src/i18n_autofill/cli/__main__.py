"""
Main Entry Point for the i18n-autofill CLI.

This module handles argument parsing and dispatches to the command handlers
in `i18n_autofill.cli.handlers`.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from i18n_autofill import __version__
from i18n_autofill.cli import handlers


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="i18n-autofill: Translation bundle autofill for useI18n/withI18n")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: INSPECT ---
  cmd_inspect = subparsers.add_parser("inspect", help="Show what a build would generate for a component")
  cmd_inspect.add_argument("path", type=Path, help="Component source file")
  cmd_inspect.add_argument(
    "--fallback-locale",
    default=None,
    help="Fallback locale code (default: from pyproject.toml, else 'en')",
  )
  cmd_inspect.add_argument(
    "--no-validate",
    action="store_true",
    help="Accept every entry of translations/ as a locale file",
  )
  cmd_inspect.add_argument("--json", action="store_true", help="Print a JSON report instead of tables")

  args = parser.parse_args(argv)

  if args.command == "inspect":
    return handlers.handle_inspect(
      args.path,
      fallback_locale=args.fallback_locale,
      validate=False if args.no_validate else None,
      json_mode=args.json,
    )

  return 0


if __name__ == "__main__":
  raise SystemExit(main())
