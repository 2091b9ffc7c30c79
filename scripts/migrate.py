"""
Apply or roll back schema migrations.
Run: python -m scripts.migrate upgrade [head]
     python -m scripts.migrate downgrade -1
     python -m scripts.migrate current
     python -m scripts.migrate history
"""
import argparse
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import AppConfig
from app.core.logging_config import setup_logging, sanitize_log_data
from app.db.migrate import run_migrations, downgrade_migrations, current_revision, revision_history
import logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Content platform schema migrations")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    upgrade = subparsers.add_parser("upgrade", help="Upgrade to a revision (default: head)")
    upgrade.add_argument("target", nargs="?", default="head")

    downgrade = subparsers.add_parser("downgrade", help="Downgrade to a revision")
    downgrade.add_argument("target")

    subparsers.add_parser("current", help="Show the applied revision")
    subparsers.add_parser("history", help="List revisions from base to head")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    app_config = AppConfig.from_env()
    setup_logging(app_config)
    settings = {"database_url": args.database_url or app_config.database_url, "command": args.command}
    logger.info(f"Migration settings: {sanitize_log_data(settings)}")

    if args.command == "upgrade":
        run_migrations(args.target, database_url=args.database_url)
    elif args.command == "downgrade":
        downgrade_migrations(args.target, database_url=args.database_url)
    elif args.command == "current":
        print(current_revision(database_url=args.database_url) or "base")
    elif args.command == "history":
        for revision in revision_history():
            print(revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
