"""
Operator entry point.

Checks the database connection and runs one content query, printing the
result as JSON:

    python -m src.main articles --take 5 --where '{"isFeatured": {"equals": true}}'
    python -m src.main article --where '{"slug": "hello-world"}'
    python -m src.main topics-count
"""

import argparse
import json
import sys

from config.settings import Settings
from src.context import QueryContext
from src.logging import configure_logging, get_logger
from src.services import ContentQueryService

logger = get_logger(__name__)

LIST_OPERATIONS = {
    "articles": "list_articles",
    "externals": "list_external_items",
    "topics": "list_topics",
}
COUNT_OPERATIONS = {
    "articles-count": "count_articles",
    "externals-count": "count_external_items",
    "topics-count": "count_topics",
}
UNIQUE_OPERATIONS = {
    "article": "article_by_key",
    "topic": "topic_by_key",
}


def _json_arg(raw):
    try:
        return json.loads(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON: {e}") from e


def run_operation(service: ContentQueryService, args: argparse.Namespace):
    """Dispatch one parsed command to the façade; returns JSON-ready data."""
    if args.operation in LIST_OPERATIONS:
        method = getattr(service, LIST_OPERATIONS[args.operation])
        items = method(take=args.take, skip=args.skip, order_by=args.order_by, where=args.where)
        return [item.to_dict() for item in items]
    if args.operation in COUNT_OPERATIONS:
        return getattr(service, COUNT_OPERATIONS[args.operation])(where=args.where)

    item = getattr(service, UNIQUE_OPERATIONS[args.operation])(args.where or {})
    return item.to_dict() if item is not None else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a content query against the CMS database")
    parser.add_argument(
        "operation",
        choices=[*LIST_OPERATIONS, *COUNT_OPERATIONS, *UNIQUE_OPERATIONS],
        help="Query to run",
    )
    parser.add_argument("--where", type=_json_arg, default=None, help="Filter as JSON")
    parser.add_argument(
        "--order-by", type=_json_arg, default=None,
        help='Order rules as JSON, e.g. \'[{"publishedDate": "desc"}]\'',
    )
    parser.add_argument("--take", type=int, default=None, help="Page size")
    parser.add_argument("--skip", type=int, default=None, help="Rows to skip")
    return parser


def main():
    """Main entry point for the content query CLI."""
    args = build_parser().parse_args()

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    configure_logging(settings.log_level, settings.log_file)
    logger.section(f"Content Query Service ({settings.app_env})")

    context = QueryContext.from_settings(settings)
    try:
        if not context.db.health_check():
            logger.error("Database connection failed! Check DATABASE_URL.")
            sys.exit(1)
        logger.success("Database connection healthy")

        result = run_operation(ContentQueryService(context), args)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    finally:
        context.close()


if __name__ == "__main__":
    main()
