import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import LOG_LEVELS, get_settings
from .log import setup_logging
from .models.batch import run_queries
from .models.graph import build_contacts, graph_stats
from .storage import InputFileError, load_queries, load_users, save_results

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="subscription-paths",
        description="Find the shortest subscription path for every (from, to) pair in a CSV file.",
    )
    parser.add_argument("--users", default=settings.users_json, help="user records JSON (default: %(default)s)")
    parser.add_argument("--queries", default=settings.queries_csv, help="from,to CSV (default: %(default)s)")
    parser.add_argument("--output", default=settings.results_json, help="results JSON (default: %(default)s)")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="default: %(default)s",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        users = load_users(args.users)
        queries = load_queries(args.queries)
    except InputFileError as e:
        logger.error("%s", e)
        return 1

    contacts, created_at = build_contacts(users)
    stats = graph_stats(contacts, created_at)
    logger.info("graph: %d nodes, %d edges", stats["nodes"], stats["edges"])

    results = run_queries(queries, contacts, created_at)
    save_results(results, args.output)

    found = sum(1 for r in results if r.path is not None)
    logger.info("%d/%d queries connected through a path", found, len(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
