import logging
from typing import Iterable, Optional

from .graph import Contacts, CreatedAt, shortest_path
from .records import PathNode, PathQuery, PathResult

logger = logging.getLogger(__name__)


def intermediate_nodes(path: list[str], created_at: CreatedAt) -> list[PathNode]:
    # every non-start node on a path is an edge target, i.e. a known user
    return [PathNode(email=email, created_at=created_at[email]) for email in path[1:-1]]


def resolve_query(query_id: int, query: PathQuery, contacts: Contacts, created_at: CreatedAt) -> PathResult:
    nodes: Optional[list[PathNode]] = None

    if query.from_email != query.to_email:
        path = shortest_path(query.from_email, query.to_email, contacts)
        if path is None:
            logger.debug("query %d: %s -> %s unreachable", query_id, query.from_email, query.to_email)
        else:
            nodes = intermediate_nodes(path, created_at)
            logger.debug("query %d: %s -> %s in %d hops", query_id, query.from_email, query.to_email, len(path) - 1)

    return PathResult(id=query_id, from_email=query.from_email, to_email=query.to_email, path=nodes)


def run_queries(queries: Iterable[PathQuery], contacts: Contacts, created_at: CreatedAt) -> list[PathResult]:
    """
    One PathResult per query, ids 1..n in input order.
    Queries are answered independently; nothing is cached between them.
    """
    results = [
        resolve_query(i, query, contacts, created_at)
        for i, query in enumerate(queries, start=1)
    ]
    logger.info(
        "resolved %d queries, %d with intermediate users",
        len(results), sum(1 for r in results if r.path),
    )
    return results
