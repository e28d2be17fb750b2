from .batch import run_queries
from .graph import build_contacts, shortest_path
from .records import PathNode, PathQuery, PathResult, SubscriberRecord, UserRecord

__all__ = [
    "build_contacts",
    "shortest_path",
    "run_queries",
    "UserRecord",
    "SubscriberRecord",
    "PathQuery",
    "PathResult",
    "PathNode",
]
