import logging
from collections import deque
from typing import Iterable, Optional

import networkx as nx

from .records import UserRecord

logger = logging.getLogger(__name__)

Contacts = dict[str, list[str]]
CreatedAt = dict[str, str]


def build_contacts(users: Iterable[UserRecord]) -> tuple[Contacts, CreatedAt]:
    """
    Returns (contacts, created_at) built in a single pass:
      contacts[subscriber_email] -> emails that subscriber subscribed to, in input order
      created_at[user_email]     -> that user's creation timestamp

    Duplicate user emails overwrite each other's timestamp (last one wins);
    duplicate subscriptions stay in the edge list.
    """
    contacts: Contacts = {}
    created_at: CreatedAt = {}
    for user in users:
        created_at[user.email] = user.created_at
        for sub in user.subscribers:
            contacts.setdefault(sub.email, []).append(user.email)

    logger.debug("built contacts: %d subscribers, %d users", len(contacts), len(created_at))
    return contacts, created_at


def to_digraph(contacts: Contacts, created_at: Optional[CreatedAt] = None) -> nx.DiGraph:
    G = nx.DiGraph()
    # users without any subscription edge still count as nodes
    for email, ts in (created_at or {}).items():
        G.add_node(email, created_at=ts)
    for email, targets in contacts.items():
        G.add_node(email)
        for to in targets:
            G.add_edge(email, to)
    return G


def graph_stats(contacts: Contacts, created_at: Optional[CreatedAt] = None) -> dict:
    G = to_digraph(contacts, created_at)
    return {
        "nodes": G.number_of_nodes(),
        "edges": G.number_of_edges(),
        # raw count keeps duplicate subscriptions, the DiGraph collapses them
        "subscriptions": sum(len(targets) for targets in contacts.values()),
    }


def breadth_first_search(
    start: str, contacts: Contacts, target: Optional[str] = None
) -> tuple[set[str], dict[str, Optional[str]]]:
    """
    BFS over `contacts` from `start`.
    parent[start] is None, which marks the beginning of every path.
    If `target` is given the search stops once the target is dequeued;
    its parent is fixed at discovery so the reconstructed path is the same.
    """
    visited = {start}
    parent: dict[str, Optional[str]] = {start: None}

    queue = deque([start])
    while queue:
        email = queue.popleft()
        if email == target:
            break
        for to in contacts.get(email, []):
            if to not in visited:
                visited.add(to)
                parent[to] = email
                queue.append(to)

    return visited, parent


def shortest_path(from_email: str, to_email: str, contacts: Contacts, early_exit: bool = True) -> Optional[list[str]]:
    """
    Shortest path from `from_email` to `to_email`, both endpoints included.
    None when `to_email` is unreachable. from == to gives [from_email].
    Among equal-length paths the one following adjacency order wins.
    """
    visited, parent = breadth_first_search(from_email, contacts, target=to_email if early_exit else None)

    if to_email not in visited:
        return None

    path = []
    node: Optional[str] = to_email
    while node is not None:
        path.append(node)
        node = parent[node]

    path.reverse()
    return path
