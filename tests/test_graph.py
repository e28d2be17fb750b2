import random

import networkx as nx
import pytest

from service.models.graph import breadth_first_search, build_contacts, graph_stats, shortest_path, to_digraph
from tests.conftest import make_user


def test_build_contacts_points_subscriber_at_user(chain_users):
    contacts, created_at = build_contacts(chain_users)

    assert contacts == {"B": ["A"], "C": ["B"]}
    assert created_at == {"A": "created-A", "B": "created-B", "D": "created-D"}


def test_build_contacts_is_deterministic(chain_users):
    assert build_contacts(chain_users) == build_contacts(chain_users)


def test_build_contacts_keeps_edge_order_and_duplicates():
    users = [make_user("X", "S"), make_user("Y", "S"), make_user("X", "S", created_at="later")]
    contacts, created_at = build_contacts(users)

    assert contacts["S"] == ["X", "Y", "X"]
    # duplicate user email: last record wins
    assert created_at["X"] == "later"


def test_graph_stats_counts_duplicates_separately():
    contacts = {"S": ["X", "Y", "X"]}
    assert graph_stats(contacts) == {"nodes": 3, "edges": 2, "subscriptions": 3}


def test_shortest_path_follows_subscriptions(chain_users):
    contacts, _ = build_contacts(chain_users)

    assert shortest_path("C", "A", contacts) == ["C", "B", "A"]
    assert shortest_path("A", "C", contacts) is None


def test_shortest_path_to_self_is_single_node(chain_users):
    contacts, _ = build_contacts(chain_users)

    assert shortest_path("A", "A", contacts) == ["A"]
    assert shortest_path("D", "D", contacts) == ["D"]


@pytest.mark.parametrize("target", ["A", "B", "C", "nobody@example.com"])
def test_isolated_user_reaches_nothing(chain_users, target):
    contacts, _ = build_contacts(chain_users)
    assert shortest_path("D", target, contacts) is None


def test_unknown_start_reaches_nothing(chain_users):
    contacts, _ = build_contacts(chain_users)
    assert shortest_path("ghost", "A", contacts) is None


def test_equal_length_paths_follow_adjacency_order():
    users = [make_user("X", "S"), make_user("Y", "S"), make_user("T", "X", "Y")]
    contacts, _ = build_contacts(users)
    assert shortest_path("S", "T", contacts) == ["S", "X", "T"]

    contacts, _ = build_contacts([users[1], users[0], users[2]])
    assert shortest_path("S", "T", contacts) == ["S", "Y", "T"]


def test_bfs_marks_start_with_none_parent():
    contacts = {"a": ["b"], "b": ["c"]}
    visited, parent = breadth_first_search("a", contacts)

    assert visited == {"a", "b", "c"}
    assert parent == {"a": None, "b": "a", "c": "b"}


def test_bfs_handles_cycles():
    contacts = {"a": ["b"], "b": ["a", "c"], "c": ["a"]}
    assert shortest_path("c", "b", contacts) == ["c", "a", "b"]


def _random_contacts(rng: random.Random, n: int, p: float):
    nodes = [f"u{i}@example.com" for i in range(n)]
    users = []
    for user in nodes:
        subs = [s for s in nodes if s != user and rng.random() < p]
        users.append(make_user(user, *subs))
    contacts, _ = build_contacts(users)
    return nodes, contacts


@pytest.mark.parametrize("seed", range(8))
def test_shortest_path_matches_networkx_distance(seed):
    rng = random.Random(seed)
    nodes, contacts = _random_contacts(rng, n=12, p=0.15)
    G = to_digraph(contacts)
    G.add_nodes_from(nodes)

    for a in nodes:
        for b in nodes:
            path = shortest_path(a, b, contacts)
            if not nx.has_path(G, a, b):
                assert path is None
                continue
            assert path[0] == a and path[-1] == b
            assert len(path) - 1 == nx.shortest_path_length(G, a, b)
            assert all(v in contacts[u] for u, v in zip(path[:-1], path[1:]))
            assert shortest_path(a, b, contacts, early_exit=False) == path


def test_graph_stats_counts_isolated_users(chain_users):
    contacts, created_at = build_contacts(chain_users)

    assert graph_stats(contacts) == {"nodes": 3, "edges": 2, "subscriptions": 2}
    assert graph_stats(contacts, created_at) == {"nodes": 4, "edges": 2, "subscriptions": 2}
    assert to_digraph(contacts, created_at).nodes["D"] == {"created_at": "created-D"}
