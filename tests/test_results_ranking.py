from itertools import permutations

from highcard.common.ranking import PlayerScore, RankingTree
from highcard.common.results import ResultRecord, ResultsLog


def test_empty_log_renders_no_rounds():
    log = ResultsLog()
    assert len(log) == 0
    assert log.render_all() == ["No rounds played."]


def test_log_keeps_chronological_order():
    log = ResultsLog()
    log.append(1, "ann", 100)
    log.append(3, "bob", 100)
    log.append(4, "ann", 200)
    assert [r.round_number for r in log] == [1, 3, 4]
    assert log.records()[-1] == ResultRecord(4, "ann", 200)
    assert log.render_all() == [
        "=== Round Results ===",
        "Round 1: Winner = ann (score after round: 100)",
        "Round 3: Winner = bob (score after round: 100)",
        "Round 4: Winner = ann (score after round: 200)",
    ]


def test_ranking_ascending_for_any_insert_order():
    entries = [("a", 300), ("b", 100), ("c", 200)]
    for order in permutations(entries):
        tree = RankingTree()
        for name, score in order:
            tree.insert(name, score)
        assert [e.score for e in tree.in_order()] == [100, 200, 300]


def test_ranking_keeps_equal_scores():
    tree = RankingTree()
    for name, score in [("a", 100), ("b", 0), ("c", 100), ("d", 0)]:
        tree.insert(name, score)
    walked = list(tree)
    assert len(walked) == len(tree) == 4
    scores = [e.score for e in walked]
    assert scores == sorted(scores)
    # equal scores both appear; their relative order is not asserted
    assert {e.name for e in walked} == {"a", "b", "c", "d"}


def test_traversal_can_be_restarted():
    tree = RankingTree()
    tree.insert("x", 5)
    tree.insert("y", 1)
    walk = tree.in_order()
    assert next(walk) == PlayerScore("y", 1)
    assert list(tree.in_order()) == [PlayerScore("y", 1), PlayerScore("x", 5)]


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def test_sorted_inserts_make_a_chain():
    tree = RankingTree()
    for i in range(4):
        tree.insert(f"p{i}", i * 100)
    assert _height(tree._root) == 4
    assert _height(RankingTree()._root) == 0
