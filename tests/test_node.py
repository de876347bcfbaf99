"""Tests for the search tree node: statistics, expansion and selection."""

import math

import pytest

from hexmcts.errors import InvalidTreeError, NoChildrenError
from hexmcts.mcts import Node
from hexmcts.mcts.strategy.selection import select_best_child
from hexmcts.utils.types import ActionPrior


def make_parent_with_child(parent_visits: int, child_visits: int = 0, prior: float = 1.0):
    parent = Node(is_red=False)
    parent.visit_count = parent_visits
    parent.expand([ActionPrior((5, 5), prior)])
    child = parent.children[(5, 5)]
    child.visit_count = child_visits
    return parent, child


class TestUpdate:
    def test_first_update(self):
        node = Node()
        node.update(0.7)
        assert node.visit_count == 1
        assert node.quality == pytest.approx(0.7)

    def test_running_mean(self):
        node = Node()
        node.update(0.7)
        node.update(-0.3)
        assert node.visit_count == 2
        assert node.quality == pytest.approx((0.7 - 0.3) / 2)


class TestExpand:
    def test_creates_children_for_opposite_side(self):
        root = Node(is_red=True)
        created = root.expand([ActionPrior((1, 1), 2.0), ActionPrior((2, 2), 1.5)])
        assert created == 2
        assert list(root.children) == [(1, 1), (2, 2)]
        for child in root.children.values():
            assert child.is_red is False
            assert child.parent is root
            assert child.visit_count == 0
            assert child.quality == 0.0
        assert root.children[(1, 1)].prior == 2.0

    def test_merge_keeps_existing_children(self):
        root = Node()
        root.expand([ActionPrior((1, 1), 2.0)])
        existing = root.children[(1, 1)]
        existing.update(0.5)

        created = root.expand([ActionPrior((1, 1), 9.0), ActionPrior((3, 3), 1.0)])
        assert created == 1
        assert root.children[(1, 1)] is existing
        assert existing.prior == 2.0
        assert existing.visit_count == 1
        assert (3, 3) in root.children

    def test_structural_predicates(self):
        root = Node()
        assert root.is_leaf() and root.is_root()
        root.expand([ActionPrior((0, 0), 1.0)])
        child = root.children[(0, 0)]
        assert not root.is_leaf()
        assert child.is_leaf() and not child.is_root()


class TestEvaluate:
    def test_formula(self):
        parent, child = make_parent_with_child(10, child_visits=3, prior=2.0)
        child.quality = 0.2
        expected_term = 2.0 * 0.5 * math.sqrt(2 * math.log(10)) / 4
        assert child.evaluate(0.5) == pytest.approx(0.2 + expected_term)
        assert child.uct == pytest.approx(expected_term)

    def test_root_cannot_be_evaluated(self):
        with pytest.raises(InvalidTreeError):
            Node().evaluate(0.5)

    def test_unvisited_parent_gives_no_exploration(self):
        parent, child = make_parent_with_child(0)
        child.quality = 0.3
        assert child.evaluate(0.5) == pytest.approx(0.3)
        assert child.uct == 0.0

    def test_grows_with_parent_visits(self):
        scores = []
        for parent_visits in [1, 2, 5, 20, 100]:
            _, child = make_parent_with_child(parent_visits, child_visits=3)
            scores.append(child.evaluate(0.5))
        assert all(a < b for a, b in zip(scores, scores[1:]))

    def test_shrinks_with_own_visits(self):
        terms = []
        for child_visits in [0, 1, 4, 10]:
            _, child = make_parent_with_child(50, child_visits=child_visits)
            child.evaluate(0.5)
            terms.append(child.uct)
        assert all(a > b for a, b in zip(terms, terms[1:]))


class TestSelect:
    def test_no_children(self):
        with pytest.raises(NoChildrenError):
            Node().select(0.5)
        with pytest.raises(InvalidTreeError):
            Node().select(0.5, for_final_choice=True)

    def test_search_mode_uses_evaluate(self):
        root = Node()
        root.visit_count = 10
        root.expand([ActionPrior((0, 0), 1.0), ActionPrior((1, 1), 1.0)])
        root.children[(0, 0)].quality = -0.5
        root.children[(1, 1)].quality = 0.5
        action, child = root.select(0.5)
        assert action == (1, 1)
        assert child is root.children[(1, 1)]

    def test_prior_favours_unvisited_move(self):
        root = Node()
        root.visit_count = 10
        root.expand([ActionPrior((0, 0), 1.0), ActionPrior((1, 1), 3.0)])
        action, _ = root.select(0.5)
        assert action == (1, 1)

    def test_final_choice_uses_visits(self):
        root = Node()
        root.expand([ActionPrior((0, 0), 1.0), ActionPrior((1, 1), 1.0)])
        root.children[(0, 0)].visit_count = 3
        root.children[(0, 0)].quality = -1.0
        root.children[(1, 1)].visit_count = 2
        root.children[(1, 1)].quality = 1.0
        action, _ = root.select(0.5, for_final_choice=True)
        assert action == (0, 0)

    def test_ties_go_to_first_child(self):
        root = Node()
        root.visit_count = 4
        root.expand([ActionPrior((2, 2), 1.0), ActionPrior((0, 0), 1.0)])
        assert root.select(0.5)[0] == (2, 2)
        assert root.select(0.5, for_final_choice=True)[0] == (2, 2)

    def test_scores_each_child_once(self):
        root = Node()
        root.expand([ActionPrior((0, 0), 1.0), ActionPrior((1, 1), 1.0), ActionPrior((2, 2), 1.0)])
        scored = []

        def scorer(child):
            scored.append(child)
            return -math.inf

        action, child = select_best_child(root, scorer)
        assert action == (0, 0)
        assert child is root.children[(0, 0)]
        assert len(scored) == 3
