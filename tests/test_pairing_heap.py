import sys
import os
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pairing_heap as ph
from pairing_heap import EMPTY, Empty, Forest, Node
from ordering import Ordering, REVERSED


class TestPairingHeap(unittest.TestCase):

    # Empty Heap
    def test_empty_returns_empty(self):
        self.assertIs(ph.empty(), EMPTY)
        self.assertTrue(ph.is_empty(ph.empty()))
        self.assertFalse(ph.empty())
        self.assertEqual(Empty(), EMPTY)

    def test_peek_on_empty_returns_none(self):
        self.assertIsNone(ph.peek(EMPTY))

    def test_pop_on_empty_returns_none(self):
        self.assertIsNone(ph.pop(EMPTY))

    def test_size_of_empty(self):
        self.assertEqual(ph.size(EMPTY), 0)

    # Merge
    def test_merge_identity(self):
        h = ph.from_iterable([4, 2, 9])
        self.assertIs(ph.merge(EMPTY, h), h)
        self.assertIs(ph.merge(h, EMPTY), h)
        self.assertEqual(ph.merge(EMPTY, h), h)
        self.assertIs(ph.merge(EMPTY, EMPTY), EMPTY)

    def test_merge_loser_prepended_to_winner_forest(self):
        a = ph.insert(ph.singleton(1), 7)
        b = ph.singleton(3)
        merged = ph.merge(a, b)
        self.assertEqual(merged.value, 1)
        self.assertEqual(list(ph.children(merged)), [b, Node(7)])

    def test_merge_smaller_second_root_wins(self):
        a = ph.singleton(5)
        b = ph.singleton(2)
        merged = ph.merge(a, b)
        self.assertEqual(merged, Node(2, Forest(a)))

    def test_merge_tie_first_operand_wins(self):
        order = Ordering.by_key(lambda item: item[0])
        a = ph.singleton((1, "a"))
        b = ph.singleton((1, "b"))
        self.assertEqual(ph.peek(ph.merge(a, b, order)), (1, "a"))
        self.assertEqual(ph.peek(ph.merge(b, a, order)), (1, "b"))

    def test_merge_does_not_modify_inputs(self):
        a = ph.from_iterable([3, 6])
        b = ph.from_iterable([1, 8])
        a_before = ph.to_sorted_list(a)
        b_before = ph.to_sorted_list(b)
        merged = ph.merge(a, b)
        self.assertEqual(ph.to_sorted_list(merged), [1, 3, 6, 8])
        self.assertEqual(ph.to_sorted_list(a), a_before)
        self.assertEqual(ph.to_sorted_list(b), b_before)

    # Insert / Peek / Pop
    def test_insert_single(self):
        h = ph.insert(EMPTY, 42)
        self.assertEqual(h, Node(42))
        self.assertEqual(ph.peek(h), 42)
        self.assertEqual(ph.size(h), 1)

    def test_pop_last_element_gives_empty(self):
        h = ph.insert(EMPTY, 42)
        self.assertIs(ph.pop(h), EMPTY)

    def test_scenario_insert_then_pop_in_order(self):
        h = EMPTY
        for v in [5, 3, 8, 1]:
            h = ph.insert(h, v)
        seen = []
        for _ in range(4):
            seen.append(ph.peek(h))
            h = ph.pop(h)
        self.assertEqual(seen, [1, 3, 5, 8])
        self.assertIs(h, EMPTY)

    def test_persistence(self):
        h1 = ph.insert(EMPTY, 5)
        h2 = ph.insert(h1, 3)
        self.assertEqual(ph.peek(h2), 3)
        self.assertEqual(ph.peek(h1), 5)
        self.assertEqual(ph.size(h1), 1)

    def test_pop_leaves_original_intact(self):
        h = ph.from_iterable([4, 1, 3])
        popped = ph.pop(h)
        self.assertEqual(ph.peek(popped), 3)
        self.assertEqual(ph.peek(h), 1)
        self.assertEqual(ph.to_sorted_list(h), [1, 3, 4])

    def test_nodes_are_immutable(self):
        h = ph.singleton(1)
        with self.assertRaises(AttributeError):
            h.value = 2

    # Consolidate
    def test_consolidate_empty_forest(self):
        self.assertIs(ph.consolidate([]), EMPTY)

    def test_consolidate_single_returns_it_unchanged(self):
        h = ph.from_iterable([2, 5])
        self.assertIs(ph.consolidate([h]), h)

    def test_consolidate_matches_recursive_definition(self):
        heaps = [ph.singleton(v) for v in [6, 2, 9, 4, 7]]
        first = ph.merge(heaps[0], heaps[1])
        second = ph.merge(heaps[2], heaps[3])
        expected = ph.merge(first, ph.merge(second, heaps[4]))
        self.assertEqual(ph.consolidate(heaps), expected)

    def test_consolidate_skips_empty_members(self):
        h = ph.consolidate([EMPTY, ph.singleton(3), EMPTY])
        self.assertEqual(ph.to_sorted_list(h), [3])

    def test_pop_consolidates_root_forest(self):
        h = ph.from_iterable([1, 5, 4, 3, 2])
        self.assertEqual(len(h.forest), 4)
        rest = ph.pop(h)
        self.assertEqual(ph.peek(rest), 2)
        self.assertTrue(ph.validate(rest))

    def test_deep_forest_does_not_recurse(self):
        h = ph.from_iterable(range(5000))
        self.assertEqual(len(h.forest), 4999)
        rest = ph.pop(h)
        self.assertEqual(ph.peek(rest), 1)
        self.assertEqual(ph.size(rest), 4999)

    # Orderings
    def test_reversed_ordering_gives_max_heap(self):
        h = ph.from_iterable([5, 3, 8, 1], REVERSED)
        self.assertEqual(ph.to_sorted_list(h, REVERSED), [8, 5, 3, 1])

    def test_key_ordering(self):
        order = Ordering.by_key(len)
        h = ph.from_iterable(["banana", "fig", "pear"], order)
        self.assertEqual(ph.peek(h), "fig")

    # Properties Over Random Sequences
    def test_invariant_over_random_operations(self):
        rng = np.random.default_rng(42)
        h = EMPTY
        expected = []
        for _ in range(1500):
            roll = rng.random()
            if roll < 0.55:
                value = int(rng.integers(-100, 100))
                h = ph.insert(h, value)
                expected.append(value)
            elif roll < 0.65:
                other = ph.from_iterable(rng.integers(-100, 100, size=3).tolist())
                h = ph.merge(h, other)
                expected.extend(ph.to_sorted_list(other))
            else:
                top = ph.peek(h)
                popped = ph.pop(h)
                if expected:
                    self.assertEqual(top, min(expected))
                    expected.remove(top)
                    h = popped
                else:
                    self.assertIsNone(popped)
            self.assertTrue(ph.validate(h))
            self.assertEqual(ph.size(h), len(expected))

    def test_random_values_round_trip_sorted(self):
        rng = np.random.default_rng(7)
        values = rng.normal(size=500).tolist()
        h = ph.from_iterable(values)
        self.assertEqual(ph.to_sorted_list(h), sorted(values))

    def test_snapshots_survive_later_operations(self):
        rng = np.random.default_rng(3)
        h = EMPTY
        snapshots = []
        for value in rng.integers(0, 1000, size=50).tolist():
            h = ph.insert(h, value)
            snapshots.append((h, ph.to_sorted_list(h)))
        for _ in range(25):
            h = ph.pop(h)
        for snapshot, contents in snapshots:
            self.assertEqual(ph.to_sorted_list(snapshot), contents)

    # Structural Equality
    def test_independent_deep_heaps_are_equal(self):
        a = ph.from_iterable(range(3000, 0, -1))
        b = ph.from_iterable(range(3000, 0, -1))
        self.assertIsNot(a, b)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(ph.merge(EMPTY, a), b)
        self.assertEqual(ph.merge(b, EMPTY), a)

    def test_deep_heaps_with_different_values_differ(self):
        a = ph.from_iterable(range(3000, 0, -1))
        b = ph.from_iterable(list(range(3000, 1, -1)) + [0])
        self.assertNotEqual(a, b)

    def test_same_values_different_shape_differ(self):
        self.assertNotEqual(ph.from_iterable([1, 2, 3]), ph.from_iterable([3, 2, 1]))

    def test_repr_does_not_recurse(self):
        wide = ph.pop(ph.from_iterable(range(5000)))
        deep = ph.from_iterable(range(3000, 0, -1))
        self.assertEqual(repr(deep), "Node(1, children=1)")
        self.assertTrue(repr(wide).startswith("Node(1, children="))
        self.assertTrue(repr(wide.forest).startswith("Forest([Node("))

    def test_forest_equality(self):
        self.assertEqual(Forest(Node(2), Forest(Node(3))), Forest(Node(2), Forest(Node(3))))
        self.assertNotEqual(Forest(Node(2)), Forest(Node(2), Forest(Node(3))))

    # Validation
    def test_validate_detects_broken_heap(self):
        broken = Node(5, Forest(Node(1)))
        self.assertFalse(ph.validate(broken))
        self.assertTrue(ph.validate(Node(1, Forest(Node(5)))))

    def test_iter_sorted_is_lazy_and_non_destructive(self):
        h = ph.from_iterable([3, 1, 2])
        it = ph.iter_sorted(h)
        self.assertEqual(next(it), 1)
        self.assertEqual(ph.to_sorted_list(h), [1, 2, 3])


if __name__ == "__main__":
    unittest.main()
