from aprioriminer.Candidates import generate_candidates, initial_candidates, is_closed
from aprioriminer.Itemset import Itemset
from aprioriminer.ItemsetTable import ItemsetTable
from aprioriminer.Transactions import TransactionStore


def table(*itemsets):
    return ItemsetTable((Itemset(itemset), 1) for itemset in itemsets)


def test_initial_candidates_use_global_item_counts(small_transactions):
    candidates = initial_candidates(TransactionStore(small_transactions))
    assert candidates == {Itemset([1]): 4, Itemset([2]): 3, Itemset([3]): 3}


def test_initial_candidates_of_empty_store():
    assert initial_candidates(TransactionStore([])) == {}


def test_pairs_from_single_items():
    candidates = generate_candidates(table([1], [2], [3]))
    assert candidates == {Itemset([1, 2]): 0, Itemset([1, 3]): 0, Itemset([2, 3]): 0}


def test_candidate_needs_every_immediate_subset():
    # {1, 3} is not frequent, so {1, 2, 3} is pruned
    assert generate_candidates(table([1, 2], [2, 3])) == {}
    assert generate_candidates(table([1, 2], [2, 3], [1, 3])) == {Itemset([1, 2, 3]): 0}


def test_candidates_are_deduplicated():
    frequent = table([1, 2, 3], [1, 2, 4], [1, 3, 4], [2, 3, 4])
    candidates = generate_candidates(frequent)
    assert list(candidates) == [Itemset([1, 2, 3, 4])]


def test_candidates_only_grow_by_one_item():
    candidates = generate_candidates(table([1, 2], [3, 4], [1, 3], [1, 4], [2, 3], [2, 4]))
    assert all(len(candidate) == 3 for candidate in candidates)
    assert len(candidates) == 4


def test_empty_level_gives_no_candidates():
    assert generate_candidates(ItemsetTable()) == {}


def test_is_closed():
    frequent = table([1, 2], [1, 3])
    assert not is_closed(Itemset([1, 2, 3]), frequent)
    assert is_closed(Itemset([1, 2, 3]), table([1, 2], [1, 3], [2, 3]))
