import random
from itertools import combinations

import pytest

from aprioriminer.Itemset import Itemset


@pytest.fixture
def small_transactions():
    return [[1, 2, 3], [1, 2], [1, 3], [2, 3], [1]]


@pytest.fixture
def basket_transactions():
    return [[1, 3, 4], [2, 3, 5], [1, 2, 3, 5], [2, 5]]


def random_transactions(seed, n_transactions=40, n_items=8, max_size=6):
    rng = random.Random(seed)
    transactions = []
    for _ in range(n_transactions):
        size = rng.randint(0, max_size)
        transactions.append(rng.sample(range(1, n_items + 1), size))
    return transactions


def brute_force_counts(transactions, max_size=None):
    """Support count of every itemset occurring in at least one transaction."""
    baskets = [frozenset(t) for t in transactions]
    items = sorted(set().union(*baskets)) if baskets else []
    max_size = max_size or len(items)
    counts = {}
    for k in range(1, max_size + 1):
        for itemset in combinations(items, k):
            count = sum(1 for basket in baskets if basket.issuperset(itemset))
            if count:
                counts[Itemset(itemset)] = count
    return counts


@pytest.fixture
def make_random_transactions():
    return random_transactions


@pytest.fixture
def brute_force():
    return brute_force_counts
