import logging

from aprioriminer.Itemset import Itemset
from aprioriminer.ItemsetTable import ItemsetTable

logger = logging.getLogger(__name__)


# the 1-candidates are seeded from the global item counts, there is no level 0 to prune against
def initial_candidates(store):
    return ItemsetTable((Itemset([item]), count) for item, count in store.item_counts.items())


def generate_candidates(frequent):
    """Build the k-candidates from the frequent (k-1)-itemsets.

    Every frequent (k-1)-itemset is extended by each item seen at level k-1 that it does
    not already hold. The extension is kept only when all of its (k-1)-subsets are
    frequent (the Apriori closure property). Each accepted candidate starts with count 0.
    """
    candidates = ItemsetTable()
    all_items = frequent.all_items()

    for prev_itemset in frequent:
        for item in all_items:
            if item in prev_itemset:
                continue
            candidate = prev_itemset.union(item)
            # the same set reached from another (k-1)-itemset
            if candidate in candidates:
                continue
            if is_closed(candidate, frequent):
                candidates[candidate] = 0

    logger.debug("generated %d candidates from %d frequent itemsets", len(candidates), len(frequent))
    return candidates


def is_closed(candidate, frequent):
    for subset in candidate.immediate_subsets():
        if subset not in frequent:
            return False
    return True
