import logging
import math

from aprioriminer.Errors import ConfigurationError
from aprioriminer.Itemset import k_subsets
from aprioriminer.ItemsetTable import ItemsetTable

logger = logging.getLogger(__name__)

AUTO = "auto"
SUBSET_ENUMERATION = "subsets"
CANDIDATE_SCAN = "scan"

STRATEGIES = (AUTO, SUBSET_ENUMERATION, CANDIDATE_SCAN)


def count_support(candidates, transactions, k, strategy=AUTO):
    """Count in how many transactions each k-candidate occurs.

    :param
    @candidates - the candidate table of level k, its counts are filled in place
    @transactions - the Itemsets of the transaction store
    @k - the size of every candidate
    @strategy - AUTO chooses per transaction between enumerating the transaction's
        k-subsets and scanning every candidate, whichever touches fewer itemsets.
        SUBSET_ENUMERATION or CANDIDATE_SCAN force one of the two.
    """
    check_strategy(strategy)
    if not candidates:
        return candidates

    if strategy == SUBSET_ENUMERATION:
        counts = count_by_subsets(candidates, transactions, k)
    elif strategy == CANDIDATE_SCAN:
        counts = count_by_scan(candidates, transactions, k)
    else:
        counts = count_adaptively(candidates, transactions, k)

    candidates.update(counts)
    return candidates


def count_adaptively(candidates, transactions, k):
    counts = ItemsetTable.fromkeys(candidates, 0)
    n_candidates = len(counts)
    enumerated = scanned = 0
    for transaction in transactions:
        # a transaction shorter than k cannot hold a k-itemset
        if len(transaction) < k:
            continue
        if n_candidates > n_choose_k(len(transaction), k):
            add_transaction_subsets(counts, transaction, k)
            enumerated += 1
        else:
            add_transaction_scan(counts, transaction)
            scanned += 1

    logger.debug("level %d: %d transactions counted by subset enumeration, %d by candidate scan",
                 k, enumerated, scanned)
    return counts


def count_by_subsets(candidates, transactions, k):
    counts = ItemsetTable.fromkeys(candidates, 0)
    for transaction in transactions:
        if len(transaction) >= k:
            add_transaction_subsets(counts, transaction, k)
    return counts


def count_by_scan(candidates, transactions, k):
    counts = ItemsetTable.fromkeys(candidates, 0)
    for transaction in transactions:
        if len(transaction) >= k:
            add_transaction_scan(counts, transaction)
    return counts


def add_transaction_subsets(counts, transaction, k):
    # the transaction is sorted, so every subset comes out in canonical order
    for subset in k_subsets(transaction, k):
        if subset in counts:
            counts[subset] += 1


def add_transaction_scan(counts, transaction):
    items = frozenset(transaction)
    for candidate in counts:
        if items.issuperset(candidate):
            counts[candidate] += 1


def check_strategy(strategy):
    if strategy not in STRATEGIES:
        raise ConfigurationError("counting_strategy", strategy, "expected one of %s" % ", ".join(STRATEGIES))


def n_choose_k(n, k):
    if k > n:
        return 0
    return math.comb(n, k)
