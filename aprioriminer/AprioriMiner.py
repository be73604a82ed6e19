import logging
import numbers

import numpy as np

from aprioriminer.Associations import Associations
from aprioriminer.Candidates import generate_candidates, initial_candidates
from aprioriminer.Errors import ConfigurationError
from aprioriminer.ItemsetTable import FrequentSetTable
from aprioriminer.RuleFinder import find_strong_rules
from aprioriminer.SupportCounter import AUTO, check_strategy, count_support
from aprioriminer.Transactions import TransactionStore

logger = logging.getLogger(__name__)


class AprioriMiner:
    """Level-wise Apriori search for frequent itemsets, followed by association rule discovery.

    This program is free software: you can redistribute it and/or modify it under the terms of the
    GNU General Public License as published by the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the
    implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
    for more details.

    You should have received a copy of the GNU General Public License along with this program.
    If not, see <http://www.gnu.org/licenses/>.
    """

    """
    :param
    @min_support - a fraction of the transactions if below 1, otherwise an absolute transaction count
    @min_confidence - the minimum confidence of a reported rule, in [0, 1]
    @input_data - a TransactionStore, a path to a transaction file, a data frame with one basket per row,
        or an iterable of transactions
    @decimal_precision - digits of the support and confidence figures rendered as text
    @counting_strategy - 'auto' picks the cheaper support counting per transaction,
        'subsets' or 'scan' force one of them
    """
    def __init__(self,
                 min_support,
                 min_confidence,
                 input_data,
                 decimal_precision=2,
                 counting_strategy=AUTO
                 ):
        check_min_support(min_support)
        check_min_confidence(min_confidence)
        check_decimal_precision(decimal_precision)
        check_strategy(counting_strategy)

        self.min_support = min_support
        self.min_confidence = min_confidence
        self.input_data = input_data
        self.decimal_precision = decimal_precision
        self.counting_strategy = counting_strategy

        # built by the first fit() and read-only afterwards
        self.store = None
        # filled in by fit()
        self.min_support_count = None
        self.frequent_sets = None

    def fit(self):

        # load data once, an iterator input is used up by the first load
        if self.store is None:
            self.store = TransactionStore.from_input(self.input_data)

        self.min_support_count = resolve_min_support(self.min_support, self.store.n_transactions)
        logger.info("mining %d transactions with minimum support count %d and minimum confidence %s",
                    self.store.n_transactions, self.min_support_count, self.min_confidence)

        # find_itemsets
        self.frequent_sets = find_frequent_itemsets(self.store, self.min_support_count, self.counting_strategy)

        # find_rules
        rules = find_strong_rules(self.frequent_sets, self.min_confidence, self.store.n_transactions)
        logger.info("found %d association rules", len(rules))

        return Associations(self.frequent_sets, rules, self.store.n_transactions, self.min_support_count,
                            self.min_confidence, self.decimal_precision)


# ################## configuration ###################
def is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def check_min_support(min_support):
    if not is_number(min_support) or not np.isfinite(min_support):
        raise ConfigurationError("min_support", min_support, "must be a finite number")
    if min_support < 0:
        raise ConfigurationError("min_support", min_support, "must not be negative")


def check_min_confidence(min_confidence):
    if not is_number(min_confidence) or not 0 <= min_confidence <= 1:
        raise ConfigurationError("min_confidence", min_confidence, "must be a number in [0, 1]")


def check_decimal_precision(decimal_precision):
    if not isinstance(decimal_precision, numbers.Integral) or isinstance(decimal_precision, bool) \
            or decimal_precision < 0:
        raise ConfigurationError("decimal_precision", decimal_precision, "must be a non-negative integer")


def resolve_min_support(min_support, n_transactions):
    """Absolute support count for min_support.

    Values below 1 are a fraction of n_transactions, anything else is already a count.
    Either way the value is rounded to the nearest integer with halves rounded up, and
    never drops below 1.
    """
    if min_support < 1:
        min_support = min_support * n_transactions
    return max(int(np.floor(min_support + 0.5)), 1)


# ################## level-wise search ###################
def find_frequent_itemsets(store, min_support, counting_strategy=AUTO):
    """Run Level1 -> Filtering -> (Generating -> Counting -> Filtering)* until a level is empty.

    Returns the frozen FrequentSetTable of levels 1..k*, k* being the last non-empty level.
    """
    frequent_sets = FrequentSetTable()

    # Level1
    k = 1
    candidates = initial_candidates(store)

    while True:
        # Filtering
        frequent = candidates.filter(min_support)
        logger.info("level %d: %d candidates, %d frequent itemsets", k, len(candidates), len(frequent))
        if not frequent:
            break
        frequent_sets.append(frequent)

        k += 1
        # Generating
        candidates = generate_candidates(frequent)
        # Counting
        count_support(candidates, store.transactions, k, counting_strategy)

    # Done
    frequent_sets.freeze()
    logger.debug("mining finished after level %d with level sizes %s", k, frequent_sets.level_sizes())
    return frequent_sets
