import logging

from aprioriminer.Associations import AssociationRule
from aprioriminer.Errors import InvariantViolation
from aprioriminer.Itemset import Itemset, k_subsets

logger = logging.getLogger(__name__)


def find_strong_rules(frequent_sets, min_confidence, n_transactions):
    """Derive every association rule meeting min_confidence from the frequent-set table.

    For each frequent itemset S of size k >= 2 and each j-subset X of S (0 < j < k), the
    complement Y = S - X is the antecedent and X the consequent:
    confidence = count(S) / count(Y). Level 1 has no non-trivial split and gives no rules.
    """
    rules = []
    for k in range(2, len(frequent_sets) + 1):
        n_level_rules = 0
        for itemset, count in frequent_sets.level(k).sorted_items():
            support = count / n_transactions
            for j in range(1, k):
                for consequent in k_subsets(itemset, j):
                    antecedent = itemset.difference(consequent)
                    confidence = count / antecedent_count(frequent_sets, antecedent, itemset)
                    if confidence >= min_confidence:
                        rules.append(AssociationRule(antecedent, Itemset(consequent), support, confidence))
                        n_level_rules += 1
        logger.info("found %d association rules from frequent %d-itemsets", n_level_rules, k)
    return rules


def antecedent_count(frequent_sets, antecedent, itemset):
    # every subset of a frequent itemset was itself retained as frequent
    count = frequent_sets.support_count(antecedent)
    if count <= 0:
        raise InvariantViolation("antecedent %s of frequent itemset %s is missing from the frequent-set table"
                                 % (list(antecedent), list(itemset)))
    return count
