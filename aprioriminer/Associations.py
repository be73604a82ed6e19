import pandas as pd

from aprioriminer.Itemset import Itemset


class AssociationRule:
    """antecedent -> consequent, derived from the frequent itemset antecedent | consequent.

    support is the fraction of transactions holding the whole itemset, confidence is
    support(antecedent | consequent) / support(antecedent).
    """

    def __init__(self, antecedent, consequent, support, confidence):
        self.antecedent = Itemset(antecedent)
        self.consequent = Itemset(consequent)
        self.support = support
        self.confidence = confidence

    @property
    def itemset(self):
        return Itemset(self.antecedent + self.consequent)

    def key(self):
        return self.antecedent, self.consequent, self.support, self.confidence

    def __eq__(self, other):
        if not isinstance(other, AssociationRule):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __repr__(self):
        return "AssociationRule(%s -> %s, support=%r, confidence=%r)" % (
            list(self.antecedent), list(self.consequent), self.support, self.confidence)

    def to_text(self, precision=2):
        return "%s -> %s (%s, %s)" % (self.antecedent, self.consequent,
                                      format_fraction(self.support, precision),
                                      format_fraction(self.confidence, precision))


class Associations:
    """What AprioriMiner.fit() returns.

    :param
    @frequent_sets - the frozen FrequentSetTable, levels 1..k of frequent itemsets with their counts
    @rules - list of AssociationRule meeting min_confidence
    @n_transactions - total number of transactions mined
    @min_support - the resolved absolute support threshold
    @min_confidence - the confidence threshold
    @decimal_precision - digits used when support and confidence are rendered as text
    """
    def __init__(self, frequent_sets, rules, n_transactions, min_support, min_confidence, decimal_precision=2):
        self.frequent_sets = frequent_sets
        self.rules = rules
        self.n_transactions = n_transactions
        self.min_support = min_support
        self.min_confidence = min_confidence
        self.decimal_precision = decimal_precision

    def frequent_itemsets_text(self):
        """One text per non-empty level, a line "1, 2 (0.40)" per itemset."""
        texts = []
        for level in self.frequent_sets:
            lines = ["%s (%s)" % (itemset, format_fraction(count / self.n_transactions, self.decimal_precision))
                     for itemset, count in level.sorted_items()]
            if lines:
                texts.append("\n".join(lines) + "\n")
        return texts

    # rules grouped by the size of the itemset they were derived from, for k = 2..max level
    def rules_by_level(self):
        levels = dict((k, []) for k in range(2, len(self.frequent_sets) + 1))
        for rule in self.rules:
            levels.setdefault(len(rule.itemset), []).append(rule)
        return levels

    def frequent_itemsets_frame(self):
        records = []
        for k, level in enumerate(self.frequent_sets, 1):
            for itemset, count in level.sorted_items():
                records.append({"k": k,
                                "itemset": itemset,
                                "support_count": count,
                                "support": count / self.n_transactions})
        return pd.DataFrame(records, columns=["k", "itemset", "support_count", "support"])

    def rules_frame(self):
        records = [{"antecedent": rule.antecedent,
                    "consequent": rule.consequent,
                    "support": rule.support,
                    "confidence": rule.confidence} for rule in self.rules]
        return pd.DataFrame(records, columns=["antecedent", "consequent", "support", "confidence"])


def format_fraction(value, precision):
    return "%.*f" % (precision, value)
