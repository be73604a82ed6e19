# ############################# Class Itemset #############################
class Itemset(tuple):
    """Canonical itemset: the items sorted in ascending order without duplicates.

    Equality and hashing are those of the underlying tuple, so two itemsets built from
    the same items in any order are the same key in an ItemsetTable.
    """
    __slots__ = ()

    def __new__(cls, items=()):
        return super(Itemset, cls).__new__(cls, sorted(set(items)))

    def union(self, item):
        return Itemset(self + (item,))

    def without(self, item):
        return Itemset(i for i in self if i != item)

    def difference(self, other):
        other = set(other)
        return Itemset(i for i in self if i not in other)

    # all (k-1)-subsets, obtained by removing exactly one item at a time
    def immediate_subsets(self):
        for item in self:
            yield self.without(item)

    def __repr__(self):
        return "Itemset(%s)" % list(self)

    def __str__(self):
        return ", ".join(str(item) for item in self)


def k_subsets(items, k, start=0):
    """Yield every k-element combination of items[start:] as a tuple.

    Combinations come out in lexicographic order of position, each exactly once. Choosing
    the first element at position i and recursing from i + 1 keeps the order fixed, so
    sorted input gives sorted (canonical) output.
    """
    if k == 0:
        yield ()
        return
    # the last position from which k items can still be taken
    for i in range(start, len(items) - k + 1):
        head = (items[i],)
        for tail in k_subsets(items, k - 1, i + 1):
            yield head + tail
