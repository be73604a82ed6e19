from aprioriminer.Errors import InvariantViolation


def frozen_guard(base, name):
    def guard(self, *args, **kwargs):
        if self.frozen:
            raise InvariantViolation("cannot %s a frozen %s" % (name.strip("_"), type(self).__name__))
        return getattr(base, name)(self, *args, **kwargs)
    guard.__name__ = name
    return guard


# ############################# Class ItemsetTable #############################
class ItemsetTable(dict):
    """Mapping from Itemset to support count.

    Used both as the transient candidate table of one level and, once filtered, as that
    level's frequent-set table. A frozen table rejects every change.
    """
    frozen = False

    __setitem__ = frozen_guard(dict, "__setitem__")
    __delitem__ = frozen_guard(dict, "__delitem__")
    update = frozen_guard(dict, "update")
    setdefault = frozen_guard(dict, "setdefault")
    pop = frozen_guard(dict, "pop")
    popitem = frozen_guard(dict, "popitem")
    clear = frozen_guard(dict, "clear")

    def freeze(self):
        self.frozen = True

    def filter(self, min_support):
        return ItemsetTable((itemset, count) for itemset, count in self.items() if count >= min_support)

    # every item that appears in at least one itemset of the table, in ascending order
    def all_items(self):
        items = set()
        for itemset in self:
            items.update(itemset)
        return sorted(items)

    def sorted_items(self):
        return sorted(self.items())


# ############################# Class FrequentSetTable #############################
class FrequentSetTable(list):
    """The frequent-set tables of levels 1..k, where index k - 1 holds the k-itemsets.

    It grows by one level per mining iteration and is frozen once mining ends: after freeze()
    neither the list of levels nor any level's table can be changed.
    """
    frozen = False

    append = frozen_guard(list, "append")
    extend = frozen_guard(list, "extend")
    insert = frozen_guard(list, "insert")
    pop = frozen_guard(list, "pop")
    remove = frozen_guard(list, "remove")
    clear = frozen_guard(list, "clear")
    sort = frozen_guard(list, "sort")
    reverse = frozen_guard(list, "reverse")
    __setitem__ = frozen_guard(list, "__setitem__")
    __delitem__ = frozen_guard(list, "__delitem__")
    __iadd__ = frozen_guard(list, "__iadd__")
    __imul__ = frozen_guard(list, "__imul__")

    def freeze(self):
        for level in self:
            level.freeze()
        self.frozen = True

    def level(self, k):
        if 1 <= k <= len(self):
            return self[k - 1]
        return ItemsetTable()

    def support_count(self, itemset):
        return self.level(len(itemset)).get(itemset, 0)

    def itemsets(self):
        for level in self:
            for itemset, count in level.items():
                yield itemset, count

    def level_sizes(self):
        return [len(level) for level in self]
