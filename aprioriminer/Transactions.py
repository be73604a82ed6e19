import logging
import os

import numpy as np
import pandas as pd

from aprioriminer.Errors import TransactionFormatError
from aprioriminer.Itemset import Itemset

logger = logging.getLogger(__name__)


class TransactionStore:
    """The transaction database: every basket as an Itemset plus the global count of each item.

    Built once before mining and read-only afterwards.
    """

    def __init__(self, transactions=(), source="<memory>"):
        self.source = source
        self.transactions = []
        for line_no, transaction in enumerate(transactions, 1):
            try:
                self.transactions.append(Itemset(transaction))
            except TypeError as err:
                raise TransactionFormatError(source, line_no, "invalid items (%s)" % err)

        # total number of transactions in DB
        self.n_transactions = len(self.transactions)
        # item -> number of transactions holding it
        try:
            self.item_counts = count_items(self.transactions)
        except TypeError as err:
            raise TransactionFormatError(source, None, "items are not mutually comparable (%s)" % err)

        logger.debug("loaded %d transactions with %d distinct items from %s",
                     self.n_transactions, len(self.item_counts), source)

    @classmethod
    def from_frame(cls, input_data, source="<DataFrame>"):
        """Each row of the data frame is one basket; blank and missing cells are ignored."""
        transactions = []
        for row in input_data.itertuples(index=False):
            transactions.append([to_item(value) for value in row if not is_blank(value)])
        return cls(transactions, source=source)

    @classmethod
    def from_file(cls, path):
        """
        :param
        @path - one transaction per line, items separated by commas in a .csv file
            and by whitespace in any other file
        """
        delimiter = "," if os.path.splitext(path)[1].lower() == ".csv" else None
        transactions = []
        with open(path, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, 1):
                transactions.append(parse_transaction(line, delimiter, path, line_no))
        logger.info("read %d transactions from %s", len(transactions), path)
        return cls(transactions, source=path)

    @classmethod
    def from_input(cls, input_data):
        if isinstance(input_data, TransactionStore):
            return input_data
        if isinstance(input_data, pd.DataFrame):
            return cls.from_frame(input_data)
        if isinstance(input_data, (str, os.PathLike)):
            return cls.from_file(os.fspath(input_data))
        return cls(input_data)

    def __len__(self):
        return self.n_transactions

    def __iter__(self):
        return iter(self.transactions)

    def describe(self):
        return ["There are %d lines of transactions in this database." % self.n_transactions,
                "There are %d different items in this database." % len(self.item_counts)]


def count_items(transactions):
    all_items = [item for transaction in transactions for item in transaction]
    if not all_items:
        return {}
    # a flat object array keeps the original item values (tuple items are not unpacked into
    # a second dimension), and sorting it rejects unorderable mixes
    values = np.empty(len(all_items), dtype=object)
    for i, item in enumerate(all_items):
        values[i] = item
    items, counts = np.unique(values, return_counts=True)
    return dict(zip(items.tolist(), counts.tolist()))


def parse_transaction(line, delimiter, source, line_no):
    # csv exports may quote the whole line
    line = line.strip().strip("\"'")
    tokens = [token.strip() for token in line.split(delimiter)]
    items = []
    for token in tokens:
        if not token:
            continue
        try:
            items.append(int(token))
        except ValueError:
            raise TransactionFormatError(source, line_no, "item %r is not an integer" % token)
    return items


def to_item(value):
    # numpy scalars from typed columns become plain python values
    if isinstance(value, np.generic):
        return value.item()
    return value


def is_blank(value):
    if isinstance(value, str):
        return value.strip() == ""
    return pd.isna(value)
