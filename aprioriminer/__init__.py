from aprioriminer.AprioriMiner import AprioriMiner, resolve_min_support
from aprioriminer.Associations import AssociationRule, Associations
from aprioriminer.Errors import AprioriMinerError, ConfigurationError, InvariantViolation, TransactionFormatError
from aprioriminer.Itemset import Itemset
from aprioriminer.Transactions import TransactionStore

__version__ = "1.0.0"
