import argparse
import logging
import os
import sys
import time

from aprioriminer.AprioriMiner import AprioriMiner
from aprioriminer.Errors import AprioriMinerError
from aprioriminer.Report import report_results, write_frames
from aprioriminer.SupportCounter import STRATEGIES
from aprioriminer.Transactions import TransactionStore

logger = logging.getLogger("aprioriminer")


def build_parser():
    parser = argparse.ArgumentParser(prog="aprioriminer",
                                     description="Find frequent itemsets and strong association rules "
                                                 "in a transaction file with the Apriori algorithm.")
    parser.add_argument("file", help="transaction file, one transaction per line "
                                     "(comma separated for .csv, whitespace separated otherwise)")
    parser.add_argument("min_support", type=float,
                        help="minimum support, a fraction of the transactions if below 1, otherwise a count")
    parser.add_argument("min_confidence", type=float, help="minimum confidence of a rule, in [0, 1]")
    parser.add_argument("report_option", nargs="?", default="a",
                        help="f: print frequent itemset counts, r: print the rule count, a: both (default), "
                             "anything else: print neither")
    parser.add_argument("--precision", type=int, default=2,
                        help="digits of support and confidence in the result files (default 2)")
    parser.add_argument("--output-dir", default=".", help="directory for the result files (default .)")
    parser.add_argument("--counting", choices=STRATEGIES, default="auto", help="support counting strategy")
    parser.add_argument("--csv", action="store_true", help="also write the results as csv tables")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log progress, twice for debug output")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    timer_start = time.perf_counter()
    print("Timer starts ...")

    try:
        store = TransactionStore.from_file(args.file)
        for line in store.describe():
            print(line)

        miner = AprioriMiner(min_support=args.min_support,
                             min_confidence=args.min_confidence,
                             input_data=store,
                             decimal_precision=args.precision,
                             counting_strategy=args.counting)
        associations = miner.fit()

        os.makedirs(args.output_dir, exist_ok=True)
        report_results(associations, args.report_option, args.output_dir)
        if args.csv:
            write_frames(associations, args.output_dir)
    except (AprioriMinerError, OSError) as err:
        logger.error("%s", err)
        return 1

    print("Elapsed time = %s seconds." % round(time.perf_counter() - timer_start, 3))
    return 0


if __name__ == "__main__":
    sys.exit(main())
