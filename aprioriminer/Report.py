import logging
import os

logger = logging.getLogger(__name__)

RULES_FILE = "associationRules.txt"
FREQUENT_ITEMSETS_CSV = "frequent_itemsets.csv"
RULES_CSV = "association_rules.csv"

# console summaries printed for each report option
REPORT_ITEMSETS = ("f", "a")
REPORT_RULES = ("r", "a")


def frequent_itemsets_file(k):
    return "frequent %d_itemsets.txt" % k


# ############################# text files #############################
def write_frequent_itemsets(associations, output_dir="."):
    """Write frequent k_itemsets.txt for every non-empty level and return the paths written."""
    paths = []
    for k, text in enumerate(associations.frequent_itemsets_text(), 1):
        path = os.path.join(output_dir, frequent_itemsets_file(k))
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        paths.append(path)
    logger.debug("wrote %d frequent itemset files to %s", len(paths), output_dir)
    return paths


def write_rules(associations, output_dir="."):
    """Write every rule to associationRules.txt, one block per size of the itemset it came from."""
    path = os.path.join(output_dir, RULES_FILE)
    precision = associations.decimal_precision
    with open(path, "w", encoding="utf-8") as f:
        for k, rules in sorted(associations.rules_by_level().items()):
            f.write("\n".join(rule.to_text(precision) for rule in rules))
            f.write("\n")
    logger.debug("wrote %d rules to %s", len(associations.rules), path)
    return path


# ############################# csv files #############################
def write_frames(associations, output_dir="."):
    itemsets_path = os.path.join(output_dir, FREQUENT_ITEMSETS_CSV)
    rules_path = os.path.join(output_dir, RULES_CSV)

    itemsets = associations.frequent_itemsets_frame()
    itemsets["itemset"] = itemsets["itemset"].map(str)
    itemsets.to_csv(itemsets_path, index=False)

    rules = associations.rules_frame()
    rules["antecedent"] = rules["antecedent"].map(str)
    rules["consequent"] = rules["consequent"].map(str)
    rules.to_csv(rules_path, index=False)

    return itemsets_path, rules_path


# ############################# console #############################
def summary_lines(associations, report_option="a"):
    lines = []
    if report_option in REPORT_ITEMSETS:
        for k, size in enumerate(associations.frequent_sets.level_sizes(), 1):
            lines.append("Number of frequent %d_itemsets: %d" % (k, size))
    if report_option in REPORT_RULES:
        lines.append("Number of association rules: %d" % len(associations.rules))
    return lines


def report_results(associations, report_option="a", output_dir="."):
    """
    :param
    @report_option - 'f' prints the itemset counts, 'r' the rule count, 'a' both, anything else nothing.
        The result files are written regardless.
    """
    write_frequent_itemsets(associations, output_dir)
    write_rules(associations, output_dir)
    for line in summary_lines(associations, report_option):
        print(line)
