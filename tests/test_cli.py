import pytest

from aprioriminer.__main__ import main
from aprioriminer.Report import RULES_CSV, RULES_FILE, frequent_itemsets_file


@pytest.fixture
def transaction_file(tmp_path):
    path = tmp_path / "transactions.txt"
    path.write_text("1 2 3\n1 2\n1 3\n2 3\n1\n")
    return str(path)


def test_main_writes_results_and_summary(transaction_file, tmp_path, capsys):
    out = tmp_path / "out"
    assert main([transaction_file, "2", "0.5", "--output-dir", str(out)]) == 0

    stdout = capsys.readouterr().out.splitlines()
    assert stdout[0] == "Timer starts ..."
    assert "There are 5 lines of transactions in this database." in stdout
    assert "There are 3 different items in this database." in stdout
    assert "Number of frequent 1_itemsets: 3" in stdout
    assert "Number of frequent 2_itemsets: 3" in stdout
    assert "Number of association rules: 6" in stdout
    assert stdout[-1].startswith("Elapsed time = ")

    assert (out / frequent_itemsets_file(1)).read_text() == "1 (0.80)\n2 (0.60)\n3 (0.60)\n"
    assert (out / RULES_FILE).exists()
    assert not (out / RULES_CSV).exists()


def test_main_report_option_and_csv(transaction_file, tmp_path, capsys):
    out = tmp_path / "out"
    assert main([transaction_file, "0.4", "0.6", "f", "--output-dir", str(out), "--csv",
                 "--precision", "3", "--counting", "scan"]) == 0

    stdout = capsys.readouterr().out
    assert "Number of frequent 2_itemsets: 3" in stdout
    assert "Number of association rules" not in stdout
    assert (out / RULES_CSV).exists()
    assert (out / RULES_FILE).read_text().splitlines()[0] == "2 -> 1 (0.400, 0.667)"


def test_main_rejects_invalid_confidence(transaction_file, tmp_path):
    assert main([transaction_file, "2", "1.5", "--output-dir", str(tmp_path)]) == 1


def test_main_reports_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt"), "2", "0.5"]) == 1


def test_main_reports_malformed_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1 2\nfoo\n")
    assert main([str(path), "2", "0.5", "--output-dir", str(tmp_path)]) == 1


def test_main_requires_thresholds(transaction_file):
    with pytest.raises(SystemExit):
        main([transaction_file])
