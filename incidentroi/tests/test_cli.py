from data.samples import generate_synthetic_metrics, save_dataset
from evaluation.cli import main


def test_cli_prints_summary(capsys) -> None:
    assert main(["--profile", "lean"]) == 0
    out = capsys.readouterr().out
    assert "Profile: lean" in out
    assert "$609,000" in out


def test_cli_reads_metric_flags(capsys) -> None:
    assert main(["--average-incidents-per-month", "0", "--revenue-per-minute", "abc"]) == 0
    out = capsys.readouterr().out
    assert "N/A" in out


def test_cli_compare_and_unknown_profile(capsys) -> None:
    assert main(["--compare", "standard", "lean"]) == 0
    out = capsys.readouterr().out
    assert "standard" in out and "lean" in out

    assert main(["--compare", "platinum"]) == 2
    assert "Unknown scenario profile" in capsys.readouterr().out


def test_cli_batch_csv(tmp_path, capsys) -> None:
    path = save_dataset(generate_synthetic_metrics(n_records=8, seed=1), tmp_path / "metrics.csv")
    assert main(["--csv", str(path)]) == 0
    assert "records: 8" in capsys.readouterr().out
