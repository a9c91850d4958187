import csv
import json
import re
from pathlib import Path

from apps.cli import run as run_cli
from packages.harness import run_case
from packages.harness.io import write_csv, write_manifest, timestamp_id


def test_write_csv_columns(tmp_path: Path):
    results = [run_case("GB", colors="RGB", code_pegs=2, allow_duplicates=True)]
    path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=4)

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    row = rows[0]
    assert row["secret"] == "GB" and row["success"] == "True"
    assert row["guess_1"] == "RR" and row["black_1"] == "0" and row["white_1"] == "0"
    assert row["guess_4"] == ""


def test_write_manifest_roundtrip(tmp_path: Path):
    path = write_manifest({"run_id": "x", "summary": {"num_cases": 1}}, str(tmp_path / "m.json"))
    assert json.loads(Path(path).read_text(encoding="utf-8"))["summary"]["num_cases"] == 1


def test_timestamp_id_format():
    assert re.fullmatch(r"\d{8}T\d{6}Z", timestamp_id())


def test_run_cli_writes_reports(tmp_path: Path, capsys):
    run_cli.main(["--colors", "RGB", "--pegs", "2", "--outdir", str(tmp_path), "--progress", "off"])
    out = capsys.readouterr().out
    assert "cases=9" in out
    assert len(list(tmp_path.glob("run_*.csv"))) == 1
    manifest = json.loads(next(tmp_path.glob("run_*_manifest.json")).read_text(encoding="utf-8"))
    assert manifest["summary"]["success_rate"] == 1.0
