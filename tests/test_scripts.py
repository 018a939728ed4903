"""Tests for the report scripts that are importable as modules."""
import json
import pathlib
import sys

SCRIPTS_DIR = pathlib.Path(__file__).resolve().parents[1] / "scripts"
if str(SCRIPTS_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPTS_DIR))

import brute_force_growth  # noqa: E402
import compare_instances  # noqa: E402

CLASSIC_4_TSP = """NAME: classic4
TYPE: TSP
DIMENSION: 4
EDGE_WEIGHT_TYPE: EXPLICIT
EDGE_WEIGHT_FORMAT: UPPER_ROW
EDGE_WEIGHT_SECTION
10 15 20
35 25
30
EOF
"""


class TestCompareInstances:
    def test_reports_error_and_continues(self, tmp_path, capsys):
        (tmp_path / "classic4.tsp").write_text(CLASSIC_4_TSP, encoding="utf-8")
        exit_code = compare_instances.main(["missing.tsp", "classic4.tsp", "--data-dir", str(tmp_path)])
        lines = capsys.readouterr().out.splitlines()
        assert exit_code == 1
        assert any(line.startswith("missing.tsp") and "error" in line for line in lines)
        row = next(line for line in lines if line.startswith("classic4.tsp"))
        cells = [cell.strip() for cell in row.split("|")]
        assert cells[1] == "4"
        assert cells[2].startswith("80")

    def test_all_files_succeed(self, tmp_path, capsys):
        (tmp_path / "classic4.tsp").write_text(CLASSIC_4_TSP, encoding="utf-8")
        assert compare_instances.main([str(tmp_path / "classic4.tsp")]) == 0
        assert "error" not in capsys.readouterr().out


class TestBruteForceGrowth:
    def test_one_row_per_size(self, tmp_path, capsys):
        output = tmp_path / "growth.jsonl"
        exit_code = brute_force_growth.main(["--max-cities", "5", "--output", str(output), "--log-level", "WARNING"])
        assert exit_code == 0
        rows = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
        assert [row["num_cities"] for row in rows] == [2, 3, 4, 5]
        assert [row["permutations_evaluated"] for row in rows] == [1, 2, 6, 24]
        assert "Size (N)" in capsys.readouterr().out
