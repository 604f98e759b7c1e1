from __future__ import annotations

from contextlib import redirect_stderr, redirect_stdout
import io
import json
from pathlib import Path
import tempfile
import unittest

from colorline.cli import build_chart, main
from colorline.errors import ChartDataError
from colorline.series import CROSS, FULL_LINE
from colorline.settings import Settings


class BuildChartTests(unittest.TestCase):
    def test_builds_each_series_kind(self) -> None:
        document = {
            "series": [
                {"kind": "markers", "points": {"0": 1, "1": 3, "x": 9}, "colors": ["green"], "colors_down": ["red"]},
                {"kind": "point", "x": 2, "y": 2.0, "appearance": CROSS},
                {"kind": "line", "value": 2.5, "appearance": FULL_LINE},
            ]
        }
        chart = build_chart(document, Settings())
        markers, point, line = chart.series
        self.assertEqual(markers.points, ((0, 1.0), (1, 3.0)))
        self.assertEqual(markers.colors_down, ("red",))
        self.assertEqual(point.appearance, CROSS)
        self.assertEqual(line.reference, 2.5)

    def test_rejects_malformed_documents(self) -> None:
        for document in (
            {},
            {"series": [1]},
            {"series": [{"kind": "bars"}]},
            {"series": [{"kind": "point", "x": 1}]},
            {"series": [{"kind": "line"}]},
        ):
            with self.assertRaises(ChartDataError):
                build_chart(document, Settings())


class MainTests(unittest.TestCase):
    def _write(self, td: str, name: str, content: str) -> Path:
        path = Path(td) / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_render_prints_plain_chart(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            data = self._write(td, "data.json", json.dumps({"series": [{"points": [1.0, 3.0, 2.0]}]}))
            out = io.StringIO()
            with redirect_stdout(out):
                code = main(["render", str(data), "--height", "4", "--offset", "6", "--colorizer", "plain"])
        self.assertEqual(code, 0)
        self.assertEqual(out.getvalue().splitlines()[0], " 3.00┤╭╮")

    def test_render_reads_toml_config(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            data = self._write(td, "data.json", json.dumps({"series": [{"kind": "line", "value": 1.0}]}))
            config = self._write(td, "chart.toml", '[chart]\noffset = 4\ncolorizer = "plain"\nwidth = 3\n')
            out = io.StringIO()
            with redirect_stdout(out):
                code = main(["render", str(data), "--config", str(config)])
        self.assertEqual(code, 0)
        self.assertEqual(out.getvalue().splitlines()[0], "1.0┼╌╌╌")

    def test_bad_input_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            data = self._write(td, "data.json", json.dumps({"series": []}))
            err = io.StringIO()
            with redirect_stderr(err):
                code = main(["render", str(data)])
            self.assertEqual(code, 2)
            self.assertIn("colorline:", err.getvalue())

            err = io.StringIO()
            with redirect_stderr(err):
                code = main(["render", str(Path(td) / "missing.json")])
            self.assertEqual(code, 2)

    def test_unknown_log_level_is_a_usage_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            data = self._write(td, "data.json", json.dumps({"series": [{"points": [1.0, 2.0]}]}))
            err = io.StringIO()
            with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
                main(["--log-level", "FOO", "render", str(data)])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("--log-level", err.getvalue())

    def test_log_level_is_case_insensitive(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            data = self._write(td, "data.json", json.dumps({"series": [{"points": [1.0, 2.0]}]}))
            with redirect_stdout(io.StringIO()):
                code = main(["--log-level", "debug", "render", str(data), "--colorizer", "plain"])
        self.assertEqual(code, 0)


if __name__ == "__main__":
    unittest.main()
