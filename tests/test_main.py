"""Tests for the command-line entry point (exit codes, flags, output location)."""

import locale
from pathlib import Path

import pytest

from bhom_converter import main as cli
from bhom_converter.config import Config
from bhom_converter.models import Point2D
from bhom_converter.processors import BatchProcessor
from bhom_converter.processors.visualizers import BatchVisualizer
from bhom_converter.serialization import from_json
from bhom_converter.utils import Log


# ── Exit codes ───────────────────────────────────────────────────────

class TestExitCodes:

    def test_missing_input_directory(self, tmp_path, capsys):
        out_dir = tmp_path / "out"
        code = cli.main(["--dir", str(tmp_path / "missing"), "--out", str(out_dir)])
        assert code == 1
        assert not out_dir.exists()
        assert "Directory not found" in capsys.readouterr().err

    def test_malformed_and_valid_file(self, tmp_path, write_json):
        in_dir, out_dir = tmp_path / "in", tmp_path / "out"
        write_json(in_dir, "bad.json", "{ nope")
        write_json(in_dir, "good.json", "[[1, 2]]")

        assert cli.main(["-d", str(in_dir), "-o", str(out_dir)]) == 0
        assert (out_dir / "good.json").exists()
        assert not (out_dir / "bad.json").exists()

    def test_empty_input_directory(self, tmp_path):
        in_dir = tmp_path / "in"
        in_dir.mkdir()
        assert cli.main(["-d", str(in_dir)]) == 0

    def test_unexpected_error(self, tmp_path, monkeypatch, capsys):
        in_dir = tmp_path / "in"
        in_dir.mkdir()

        def explode(self):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(BatchProcessor, "run", explode)
        assert cli.main(["-d", str(in_dir)]) == 1
        assert "disk on fire" in capsys.readouterr().err


# ── Flags ────────────────────────────────────────────────────────────

class TestFlags:

    def test_default_output_next_to_input(self, tmp_path, write_json):
        in_dir = tmp_path / "datasets_original"
        write_json(in_dir, "curve.json", "[[1, 2]]")
        assert cli.main(["--dir", str(in_dir)]) == 0
        assert (tmp_path / "datasets_BHoM" / "curve.json").exists()

    def test_generic_mode_without_bhom_serializer(self, tmp_path, write_json):
        in_dir, out_dir = tmp_path / "in", tmp_path / "out"
        write_json(in_dir, "cfg.json", '{"Flow": 12, "flow": 13}')
        code = cli.main(["-d", str(in_dir), "-o", str(out_dir), "-m", "generic", "--serializer", "none"])
        assert code == 0
        assert (out_dir / "cfg.json").read_text(encoding="utf-8") == '{"Flow": 13}'

    def test_series_mode_without_bhom_serializer(self, tmp_path, write_json):
        in_dir, out_dir = tmp_path / "in", tmp_path / "out"
        write_json(in_dir, "curve.json", "[[1, 2]]")
        code = cli.main(["-d", str(in_dir), "-o", str(out_dir), "--serializer", "none"])
        assert code == 0
        assert not (out_dir / "curve.json").exists()

    def test_indent(self, tmp_path, write_json):
        in_dir, out_dir = tmp_path / "in", tmp_path / "out"
        write_json(in_dir, "curve.json", "[[1, 2]]")
        cli.main(["-d", str(in_dir), "-o", str(out_dir), "--indent", "2"])
        assert "\n  " in (out_dir / "curve.json").read_text(encoding="utf-8")

    def test_verbose_enables_trace(self, tmp_path, write_json, capsys):
        in_dir = tmp_path / "in"
        write_json(in_dir, "curve.json", "[[1, 2]]")
        cli.main(["-d", str(in_dir), "-v"])
        assert Log.verbose is True
        assert "[Trace] Starting: DataSeriesInterpreter.interpret" in capsys.readouterr().out

    def test_unknown_mode_rejected(self):
        with pytest.raises(SystemExit):
            cli.main(["-m", "xml"])

    def test_visualize_only_files_written_this_run(self, tmp_path, write_json, monkeypatch):
        in_dir, out_dir = tmp_path / "in", tmp_path / "out"
        write_json(in_dir, "curve.json", "[[1, 2]]")
        write_json(in_dir, "junk.json", "{}")
        write_json(out_dir, "stale.json", "[[9, 9]]")
        seen = []

        def record(self, show=True, files=None):
            seen.append(files)
            return len(files or [])

        monkeypatch.setattr(BatchVisualizer, "run", record)
        assert cli.main(["-d", str(in_dir), "-o", str(out_dir), "--visualize"]) == 0
        assert seen == [[out_dir.resolve() / "curve.json"]]

    def test_visualize_skipped_when_nothing_written(self, tmp_path, write_json, monkeypatch):
        in_dir, out_dir = tmp_path / "in", tmp_path / "out"
        write_json(in_dir, "junk.json", "{}")
        write_json(out_dir, "stale.json", "[[9, 9]]")
        seen = []
        monkeypatch.setattr(BatchVisualizer, "run", lambda self, show=True, files=None: seen.append(files))
        assert cli.main(["-d", str(in_dir), "-o", str(out_dir), "--visualize"]) == 0
        assert seen == []


# ── Locale ───────────────────────────────────────────────────────────

class TestLocale:

    def test_environment_locale_applied(self, tmp_path, write_json, monkeypatch, comma_decimal_locale):
        locale.setlocale(locale.LC_NUMERIC, "C")
        monkeypatch.setenv("LC_ALL", comma_decimal_locale)
        in_dir, out_dir = tmp_path / "in", tmp_path / "out"
        write_json(in_dir, "curve.json", '[["1,5", "2,5"]]')

        assert cli.main(["-d", str(in_dir), "-o", str(out_dir)]) == 0
        assert locale.localeconv()["decimal_point"] == ","
        series = from_json((out_dir / "curve.json").read_text(encoding="utf-8"))
        assert series.data_points == [Point2D(1.5, 2.5)]

    def test_setlocale_called_with_environment(self, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(cli.locale, "setlocale", lambda category, name=None: calls.append((category, name)))
        in_dir = tmp_path / "in"
        in_dir.mkdir()
        assert cli.main(["-d", str(in_dir)]) == 0
        assert (locale.LC_NUMERIC, "") in calls

    def test_unknown_environment_locale_warns(self, tmp_path, write_json, monkeypatch, capsys):
        monkeypatch.setenv("LC_ALL", "xx_NOWHERE.UTF-8")
        in_dir, out_dir = tmp_path / "in", tmp_path / "out"
        write_json(in_dir, "curve.json", "[[1, 2]]")

        assert cli.main(["-d", str(in_dir), "-o", str(out_dir)]) == 0
        assert "Could not apply environment locale" in capsys.readouterr().err
        assert (out_dir / "curve.json").exists()


# ── Config ───────────────────────────────────────────────────────────

class TestConfig:

    def test_original_suffix_replaced(self):
        assert Config.default_output_dir(Path("/data/datasets_original")) == Path("/data/datasets_BHoM")

    def test_plain_name_suffixed(self):
        assert Config.default_output_dir(Path("/data/curves")) == Path("/data/curves_BHoM")

    def test_bare_suffix_name_kept(self):
        assert Config.default_output_dir(Path("/data/_original")) == Path("/data/_original_BHoM")
