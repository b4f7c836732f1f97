"""Tests for console logging and the once-per-key diagnostics log."""

import logging

from enc_symbology import cli
from enc_symbology.logging_config import DIAGNOSTICS_LOGGER, DiagnosticLog, setup_logging


PROGRESS = logging.getLogger("enc_symbology.api")


class TestDiagnosticLog:

    def test_each_key_is_reported_once(self, diagnostics):
        assert diagnostics.report("LIGHTS05", "missing COLOUR", "light 12") is True
        assert diagnostics.report("LIGHTS05", "missing COLOUR", "light 13") is False
        assert diagnostics.report("LIGHTS05", "directional light without ORIENT") is True
        assert diagnostics.suppressed == 1
        assert diagnostics.seen("LIGHTS05", "missing COLOUR")

    def test_reset(self, diagnostics):
        diagnostics.report("SOUNDG02", "sounding without depth")
        diagnostics.reset()
        assert not diagnostics.seen("SOUNDG02", "sounding without depth")
        assert diagnostics.report("SOUNDG02", "sounding without depth") is True
        assert diagnostics.suppressed == 0


class TestSetupLogging:

    def test_progress_and_diagnostics_go_to_stderr(self, capsys):
        setup_logging()
        PROGRESS.info("indexed 3 features")
        DiagnosticLog().report("DEPCNT02", "contour without VALDCO", "feature 7")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "indexed 3 features" in captured.err
        assert "WARNING: DEPCNT02: contour without VALDCO (feature 7)" in captured.err

    def test_quiet_keeps_diagnostics(self, capsys):
        setup_logging(verbosity=-1)
        PROGRESS.info("indexed 3 features")
        DiagnosticLog(f"{DIAGNOSTICS_LOGGER}.quiet").report("OBSTRN04", "missing WATLEV")
        err = capsys.readouterr().err
        assert "indexed 3 features" not in err
        assert "OBSTRN04: missing WATLEV" in err

    def test_hidden_diagnostics_still_reach_log_file(self, capsys, tmp_path):
        log_file = tmp_path / "symbology.log"
        setup_logging(log_file=str(log_file), diagnostics=False)
        DiagnosticLog(f"{DIAGNOSTICS_LOGGER}.file").report("WRECKS02", "missing WATLEV")
        assert "WRECKS02" not in capsys.readouterr().err
        assert "WRECKS02: missing WATLEV" in log_file.read_text()

    def test_environment_override(self, capsys, monkeypatch):
        monkeypatch.setenv("ENC_SYMBOLOGY_LOG_LEVEL", "ERROR")
        setup_logging()
        PROGRESS.warning("slow cell")
        assert "slow cell" not in capsys.readouterr().err


def test_cli_no_diagnostics_flag(monkeypatch, capsys, tmp_path):
    cell = tmp_path / "cell.yaml"
    cell.write_text(
        "features:\n"
        "  - {id: 1, class: DEPCNT, kind: Line, coordinates: [[0, 0], [1, 1]]}\n"
    )
    monkeypatch.setattr("sys.argv", ["enc-symbology", "symbolize", str(cell), "--no-diagnostics"])
    assert cli.main() == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("1\t")
    assert "WARNING" not in captured.err
