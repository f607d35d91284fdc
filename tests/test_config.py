"""Tests for roadmap.config — IR constants and verbosity toggle."""

import pytest


# ── constants ──────────────────────────────────────────────────────────────────


class TestConstants:
    """Verify values the codec and validator depend on."""

    def test_ir_version(self) -> None:
        from roadmap.config import IR_VERSION
        assert IR_VERSION == "1.0"

    def test_file_format(self) -> None:
        from roadmap.config import FILE_MODE, JSON_INDENT, ROADMAP_FILENAME
        assert ROADMAP_FILENAME == "ROADMAP.json"
        assert JSON_INDENT == 2
        assert FILE_MODE == 0o600

    def test_console_is_shared(self) -> None:
        from rich.console import Console

        from roadmap.config import _console
        assert isinstance(_console, Console)


# ── Verbosity mode ───────────────────────────────────────────────────────────────


class TestVerbosityMode:
    """Verify set_verbose / is_verbose round-trip and default state."""

    def test_default_is_compact(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import roadmap.config as cfg
        monkeypatch.setattr(cfg, "_verbose", False)
        assert cfg.is_verbose() is False

    def test_set_verbose_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import roadmap.config as cfg
        monkeypatch.setattr(cfg, "_verbose", False)
        cfg.set_verbose(True)
        assert cfg.is_verbose() is True

    def test_set_verbose_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import roadmap.config as cfg
        monkeypatch.setattr(cfg, "_verbose", True)
        cfg.set_verbose(False)
        assert cfg.is_verbose() is False
