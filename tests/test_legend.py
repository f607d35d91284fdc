"""Tests for roadmap.legend -- default legend and per-entry overrides."""

from roadmap.legend import default_legend, get_legend, get_status_emoji
from roadmap.model import LegendEntry, Roadmap, Status


def _roadmap(**overrides) -> Roadmap:
    base = {"ir_version": "1.0", "project": "test"}
    base.update(overrides)
    return Roadmap(**base)


class TestDefaultLegend:
    def test_covers_every_status(self) -> None:
        assert set(default_legend()) == {s.value for s in Status}

    def test_entries(self) -> None:
        legend = default_legend()
        assert legend["completed"] == LegendEntry("✅", "Completed")
        assert legend["in_progress"] == LegendEntry("🚧", "In Progress")
        assert legend["planned"] == LegendEntry("📋", "Planned")
        assert legend["future"] == LegendEntry("💡", "Under Consideration")

    def test_fresh_copy_each_call(self) -> None:
        default_legend()["completed"].emoji = "X"
        assert default_legend()["completed"].emoji == "✅"


class TestGetLegend:
    def test_no_document_legend(self) -> None:
        assert get_legend(_roadmap()) == default_legend()

    def test_override_single_entry(self) -> None:
        r = _roadmap(legend={"completed": LegendEntry("🎉", "Done")})
        legend = get_legend(r)
        assert legend["completed"] == LegendEntry("🎉", "Done")
        assert legend["in_progress"] == LegendEntry("🚧", "In Progress")
        assert legend["planned"] == LegendEntry("📋", "Planned")
        assert legend["future"] == LegendEntry("💡", "Under Consideration")

    def test_extra_keys_kept(self) -> None:
        legend = get_legend(_roadmap(legend={"blocked": LegendEntry("⛔", "Blocked")}))
        assert legend["blocked"].emoji == "⛔"
        assert len(legend) == 5

    def test_does_not_alias_document_entries(self) -> None:
        r = _roadmap(legend={"completed": LegendEntry("🎉", "Done")})
        get_legend(r)["completed"].emoji = "changed"
        assert r.legend["completed"].emoji == "🎉"


class TestGetStatusEmoji:
    def test_default_emoji(self) -> None:
        assert get_status_emoji(_roadmap(), Status.COMPLETED) == "✅"
        assert get_status_emoji(_roadmap(), "future") == "💡"

    def test_custom_emoji(self) -> None:
        r = _roadmap(legend={"planned": LegendEntry("🗓", "Scheduled")})
        assert get_status_emoji(r, "planned") == "🗓"

    def test_unknown_status(self) -> None:
        assert get_status_emoji(_roadmap(), "unknown") == ""
        assert get_status_emoji(_roadmap(), "") == ""
