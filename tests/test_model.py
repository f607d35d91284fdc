"""Tests for roadmap.model -- enums, priority helpers, dataclass defaults."""

from roadmap.model import (
    ContentType,
    Item,
    Priority,
    Roadmap,
    Status,
    is_valid_priority,
    is_valid_status,
    priority_label,
    priority_label_full,
    priority_order,
    priority_order_list,
    status_order,
)

# -- priority_order ------------------------------------------------------------


class TestPriorityOrder:
    def test_ranks_known_priorities(self) -> None:
        assert priority_order(Priority.CRITICAL) == 1
        assert priority_order(Priority.HIGH) == 2
        assert priority_order(Priority.MEDIUM) == 3
        assert priority_order(Priority.LOW) == 4

    def test_accepts_plain_strings(self) -> None:
        assert priority_order("high") == 2

    def test_unknown_and_empty_rank_last(self) -> None:
        assert priority_order("") == 5
        assert priority_order("urgent") == 5
        assert priority_order("HIGH") == 5


# -- labels --------------------------------------------------------------------


class TestPriorityLabels:
    def test_short_labels(self) -> None:
        assert priority_label(Priority.CRITICAL) == "Critical"
        assert priority_label("medium") == "Medium"
        assert priority_label("") == "-"

    def test_full_labels(self) -> None:
        assert priority_label_full(Priority.CRITICAL) == "Critical"
        assert priority_label_full("high") == "High Priority"
        assert priority_label_full("low") == "Low Priority"
        assert priority_label_full("") == "Unspecified"


# -- canonical orders ----------------------------------------------------------


class TestCanonicalOrders:
    def test_status_order(self) -> None:
        assert status_order() == [Status.COMPLETED, Status.IN_PROGRESS, Status.PLANNED, Status.FUTURE]

    def test_priority_order_list_is_sorted_by_rank(self) -> None:
        ranks = [priority_order(p) for p in priority_order_list()]
        assert ranks == [1, 2, 3, 4]

    def test_returns_fresh_lists(self) -> None:
        status_order().append(Status.FUTURE)
        assert len(status_order()) == 4


# -- membership ----------------------------------------------------------------


class TestMembership:
    def test_status_values(self) -> None:
        for s in ("completed", "in_progress", "planned", "future"):
            assert is_valid_status(s)
        assert not is_valid_status("done")
        assert not is_valid_status("")

    def test_priority_values(self) -> None:
        assert is_valid_priority(Priority.LOW)
        assert not is_valid_priority("urgent")

    def test_enum_members_compare_to_strings(self) -> None:
        assert Status.IN_PROGRESS == "in_progress"
        assert ContentType.BLOCKQUOTE == "blockquote"
        assert len(list(ContentType)) == 6


# -- dataclass defaults --------------------------------------------------------


class TestDefaults:
    def test_empty_roadmap(self) -> None:
        r = Roadmap()
        assert r.items == []
        assert r.legend == {}
        assert r.generated_at is None
        assert r.dependencies is None

    def test_item_collections_not_shared(self) -> None:
        a, b = Item(), Item()
        a.depends_on.append("x")
        assert b.depends_on == []

    def test_classifiers_exported_from_package(self) -> None:
        import roadmap
        assert roadmap.is_valid_priority is is_valid_priority
        assert roadmap.is_valid_status is is_valid_status
        assert {"is_valid_priority", "is_valid_status"} <= set(roadmap.__all__)
