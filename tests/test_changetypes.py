"""Tests for roadmap.changetypes -- change-type registry."""

import json
from pathlib import Path

import pytest

from roadmap.changetypes import DEFAULT_CHANGE_TYPES, DEFAULT_REGISTRY, ChangeTypeRegistry
from roadmap.errors import ParseFailure, ReadFailure


class TestDefaultRegistry:
    @pytest.mark.parametrize("name", ["Added", "Changed", "Deprecated", "Removed", "Fixed", "Security"])
    def test_keep_a_changelog_names(self, name: str) -> None:
        assert DEFAULT_REGISTRY.is_valid_name(name)

    def test_extended_names(self) -> None:
        assert DEFAULT_REGISTRY.is_valid_name("Performance")
        assert DEFAULT_REGISTRY.is_valid_name("Known Issues")

    def test_exact_match_only(self) -> None:
        assert not DEFAULT_REGISTRY.is_valid_name("added")
        assert not DEFAULT_REGISTRY.is_valid_name(" Added")
        assert not DEFAULT_REGISTRY.is_valid_name("InvalidType")
        assert not DEFAULT_REGISTRY.is_valid_name("")

    def test_names_in_declared_order(self) -> None:
        assert DEFAULT_REGISTRY.names() == list(DEFAULT_CHANGE_TYPES)


class TestCustomRegistry:
    def test_extended_returns_new_registry(self) -> None:
        reg = DEFAULT_REGISTRY.extended(["Experimental"])
        assert reg.is_valid_name("Experimental")
        assert reg.is_valid_name("Added")
        assert not DEFAULT_REGISTRY.is_valid_name("Experimental")

    def test_duplicates_collapsed(self) -> None:
        reg = ChangeTypeRegistry(["A", "B", "A"])
        assert reg.names() == ["A", "B"]

    def test_from_file(self, tmp_path: Path) -> None:
        f = tmp_path / "types.json"
        f.write_text(json.dumps(["Experimental", "Refactor"]), encoding="utf-8")
        reg = ChangeTypeRegistry.from_file(f)
        assert reg.is_valid_name("Refactor")
        assert reg.is_valid_name("Fixed")

    def test_from_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ReadFailure):
            ChangeTypeRegistry.from_file(tmp_path / "nope.json")

    def test_from_malformed_file(self, tmp_path: Path) -> None:
        f = tmp_path / "types.json"
        f.write_text("[oops", encoding="utf-8")
        with pytest.raises(ParseFailure):
            ChangeTypeRegistry.from_file(f)

    def test_from_file_wrong_shape(self, tmp_path: Path) -> None:
        f = tmp_path / "types.json"
        f.write_text('{"names": ["A"]}', encoding="utf-8")
        with pytest.raises(ParseFailure, match="array of strings"):
            ChangeTypeRegistry.from_file(f)
