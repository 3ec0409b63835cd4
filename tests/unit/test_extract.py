"""Tests for EnumSpec extraction from Python enum classes."""

import textwrap
from enum import Enum, IntEnum
from pathlib import Path

import pytest

from enumlabel.core.errors import LoadError, PolicyError
from enumlabel.core.extract import (
    declared_labels,
    discover_enums,
    spec_from_enum,
    specs_from_reference,
)
from enumlabel.core.ir import AbsencePolicy, DeclaredLabel, LabelState


class Status(IntEnum):
    __labels__ = {"OPEN": "Open", "CLOSED": None, "ARCHIVED": ""}

    OPEN = 1
    CLOSED = 2
    ARCHIVED = 3
    DRAFT = 4


class TestSpecFromEnum:
    def test_label_states(self) -> None:
        spec = spec_from_enum(Status, AbsencePolicy.IGNORE)

        states = {m.name: m.label.state for m in spec.members}
        assert states == {
            "OPEN": LabelState.PRESENT,
            "CLOSED": LabelState.PRESENT_EMPTY,
            "ARCHIVED": LabelState.PRESENT_EMPTY,
            "DRAFT": LabelState.ABSENT,
        }
        assert spec.members[0].label == DeclaredLabel.of("Open")

    def test_identity_and_order(self) -> None:
        spec = spec_from_enum(Status, 2)

        assert spec.name == "Status"
        assert spec.namespace == __name__
        assert spec.policy is AbsencePolicy.THROW_AT_RUNTIME
        assert [m.name for m in spec.members] == ["OPEN", "CLOSED", "ARCHIVED", "DRAFT"]

    def test_missing_policy(self) -> None:
        with pytest.raises(PolicyError):
            spec_from_enum(Status)

    def test_not_an_enum(self) -> None:
        with pytest.raises(LoadError, match="is not an Enum class"):
            spec_from_enum(dict, AbsencePolicy.IGNORE)  # type: ignore[arg-type]

    def test_unknown_label_keys_are_logged(self, caplog) -> None:
        class Small(Enum):
            __labels__ = {"A": "a", "Z": "z"}

            A = 1

        with caplog.at_level("WARNING", logger="enumlabel.core.extract"):
            spec = spec_from_enum(Small, AbsencePolicy.IGNORE)

        assert [m.name for m in spec.members] == ["A"]
        assert "unknown members: Z" in caplog.text


class TestDeclaredLabels:
    def test_non_string_label_rejected(self) -> None:
        class Bad(Enum):
            __labels__ = {"A": 42}

            A = 1

        with pytest.raises(LoadError, match="must be a string"):
            declared_labels(Bad)

    def test_labels_must_be_mapping(self) -> None:
        class Bad(Enum):
            __labels__ = ["A"]

            A = 1

        with pytest.raises(LoadError, match="must be a mapping"):
            declared_labels(Bad)

    def test_no_labels(self) -> None:
        class Bare(Enum):
            A = 1

        assert declared_labels(Bare) == {}


@pytest.fixture
def enum_module(tmp_path: Path, monkeypatch) -> str:
    """An importable module with decorated and plain enums."""
    (tmp_path / "shop_enums.py").write_text(
        textwrap.dedent(
            """\
            from enum import Enum

            from enumlabel import AbsencePolicy, generate_helper


            @generate_helper(AbsencePolicy.IGNORE)
            class PaymentMethod(Enum):
                __labels__ = {"Credit": "Card"}

                Credit = 1
                Boleto = 2


            @generate_helper(AbsencePolicy.USE_MEMBER_NAME)
            class Carrier(Enum):
                Post = 1


            class Undecorated(Enum):
                A = 1
            """
        ),
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    return "shop_enums"


class TestReferences:
    def test_module_reference_finds_decorated_enums(self, enum_module: str) -> None:
        specs = specs_from_reference(enum_module)

        assert [s.name for s in specs] == ["Carrier", "PaymentMethod"]

    def test_attribute_reference(self, enum_module: str) -> None:
        (spec,) = specs_from_reference(f"{enum_module}:PaymentMethod")

        assert spec.policy is AbsencePolicy.IGNORE
        assert spec.members[0].label.text == "Card"

    def test_discover_skips_plain_enums(self, enum_module: str) -> None:
        import importlib

        module = importlib.import_module(enum_module)
        assert "Undecorated" not in [e.__name__ for e in discover_enums(module)]

    def test_missing_module(self) -> None:
        with pytest.raises(LoadError, match="Cannot import module"):
            specs_from_reference("no_such_module_xyz")

    def test_missing_attribute(self, enum_module: str) -> None:
        with pytest.raises(LoadError, match="has no attribute 'Nope'"):
            specs_from_reference(f"{enum_module}:Nope")
