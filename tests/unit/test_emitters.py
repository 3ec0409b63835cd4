"""Tests for emitters: python helper modules and table dumps."""

from __future__ import annotations

import importlib.util
import json
import textwrap
from pathlib import Path
from types import ModuleType

import pytest
import yaml

from enumlabel.core.compiler import compile_enum
from enumlabel.core.errors import (
    AmbiguousLabelError,
    EmitterError,
    MissingLabelError,
    NoMatchError,
)
from enumlabel.core.ir import AbsencePolicy, CompiledEnum, EnumSpec
from enumlabel.emitters import (
    Emitter,
    EmitterRegistry,
    get_emitter,
    get_registry,
    snake_case,
)
from enumlabel.emitters.python import PythonEmitter, message_expr, pystr
from enumlabel.emitters.tables import JsonEmitter, table_document

ENUM_MODULE = textwrap.dedent(
    """\
    from enum import Enum


    class PaymentMethod(Enum):
        Credit = 1
        Pix = 2
        Debit = 3
        Boleto = 4


    class Shipping(Enum):
        Express = 1
        Overnight = 2
        Pickup = 3
    """
)


def _spec(name: str, policy: AbsencePolicy, members: list) -> EnumSpec:
    return EnumSpec(name=name, namespace="emit_models", policy=policy, members=members)


@pytest.fixture
def models_dir(tmp_path: Path, monkeypatch) -> Path:
    (tmp_path / "emit_models.py").write_text(ENUM_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return tmp_path


def _import(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(path.stem, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _generate(compiled: CompiledEnum, out: Path) -> ModuleType:
    result = PythonEmitter().emit(compiled, out)
    (path,) = result.files_created
    return _import(path)


class TestPythonEmitter:
    def test_ignore_module(self, models_dir: Path, payment_members) -> None:
        compiled = compile_enum(_spec("PaymentMethod", AbsencePolicy.IGNORE, payment_members))

        module = _generate(compiled, models_dir / "gen")
        enum = module.PaymentMethod

        assert module.get_available_descriptions() == ("Card", "Pix")
        assert module.get_description_fast(enum.Credit) == "Card"
        assert module.get_description_fast(enum.Debit) is None
        assert module.get_enum_from_description_fast("CARD") is enum.Credit
        assert module.get_enum_from_description_fast("boleto") is None

    def test_throw_module(self, models_dir: Path, make_member) -> None:
        members = [
            make_member("Express", "Fast"),
            make_member("Overnight", "FAST"),
            make_member("Pickup"),
        ]
        compiled = compile_enum(_spec("Shipping", AbsencePolicy.THROW_AT_RUNTIME, members))

        module = _generate(compiled, models_dir / "gen")
        enum = module.Shipping

        assert module.get_description_fast(enum.Overnight) == "FAST"
        with pytest.raises(MissingLabelError, match="label for member Pickup not found"):
            module.get_description_fast(enum.Pickup)
        with pytest.raises(AmbiguousLabelError, match="label 'Fast'"):
            module.get_enum_from_description_fast("Fast")
        with pytest.raises(NoMatchError, match="no member for label 'Drone'"):
            module.get_enum_from_description_fast("Drone")

    def test_use_member_name_module(self, models_dir: Path, payment_members) -> None:
        compiled = compile_enum(
            _spec("PaymentMethod", AbsencePolicy.USE_MEMBER_NAME, payment_members)
        )

        module = _generate(compiled, models_dir / "gen")
        enum = module.PaymentMethod

        assert module.get_description_fast(enum.Boleto) == "Boleto"
        assert module.get_enum_from_description_fast("DEBIT") is enum.Debit
        assert module.get_enum_from_description_fast("cash") is None

    def test_output_is_byte_stable(self, payment_spec: EnumSpec) -> None:
        emitter = PythonEmitter()
        first = emitter.render(compile_enum(payment_spec))
        second = PythonEmitter().render(compile_enum(payment_spec))

        assert first == second
        assert first.endswith("return None\n")
        assert not first.endswith("\n\n")

    def test_default_case_is_last(self, payment_spec: EnumSpec) -> None:
        source = PythonEmitter().render(compile_enum(payment_spec))
        reverse = source.split("def get_enum_from_description_fast")[1]

        cases = [line.strip() for line in reverse.splitlines() if line.strip().startswith("case ")]
        assert cases == ['case "card":', 'case "pix":', "case _:"]

    def test_labels_are_escaped(self, make_member) -> None:
        spec = _spec("Quote", AbsencePolicy.IGNORE, [make_member("A", 'say "hi"\\')])

        source = PythonEmitter().render(compile_enum(spec))

        assert r'return "say \"hi\"\\"' in source

    def test_namespace_required(self, make_member) -> None:
        spec = EnumSpec(name="E", policy=AbsencePolicy.IGNORE, members=[make_member("A")])
        with pytest.raises(EmitterError, match="no namespace"):
            PythonEmitter().render(compile_enum(spec))

    @pytest.mark.parametrize("namespace", ["billing-models", "billing..models", "billing.class"])
    def test_namespace_must_be_module_path(self, namespace: str, make_member) -> None:
        spec = EnumSpec(
            name="E", namespace=namespace, policy=AbsencePolicy.IGNORE, members=[make_member("A")]
        )
        with pytest.raises(EmitterError, match="not an importable module path"):
            PythonEmitter().render(compile_enum(spec))

    def test_member_names_must_be_identifiers(self, make_member) -> None:
        spec = _spec("E", AbsencePolicy.IGNORE, [make_member("not valid")])
        with pytest.raises(EmitterError, match="not a valid Python identifier"):
            PythonEmitter().render(compile_enum(spec))

    def test_empty_enum_renders_valid_python(self) -> None:
        source = PythonEmitter().render(compile_enum(_spec("Empty", AbsencePolicy.IGNORE, [])))
        compile(source, "empty_labels.py", "exec")

    def test_filename(self, payment_spec: EnumSpec) -> None:
        assert PythonEmitter().filename(compile_enum(payment_spec)) == "payment_method_labels.py"


class TestHelpers:
    def test_message_expr(self) -> None:
        assert message_expr("no member for label '{label}'", "x") == "\"no member for label '\" + x + \"'\""
        assert message_expr("{label}", "x") == "x"
        assert message_expr("plain", "x") == '"plain"'

    def test_pystr_keeps_unicode(self) -> None:
        assert pystr("Cartão") == '"Cartão"'

    @pytest.mark.parametrize(
        "name,expected",
        [("PaymentMethod", "payment_method"), ("HTTPCode", "httpcode"), ("V2Status", "v2_status")],
    )
    def test_snake_case(self, name: str, expected: str) -> None:
        assert snake_case(name) == expected


class TestTableEmitters:
    def test_json_dump(self, payment_spec: EnumSpec, tmp_path: Path) -> None:
        result = JsonEmitter().emit(compile_enum(payment_spec), tmp_path)

        data = json.loads(result.files_created[0].read_text(encoding="utf-8"))
        assert data["policy"] == "ignore"
        assert data["available_labels"] == ["Card", "Pix"]
        assert data["reverse"][-1] == {
            "key": None,
            "value": {"kind": "none"},
            "is_collision": False,
        }
        assert data["forward"][0]["value"] == {"kind": "label", "text": "Card"}

    def test_yaml_matches_json_document(self, payment_spec: EnumSpec) -> None:
        compiled = compile_enum(payment_spec)
        rendered = get_emitter("yaml").render(compiled)

        assert yaml.safe_load(rendered) == table_document(compiled)


class TestRegistry:
    def test_builtins_discovered(self) -> None:
        assert get_registry().list_emitters() == ["json", "python", "yaml"]

    def test_unknown_emitter(self) -> None:
        with pytest.raises(EmitterError, match="Available emitters"):
            get_emitter("cobol")

    def test_duplicate_registration(self) -> None:
        registry = EmitterRegistry()
        registry.register("python", PythonEmitter)
        with pytest.raises(EmitterError, match="already registered"):
            registry.register("python", PythonEmitter)

    def test_register_requires_emitter_subclass(self) -> None:
        registry = EmitterRegistry()
        with pytest.raises(EmitterError, match="must extend Emitter"):
            registry.register("bad", dict)  # type: ignore[arg-type]

    def test_custom_emitter(self, payment_spec: EnumSpec, tmp_path: Path) -> None:
        class CountEmitter(Emitter):
            name = "count"

            def render(self, compiled, **options):
                return f"{len(compiled.members)}\n"

            def filename(self, compiled):
                return f"{compiled.name}.count"

        registry = EmitterRegistry()
        registry.register("count", CountEmitter)

        result = registry.get("count").emit(compile_enum(payment_spec), tmp_path)

        assert result.files_created[0].read_text() == "4\n"
        assert registry.get("count").get_capabilities().name == "count"
