"""Shared pytest fixtures for enumlabel tests."""

from pathlib import Path

import pytest

from enumlabel.core import ir


def member(name: str, label: str | None = ..., *, empty: bool = False) -> ir.EnumMember:  # type: ignore[assignment]
    """
    Build an EnumMember.

    member("Credit", "Card")   -> labelled
    member("Debit", empty=True) -> label declared without a value
    member("Boleto")            -> no label
    """
    if empty:
        return ir.EnumMember(name=name, label=ir.DeclaredLabel.empty())
    if label is ...:
        return ir.EnumMember(name=name)
    return ir.EnumMember(name=name, label=ir.DeclaredLabel.of(label))


@pytest.fixture
def make_member():
    """Factory for EnumMember; see ``member``."""
    return member


@pytest.fixture
def payment_members() -> list[ir.EnumMember]:
    """The payment method enum used across tests."""
    return [
        member("Credit", "Card"),
        member("Pix", "Pix"),
        member("Debit", empty=True),
        member("Boleto"),
    ]


@pytest.fixture
def payment_spec(payment_members: list[ir.EnumMember]) -> ir.EnumSpec:
    return ir.EnumSpec(
        name="PaymentMethod",
        namespace="billing.models",
        policy=ir.AbsencePolicy.IGNORE,
        members=payment_members,
    )


@pytest.fixture
def enums_yaml(tmp_path: Path) -> Path:
    """A YAML declaration file with one enum per policy."""
    path = tmp_path / "enums.yml"
    path.write_text(
        """\
enums:
  - name: PaymentMethod
    namespace: billing_models
    policy: ignore
    members:
      - name: Credit
        label: Card
      - name: Pix
        label: Pix
      - name: Debit
        label: null
      - Boleto
  - name: Shipping
    namespace: billing_models
    policy: throw_at_runtime
    members:
      - name: Express
        label: Fast
      - name: Overnight
        label: fast
  - name: Currency
    namespace: billing_models
    policy: 3
    members:
      - Real
      - name: Dollar
        label: US Dollar
""",
        encoding="utf-8",
    )
    return path
