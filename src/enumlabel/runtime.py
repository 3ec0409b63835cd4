"""
Runtime lookups backed by compiled mapping tables.

This is the consumer side of the tables: it turns ``Failure`` markers into
exceptions and ``NoLabel`` into ``None`` at the moment a lookup hits them.

    @generate_helper(AbsencePolicy.THROW_AT_RUNTIME)
    class PaymentMethod(Enum):
        __labels__ = {"CREDIT": "Credit card", "PIX": "Pix"}

        CREDIT = 1
        PIX = 2
        CASH = 3

    PaymentMethod.CREDIT.get_description_fast()             # "Credit card"
    PaymentMethod.get_enum_from_description_fast("PIX")     # PaymentMethod.PIX
    PaymentMethod.CASH.get_description_fast()               # MissingLabelError
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, TypeVar

from .core.compiler import compile_enum
from .core.errors import (
    AmbiguousLabelError,
    LabelLookupError,
    MissingLabelError,
    NoMatchError,
)
from .core.extract import POLICY_ATTR, spec_from_enum
from .core.ir import (
    AbsencePolicy,
    CompiledEnum,
    Failure,
    FailureReason,
    LabelText,
    MemberRef,
    NoLabel,
    ResolvedValue,
    fold_key,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

COMPILED_ATTR = "__enumlabel__"

_ERRORS: dict[FailureReason, type[LabelLookupError]] = {
    FailureReason.MISSING_LABEL: MissingLabelError,
    FailureReason.AMBIGUOUS_LABEL: AmbiguousLabelError,
    FailureReason.NO_MATCH: NoMatchError,
}


def raise_failure(failure: Failure, label: str | None = None) -> None:
    """Raise the lookup error matching ``failure``."""
    error_cls = _ERRORS[failure.reason]
    raise error_cls(failure.render(label), label=label if label is not None else failure.subject)


class LabelHelper(Generic[E]):
    """
    Label lookups for one enum class.

    Args:
        enum_cls: The enum whose members the tables refer to
        compiled: Compiled tables; compiled from ``enum_cls`` when omitted
    """

    def __init__(self, enum_cls: type[E], compiled: CompiledEnum | None = None):
        self.enum_cls = enum_cls
        self.compiled = compiled or compile_enum(spec_from_enum(enum_cls))

        self._forward: dict[str, ResolvedValue] = {
            a.key: a.value for a in self.compiled.forward.entries if a.key is not None
        }
        self._forward_default = self.compiled.forward.default
        self._reverse: dict[str, ResolvedValue] = {
            fold_key(a.key): a.value for a in self.compiled.reverse.entries if a.key is not None
        }
        self._reverse_default = self.compiled.reverse.default

    def get_description(self, member: E) -> str | None:
        """
        Label of ``member``.

        Returns None for members without a label under the IGNORE policy.

        Raises:
            MissingLabelError: If the member has no label under THROW_AT_RUNTIME
        """
        value = self._forward.get(member.name)
        if value is None:
            if self._forward_default is None:
                raise MissingLabelError(
                    f"label for member {member.name} not found", label=member.name
                )
            value = self._forward_default.value

        match value:
            case LabelText(text=text):
                return text
            case NoLabel():
                return None
            case Failure():
                raise_failure(value, member.name)
        raise TypeError(f"Unexpected forward value {value!r}")

    def get_member(self, label: str) -> E | None:
        """
        Member whose label matches ``label`` case-insensitively.

        Returns None when nothing matches and the table has no failing
        default.

        Raises:
            AmbiguousLabelError: If several members share the label
            NoMatchError: If nothing matches under THROW_AT_RUNTIME
        """
        value = self._reverse.get(fold_key(label))
        if value is None:
            if self._reverse_default is None:
                return None
            value = self._reverse_default.value

        match value:
            case MemberRef(member=name):
                return self.enum_cls[name]
            case NoLabel():
                return None
            case Failure():
                raise_failure(value, label)
        raise TypeError(f"Unexpected reverse value {value!r}")

    def available_descriptions(self) -> tuple[str, ...]:
        """Distinct non-empty labels in declaration order."""
        return self.compiled.available_labels


def generate_helper(policy: Any) -> Callable[[type[E]], type[E]]:
    """
    Class decorator compiling label lookups onto an enum.

    Attaches:
        - ``member.get_description_fast()``
        - ``Enum.get_enum_from_description_fast(label)``
        - ``Enum.get_available_descriptions()``
        - ``Enum.__enumlabel__``: the CompiledEnum

    Raises:
        PolicyError: If ``policy`` is not a valid absence policy
    """
    resolved = AbsencePolicy.parse(policy)

    def decorator(enum_cls: type[E]) -> type[E]:
        setattr(enum_cls, POLICY_ATTR, resolved)
        helper = LabelHelper(enum_cls, compile_enum(spec_from_enum(enum_cls, resolved)))

        def get_description_fast(self: E) -> str | None:
            return helper.get_description(self)

        setattr(enum_cls, COMPILED_ATTR, helper.compiled)
        setattr(enum_cls, "get_description_fast", get_description_fast)
        setattr(enum_cls, "get_enum_from_description_fast", staticmethod(helper.get_member))
        setattr(
            enum_cls, "get_available_descriptions", staticmethod(helper.available_descriptions)
        )
        logger.debug("Attached label helpers to %s", enum_cls.__qualname__)
        return enum_cls

    return decorator


def helper_for(enum_cls: type[E]) -> LabelHelper[E]:
    """LabelHelper for a decorated enum, reusing its compiled tables."""
    compiled = vars(enum_cls).get(COMPILED_ATTR)
    return LabelHelper(enum_cls, compiled)
