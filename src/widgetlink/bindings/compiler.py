"""Binding Compiler - declarative binding descriptors to rules."""

from collections.abc import Iterable, Mapping
from typing import Any

import pydantic
from returns.result import Failure, Result, Success

from widgetlink.core import get_logger, ValidationError, ValidationResult
from widgetlink.monitoring import metrics_collector
from .models import Action, BindingDescriptor, BindingMode, Rule

logger = get_logger(__name__)

DEFAULT_PROPERTY = "value"
TEXT_PROPERTY = "text"


def _is_dead(descriptor: BindingDescriptor) -> bool:
    """Indirect bindings without a 'via' widget can never fire."""
    return descriptor.mode is BindingMode.INDIRECT and not (descriptor.via or "").strip()


def validate_bindings(
    descriptors: Iterable[BindingDescriptor],
) -> Result[list[BindingDescriptor], ValidationResult]:
    """
    Check descriptors for bindings that would compile into dead rules.

    Args:
        descriptors: Binding descriptors

    Returns:
        Success with the descriptors, or Failure describing the first
        malformed one
    """
    checked = list(descriptors)
    for index, descriptor in enumerate(checked):
        if _is_dead(descriptor):
            return Failure(ValidationResult(
                f"Indirect binding {descriptor.source} -> {descriptor.target} has no 'via' widget",
                field=f"bindings[{index}].via",
                value=descriptor.via,
            ))
    return Success(checked)


class BindingCompiler:
    """
    Compiles binding descriptors into rules.

    Each descriptor becomes exactly one rule with exactly one action, in input
    order. Descriptors sharing a trigger are never merged.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def compile(self, descriptors: Iterable[BindingDescriptor]) -> list[Rule]:
        """
        Compile descriptors into rules.

        Args:
            descriptors: Binding descriptors

        Returns:
            One rule per descriptor, in input order

        Raises:
            ValidationError: In strict mode, for an indirect binding without 'via'
        """
        descriptors = list(descriptors)

        if self.strict:
            result = validate_bindings(descriptors)
            if isinstance(result, Failure):
                failure = result.failure()
                logger.error("malformed_binding", field=failure.field, error=failure.message)
                raise ValidationError(failure.message)

        rules = [self.compile_one(d) for d in descriptors]
        dead = sum(1 for d in descriptors if _is_dead(d))

        metrics_collector.record_compiled(len(rules), dead)
        logger.debug(
            "rules_compiled",
            count=len(rules),
            rules=[r.model_dump() for r in rules],
        )
        return rules

    def compile_one(self, descriptor: BindingDescriptor) -> Rule:
        """Compile a single descriptor."""
        if descriptor.mode is BindingMode.DIRECT:
            trigger = f"{descriptor.source}.onChange"
        else:
            trigger = f"{descriptor.via}.onClick"
            if _is_dead(descriptor):
                logger.warning(
                    "dead_rule",
                    source=descriptor.source,
                    target=descriptor.target,
                    trigger=trigger,
                )

        source_prop = (descriptor.source_property or "").strip() or DEFAULT_PROPERTY
        target_prop = (descriptor.target_property or "").strip() or DEFAULT_PROPERTY

        expression = "${" + descriptor.source + "." + source_prop + "}"
        if target_prop == TEXT_PROPERTY:
            action_type, args = "setText", {"text": expression}
        else:
            action_type, args = "setValue", {"value": expression}

        return Rule(
            trigger=trigger,
            actions=(Action(type=action_type, target=descriptor.target, args=args),),
        )


def compile_bindings(
    descriptors: Iterable[BindingDescriptor | Mapping[str, Any]],
    strict: bool = False,
) -> list[Rule]:
    """
    Convenience function to compile descriptors given as models or raw mappings.

    Args:
        descriptors: Descriptor models or mappings using the document's key names
        strict: Reject indirect bindings without 'via'

    Returns:
        Compiled rules

    Raises:
        ValidationError: If a mapping does not match the descriptor schema
    """
    models = []
    for index, item in enumerate(descriptors):
        if isinstance(item, BindingDescriptor):
            models.append(item)
            continue
        try:
            models.append(BindingDescriptor.model_validate(item))
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid binding at index {index}: {e}") from e

    return BindingCompiler(strict=strict).compile(models)
