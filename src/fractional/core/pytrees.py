from __future__ import annotations
from typing import Any, Self, TypeVar

import pytreeclass as tc
from pytreeclass._src.code_build import (
    NULL,
    ArgKindType,
    Field,
    build_init_method,
    convert_hints_to_fields,
    dataclass_transform,
)
from pytreeclass._src.code_build import field as tc_field


class TreeClass(tc.TreeClass):
    """Immutable pytree base for value types.

    Instances can only be changed by building a new one, which re-runs __post_init__ and therefore any validation
    or normalization the subclass performs there.
    """

    def updated_copy(self, **kwargs: Any) -> Self:
        """Returns a new instance with some init attributes replaced.

        Args:
            **kwargs: Dictionary mapping init attribute names to their new values.

        Returns:
            Self: A newly instantiated object with the updated attributes.
        """
        init_args = {f.name: getattr(self, f.name) for f in tc.fields(self) if f.init}
        unknown = set(kwargs) - set(init_args)
        if unknown:
            raise TypeError(f"{self.__class__.__name__} has no init attributes {sorted(unknown)}")
        init_args.update(kwargs)
        return self.__class__(**init_args)


T = TypeVar("T")


def frozen_field(*, default: Any = NULL, kind: ArgKindType = "KW_ONLY") -> Any:
    """Field whose value is stored frozen, so jax.tree utilities and jax.jit see it as structure, not a leaf.
    Reading the attribute gives back the plain value."""
    return tc_field(default=default, kind=kind, on_setattr=[tc.freeze], on_getattr=[tc.unfreeze])


@dataclass_transform(
    field_specifiers=(Field, tc_field, frozen_field),
    kw_only_default=True,
)
def autoinit(klass: type[T]) -> type[T]:
    """Builds __init__ from the annotated fields, unless the class defines its own."""
    if "__init__" in vars(klass):
        return klass
    return build_init_method(convert_hints_to_fields(klass))
