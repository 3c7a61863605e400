from typing import Any, Sequence

import jax
import jax.numpy as jnp
import numpy as np

from fractional.core.fraction import Fraction


def to_float64(x: Fraction) -> np.float64:
    # IEEE division: 0/0 is nan, n/0 is +-inf
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.float64(x.numerator) / np.float64(x.denominator)


def to_float32(x: Fraction) -> np.float32:
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.float32(x.numerator) / np.float32(x.denominator)


def tree_to_float(tree: Any) -> Any:
    """
    Replaces every fraction in a pytree by its float64 projection as a Python float. Other leaves are kept.

    Args:
        tree (Any): Arbitrary pytree, fractions may appear anywhere

    Returns:
        Any: Pytree of the same structure
    """
    return jax.tree.map(
        lambda leaf: float(to_float64(leaf)) if isinstance(leaf, Fraction) else leaf,
        tree,
        is_leaf=lambda node: isinstance(node, Fraction),
    )


def to_array(fractions: Sequence[Fraction], dtype: Any = None) -> jax.Array:
    """Stacks the float projections of fractions into a 1D jax array. The dtype defaults to jax's float type."""
    return jnp.asarray([float(to_float64(f)) for f in fractions], dtype=dtype)
