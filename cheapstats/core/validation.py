"""
Input validation utilities for cheapstats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Real

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from cheapstats.core.exceptions import InvalidArgumentError, TooFewSamplesError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects None and
    inputs that result in object dtype (indicating mixed types or
    non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        InvalidArgumentError: If input is missing or cannot be converted
    """
    if array is None:
        raise InvalidArgumentError(f"{name}: required, got None")

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise InvalidArgumentError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, bool, etc.)
    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise InvalidArgumentError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise InvalidArgumentError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        InvalidArgumentError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise InvalidArgumentError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        InvalidArgumentError: If array is not 1D
    """
    if array.ndim != 1:
        raise InvalidArgumentError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        TooFewSamplesError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise TooFewSamplesError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            n_samples=n,
            min_samples=min_samples,
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a finite real scalar query argument.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        value as a Python float

    Raises:
        InvalidArgumentError: If value is missing, non-real, or non-finite
    """
    if value is None:
        raise InvalidArgumentError(f"{name}: required, got None")

    if (
        isinstance(value, (bool, np.bool_, np.complexfloating))
        or not isinstance(value, (Real, np.number))
    ):
        raise InvalidArgumentError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )

    result = float(value)
    if not math.isfinite(result):
        raise InvalidArgumentError(f"{name}: must be finite, got {result}")

    return result


def check_choice(value: Any, choices: tuple[str, ...], name: str) -> str:
    """
    Verify a keyword option is one of the allowed choices.

    Raises:
        InvalidArgumentError: If value is not in choices
    """
    if value not in choices:
        allowed = ", ".join(repr(c) for c in choices)
        raise InvalidArgumentError(f"{name}: must be one of {allowed}, got {value!r}")
    return value
