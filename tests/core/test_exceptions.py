"""
Tests for the cheapstats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via CheapStatsError)
    - ErrorKind codes are stable and distinguishable
    - Diagnostic attributes on TooFewSamplesError, OutOfMemoryError,
      DegenerateSampleError
"""

import pytest

from cheapstats.core.exceptions import (
    CheapStatsError,
    DegenerateSampleError,
    ErrorKind,
    InvalidArgumentError,
    NumericalError,
    OutOfMemoryError,
    TooFewSamplesError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via CheapStatsError."""

    def test_invalid_argument_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidArgumentError("bad input")

    def test_too_few_samples_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise TooFewSamplesError("too few")

    def test_out_of_memory_is_cheapstats_error(self):
        with pytest.raises(CheapStatsError):
            raise OutOfMemoryError("no memory")

    def test_out_of_memory_is_not_validation_error(self):
        assert not issubclass(OutOfMemoryError, ValidationError)

    def test_degenerate_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DegenerateSampleError("std is zero")

    def test_not_caught_by_builtin_memory_error(self):
        assert not issubclass(OutOfMemoryError, MemoryError)


# ═══════════════════════════════════════════════════════════════════════
# Error codes
# ═══════════════════════════════════════════════════════════════════════


class TestErrorCodes:
    """Each exception maps to a stable integer code."""

    @pytest.mark.parametrize("exc_cls, kind, code", [
        (InvalidArgumentError, ErrorKind.INVALID_ARGUMENT, 1),
        (ValidationError, ErrorKind.INVALID_ARGUMENT, 1),
        (TooFewSamplesError, ErrorKind.TOO_FEW_SAMPLES, 2),
        (OutOfMemoryError, ErrorKind.OUT_OF_MEMORY, 3),
        (DegenerateSampleError, ErrorKind.DEGENERATE_SAMPLE, 4),
    ])
    def test_code(self, exc_cls, kind, code):
        exc = exc_cls("message")
        assert exc.kind is kind
        assert exc.code == code

    def test_codes_distinct(self):
        codes = [kind.value for kind in ErrorKind]
        assert len(codes) == len(set(codes))

    def test_code_is_int(self):
        assert type(TooFewSamplesError("x").code) is int


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_too_few_samples_attributes(self):
        exc = TooFewSamplesError("samples: need 10, got 3", n_samples=3, min_samples=10)
        assert exc.n_samples == 3
        assert exc.min_samples == 10
        assert str(exc) == "samples: need 10, got 3"

    def test_too_few_samples_defaults(self):
        exc = TooFewSamplesError("x")
        assert exc.n_samples is None
        assert exc.min_samples is None

    def test_out_of_memory_attributes(self):
        exc = OutOfMemoryError("alloc failed", n_samples=10**12)
        assert exc.n_samples == 10**12

    def test_degenerate_attributes(self):
        exc = DegenerateSampleError("z_score: std == 0", statistic="z_score", quantity="std")
        assert exc.statistic == "z_score"
        assert exc.quantity == "std"
        assert "z_score" in str(exc)
