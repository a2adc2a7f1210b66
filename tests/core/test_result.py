"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from cheapstats import __version__
from cheapstats.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(params=FakeParams(value=1.0), info={}, timing=None, backend_name="cpu")
    defaults.update(kwargs)
    return Result(**defaults)


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"n": 10},
            timing={"total_seconds": 0.01},
            backend_name="cpu_summary",
        )
        assert result.params.value == 42.0
        assert result.info["n"] == 10
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_summary"

    def test_timing_none(self):
        assert _result().timing is None


class TestDefaults:

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_provenance_auto_generated(self):
        provenance = _result().provenance
        assert provenance["cheapstats_version"] == __version__
        assert "numpy_version" in provenance
        assert "python_version" in provenance

    def test_provenance_explicit_override(self):
        result = _result(provenance={"custom": "1"})
        assert result.provenance == {"custom": "1"}

    def test_default_provenance_is_fresh(self):
        assert _default_provenance() is not _default_provenance()


class TestImmutability:

    def test_cannot_reassign_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_reassign_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new",)


class TestHasWarning:

    def test_substring_match(self):
        result = _result(warnings=("samples are constant (std == 0)", "other"))
        assert result.has_warning("constant")
        assert result.has_warning("other")

    def test_no_match(self):
        assert not _result(warnings=("a",)).has_warning("b")

    def test_empty(self):
        assert not _result().has_warning("anything")
