"""
Printer behavior on NumPy values, skipped when numpy is not installed
"""

import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from inspekt.kinds import Kind, classify
from inspekt.options import PrinterOptions
from inspekt.printer import Printer
from inspekt.styles import PlainAnnotator

# Integration Tests ----------------------------------------------------------------------------------------------------

pytestmark = pytest.mark.integration

# Optional imports -----------------------------------------------------------------------------------------------------

np = pytest.importorskip("numpy")


class TestNumpyIntegration:
    """Integration tests for NumPy scalars and arrays."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(np.int64(5), "5", id="int64"),
            pytest.param(np.float64(1.5), "1.5", id="float64"),
        ],
    )
    def test_scalars_are_numbers(self, value, expected):
        """Render NumPy scalars as numbers."""
        assert classify(value) is Kind.NUMBER
        assert Printer(annotator=PlainAnnotator()).format(value) == expected

    def test_array_is_opaque(self):
        """Render arrays with their own str() conversion."""
        printer = Printer(annotator=PlainAnnotator())
        assert printer.format(np.array([1, 2, 3])) == "[1 2 3]"

    def test_array_in_record(self):
        """Render arrays nested in records."""
        printer = Printer(options=PrinterOptions(), annotator=PlainAnnotator())
        assert printer.format({"w": np.array([1, 2])}) == "{ w: [1 2] }"
