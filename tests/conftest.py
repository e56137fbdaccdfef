#
# INSPEKT - Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from inspekt.options import PrinterOptions, configure
from inspekt.printer import Printer
from inspekt.styles import PlainAnnotator


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def default_options():
    """Restore module-wide printer options around every test."""
    configure(preset="default")
    yield
    configure(preset="default")


@pytest.fixture
def make_printer() -> Callable[..., Printer]:
    """Factory for annotation-free printers with option overrides."""

    def _make(stream: str = "stdout", **overrides) -> Printer:
        return Printer(stream, PrinterOptions().merge(**overrides), annotator=PlainAnnotator())

    return _make


@pytest.fixture
def fmt(make_printer) -> Callable[..., str]:
    """Format a value with an annotation-free printer built from option overrides."""

    def _fmt(value, **overrides) -> str:
        return make_printer(**overrides).format(value)

    return _fmt
