#
# INSPEKT - Options Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from inspekt.options import PrinterOptions, configure, get_options
from inspekt.printer import Printer


# Tests ----------------------------------------------------------------------------------------------------------------

class TestPrinterOptions:
    def test_defaults(self):
        """Expose the documented defaults."""
        opts = PrinterOptions()
        assert (opts.indent, opts.max_depth, opts.max_line_width, opts.max_items_per_line) == (2, 4, 80, 5)
        assert opts.annotations is True
        assert opts.repeats_as_circular is True
        assert opts.on_error == "ignore"

    def test_frozen(self):
        """Reject attribute assignment after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            PrinterOptions().indent = 4  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs, match",
        [
            pytest.param({"indent": "2"}, "indent must be int", id="indent-str"),
            pytest.param({"max_depth": 1.5}, "max_depth must be int", id="depth-float"),
            pytest.param({"max_line_width": True}, "max_line_width must be int", id="width-bool"),
            pytest.param({"annotations": 1}, "annotations must be bool", id="annotations-int"),
            pytest.param({"repeats_as_circular": None}, "repeats_as_circular must be bool", id="repeats-none"),
        ],
    )
    def test_type_errors(self, kwargs, match):
        """Raise TypeError for wrongly typed fields."""
        with pytest.raises(TypeError, match=match):
            PrinterOptions(**kwargs)

    @pytest.mark.parametrize(
        "kwargs, match",
        [
            pytest.param({"indent": -1}, "indent must be >= 0", id="indent-negative"),
            pytest.param({"max_depth": -1}, "max_depth must be >= 0", id="depth-negative"),
            pytest.param({"max_line_width": 0}, "max_line_width must be >= 1", id="width-zero"),
            pytest.param({"max_items_per_line": 0}, "max_items_per_line must be >= 1", id="items-zero"),
            pytest.param({"on_error": "raise"}, "on_error must be", id="on-error"),
        ],
    )
    def test_value_errors(self, kwargs, match):
        """Raise ValueError for out-of-range fields."""
        with pytest.raises(ValueError, match=match):
            PrinterOptions(**kwargs)

    @pytest.mark.parametrize(
        "kwargs",
        [
            pytest.param({"indent": 0}, id="indent-zero"),
            pytest.param({"max_depth": 0}, id="depth-zero"),
            pytest.param({"max_line_width": 1, "max_items_per_line": 1}, id="minimal"),
        ],
    )
    def test_boundaries_accepted(self, kwargs):
        """Accept the smallest valid values."""
        PrinterOptions(**kwargs)

    def test_merge(self):
        """Override given fields and inherit the rest."""
        base = PrinterOptions(indent=4, max_depth=1)
        merged = base.merge(max_depth=3, annotations=False)
        assert merged == PrinterOptions(indent=4, max_depth=3, annotations=False)
        assert base.max_depth == 1

    def test_merge_validates(self):
        """Validate merged values."""
        with pytest.raises(ValueError):
            PrinterOptions().merge(max_items_per_line=0)

    @pytest.mark.parametrize(
        "preset, expected",
        [
            pytest.param(PrinterOptions.compact, {"max_depth": 2, "max_line_width": 120, "max_items_per_line": 10},
                         id="compact"),
            pytest.param(PrinterOptions.debug, {"max_depth": 8, "repeats_as_circular": False, "on_error": "warn"},
                         id="debug"),
            pytest.param(PrinterOptions.plain, {"annotations": False}, id="plain"),
        ],
    )
    def test_presets(self, preset, expected):
        """Build presets as defaults with a few overrides."""
        assert preset() == PrinterOptions(**expected)


class TestModuleConfig:
    def test_default(self):
        """Start from the default options."""
        assert get_options() == PrinterOptions()

    def test_configure_preset(self):
        """Replace the module-wide options with a preset plus overrides."""
        opts = configure(preset="compact", indent=4)
        assert opts == PrinterOptions.compact().merge(indent=4)
        assert get_options() is opts

    def test_configure_merges_current(self):
        """Merge into the current options when no preset is given."""
        configure(preset="debug")
        opts = configure(indent=0)
        assert opts == PrinterOptions.debug().merge(indent=0)

    def test_unknown_preset(self):
        """Reject unknown preset names and keep the current options."""
        before = get_options()
        with pytest.raises(ValueError, match="preset expected one of"):
            configure(preset="loud")  # type: ignore[arg-type]
        assert get_options() is before

    def test_printer_uses_module_options(self):
        """Apply module-wide options to printers created without options."""
        configure(indent=5)
        assert Printer().options.indent == 5
        assert Printer(options=PrinterOptions()).options.indent == 2
