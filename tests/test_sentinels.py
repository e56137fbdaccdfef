#
# INSPEKT - Sentinels Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import pickle

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from inspekt.sentinels import UNDEFINED, UNSET, Sentinel, UndefinedType, UnsetType, ifunset, is_absent


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSentinels:
    def test_singleton_identity(self):
        """Ensure each absence sentinel is a singleton object."""
        assert UNDEFINED is UndefinedType()
        assert UNSET is UnsetType()
        assert UNDEFINED is not UNSET

    @pytest.mark.parametrize(
        ("sentinel", "expected"),
        [
            pytest.param(UNDEFINED, "<UNDEFINED>", id="undefined"),
            pytest.param(UNSET, "<UNSET>", id="unset"),
            pytest.param(Sentinel("token"), "<token>", id="custom"),
        ],
    )
    def test_repr_clean(self, sentinel, expected):
        """Assert repr shows clean angle-bracketed name."""
        assert repr(sentinel) == expected

    def test_custom_sentinels_unique(self):
        """Keep same-named custom sentinels distinct."""
        a, b = Sentinel("X"), Sentinel("X")
        assert a is not b
        assert a != b
        assert a == a
        assert len({a, b}) == 2

    @pytest.mark.parametrize(
        "sentinel",
        [
            pytest.param(UNDEFINED, id="undefined"),
            pytest.param(UNSET, id="unset"),
            pytest.param(Sentinel("token"), id="custom"),
        ],
    )
    def test_falsy(self, sentinel):
        """Treat every sentinel as falsy."""
        assert not sentinel

    @pytest.mark.parametrize(
        "sentinel",
        [
            pytest.param(UNDEFINED, id="undefined"),
            pytest.param(UNSET, id="unset"),
        ],
    )
    def test_pickle_roundtrip_singleton(self, sentinel):
        """Ensure pickling preserves singleton identity."""
        assert pickle.loads(pickle.dumps(sentinel)) is sentinel


class TestHelpers:
    @pytest.mark.parametrize(
        ("value", "default", "expected"),
        [
            pytest.param(UNSET, 2, 2, id="unset"),
            pytest.param(None, 2, None, id="none-kept"),
            pytest.param(0, 2, 0, id="falsy-kept"),
            pytest.param(UNDEFINED, 2, UNDEFINED, id="undefined-kept"),
        ],
    )
    def test_ifunset(self, value, default, expected):
        """Replace only UNSET with the default."""
        assert ifunset(value, default=default) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            pytest.param(UNDEFINED, True, id="undefined"),
            pytest.param(UNSET, True, id="unset"),
            pytest.param(None, False, id="none"),
            pytest.param(Sentinel("UNSET"), False, id="lookalike"),
        ],
    )
    def test_is_absent(self, value, expected):
        """Recognize exactly the absence sentinels."""
        assert is_absent(value) is expected
