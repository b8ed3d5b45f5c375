#
# Bitsize - Units Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bitsize.errors import UnknownUnitError
from bitsize.units import RATE_UNITS, SIZE_UNITS, UnitFamily


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUnitTable:

    def test_size_symbols(self):
        assert SIZE_UNITS.symbols() == ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
        assert len(SIZE_UNITS) == 9

    def test_rate_families(self):
        assert RATE_UNITS.families == (UnitFamily.BIT, UnitFamily.BYTE)
        assert RATE_UNITS.symbols("bit")[-1] == "Ybps"
        assert RATE_UNITS.symbols(UnitFamily.BYTE)[0] == "Bps"

    @pytest.mark.parametrize(
        "symbol, factor",
        [
            pytest.param("B", 1, id="B"),
            pytest.param("kB", 1024, id="kB"),
            pytest.param("MB", 1024 ** 2, id="MB"),
            pytest.param("YB", 1024 ** 8, id="YB"),
        ],
    )
    def test_size_factor(self, symbol, factor):
        assert SIZE_UNITS[symbol].factor == factor

    @pytest.mark.parametrize(
        "symbol, factor",
        [
            pytest.param("bps", 1, id="bps"),
            pytest.param("kbps", 1000, id="kbps"),
            pytest.param("Gbps", 10 ** 9, id="Gbps"),
            pytest.param("Bps", 8, id="Bps"),
            pytest.param("MBps", 8 * 10 ** 6, id="MBps"),
        ],
    )
    def test_rate_factor(self, symbol, factor):
        assert RATE_UNITS[symbol].factor == factor

    @pytest.mark.parametrize(
        "symbol, expected",
        [
            pytest.param("kb", "kB", id="size-lower"),
            pytest.param("GB", "GB", id="size-exact"),
            pytest.param("gB", "GB", id="size-mixed"),
        ],
    )
    def test_size_case_insensitive(self, symbol, expected):
        assert SIZE_UNITS.get(symbol).symbol == expected

    @pytest.mark.parametrize(
        "symbol, expected",
        [
            pytest.param("Mbps", "Mbps", id="exact-bit"),
            pytest.param("MBps", "MBps", id="exact-byte"),
            pytest.param("mbps", "Mbps", id="lower-bit-marker"),
            pytest.param("MBPS", "MBps", id="upper-byte-marker"),
            pytest.param("KBPS", "kBps", id="kilo-byte-marker"),
            pytest.param("BPS", "Bps", id="base-byte"),
        ],
    )
    def test_rate_marker_decides(self, symbol, expected):
        assert RATE_UNITS.get(symbol).symbol == expected

    def test_get_unknown(self):
        assert RATE_UNITS.get("XB") is None
        assert "XB" not in SIZE_UNITS
        assert "kb" in SIZE_UNITS

    def test_getitem_unknown(self):
        with pytest.raises(UnknownUnitError, match=r"Unsupported unit 'Mbps'"):
            SIZE_UNITS["Mbps"]

    def test_invalid_family(self):
        with pytest.raises(UnknownUnitError, match=r"Invalid unit family"):
            SIZE_UNITS.specs("bit")
        with pytest.raises(UnknownUnitError, match=r"Invalid unit family"):
            RATE_UNITS.symbols("nibble")


class TestConvertAndRender:

    def test_convert(self):
        assert SIZE_UNITS.convert(1536, "kB") == 1.5
        assert SIZE_UNITS.convert(1000, "kB", 2) == 0.98
        assert RATE_UNITS.convert(8000, "kBps") == 1

    def test_render_fixed(self):
        assert SIZE_UNITS.render(1536, "kB", 3, "_") == "1.500_kB"
        assert SIZE_UNITS.render(2048, "kB") == "2 kB"

    @pytest.mark.parametrize(
        "magnitude, expected",
        [
            pytest.param(0, "0 B", id="zero"),
            pytest.param(512, "512 B", id="bytes"),
            pytest.param(1023, "1023 B", id="below-kB"),
            pytest.param(1024, "1 kB", id="kB"),
            pytest.param(1536, "1.5 kB", id="fraction"),
            pytest.param(1048576, "1 MB", id="MB"),
            pytest.param(10 ** 9, "953.67 MB", id="decimal-GB"),
            pytest.param(-1536, "-1.5 kB", id="negative"),
            pytest.param(0.5, "0.5 B", id="below-one"),
        ],
    )
    def test_humanize_size(self, magnitude, expected):
        assert SIZE_UNITS.humanize(magnitude, UnitFamily.SIZE) == expected

    @pytest.mark.parametrize(
        "magnitude, family, expected",
        [
            pytest.param(100_000_000, "bit", "100 Mbps", id="bit"),
            pytest.param(100_000_000, "byte", "12.5 MBps", id="byte"),
            pytest.param(999, "bit", "999 bps", id="below-kbps"),
            pytest.param(4, "byte", "0.5 Bps", id="below-Bps"),
        ],
    )
    def test_humanize_rate(self, magnitude, family, expected):
        assert RATE_UNITS.humanize(magnitude, family) == expected

    def test_humanize_precision_and_delimiter(self):
        assert SIZE_UNITS.humanize(1100, "size", 0, "") == "1kB"
        assert SIZE_UNITS.humanize(1100, "size", 3) == "1.074 kB"
