#
# Bitsize - Transfer Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bitsize.errors import InvalidArgumentError, ParseError
from bitsize.rate import Rate
from bitsize.size import Size
from bitsize.transfer import (
    estimate_file_size,
    formatted_transfer_time,
    humanize_bytes,
    humanize_rate,
    transfer_amount,
    transfer_time,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestTransferTime:

    @pytest.mark.parametrize(
        "size, rate, expected",
        [
            pytest.param(Size(10 ** 9), Rate.from_unit(100, "Mbps"), 80, id="decimal-GB"),
            pytest.param(10 ** 9, "100 Mbps", 80, id="plain-numbers"),
            pytest.param(Size.from_unit(1, "GB"), Rate.mbps(100), 85.89934592, id="binary-GB"),
            pytest.param("1 MB", Rate.from_unit(10 * 1024 * 1024, "Bps"), 0.1, id="byte-rate"),
            pytest.param(Size(4 * 10 ** 9), "100 Mbps", 320, id="four-GB"),
            pytest.param(0, "1 Mbps", 0, id="empty"),
        ],
    )
    def test_seconds(self, size, rate, expected):
        assert transfer_time(size, rate) == pytest.approx(expected)

    def test_size_methods(self):
        assert Size(10 ** 9).get_transfer_time("100 Mbps") == 80
        assert Size(10 ** 9).get_transfer_time(100_000_000) == 80

    @pytest.mark.parametrize(
        "rate",
        [
            pytest.param(0, id="zero"),
            pytest.param("0 Mbps", id="zero-string"),
            pytest.param(-1, id="negative"),
            pytest.param(Rate(0), id="zero-rate"),
        ],
    )
    def test_non_positive_rate(self, rate):
        with pytest.raises(InvalidArgumentError, match=r"Rate must be positive"):
            transfer_time("1 GB", rate)

    def test_bad_operands(self):
        with pytest.raises(ParseError):
            transfer_time("1 GB", "fast")
        with pytest.raises(TypeError):
            transfer_time(Rate(1), Rate(1))


class TestFormattedTransferTime:

    def test_english(self, registry):
        assert formatted_transfer_time(Size(4 * 10 ** 9), "100 Mbps", registry=registry) == "5 minutes, 20 seconds"

    def test_language(self, registry):
        assert formatted_transfer_time(10 ** 9, "100 Mbps", "ru", registry) == "1 минута и 20 секунд"

    def test_instant(self, registry):
        assert formatted_transfer_time("1 kB", "1 Gbps", registry=registry) == "less than a second"

    def test_size_method(self, registry):
        text = Size("700 MB").get_formatted_transfer_time("10 MBps", "fr", registry=registry)
        assert text == "1 minute et 13 secondes"

    def test_default_registry(self):
        assert formatted_transfer_time(10 ** 9, "100 Mbps") == "1 minute, 20 seconds"


class TestTransferAmount:

    def test_amount(self):
        assert transfer_amount("50 Mbps", 1800).value == 11_250_000_000
        assert transfer_amount(Rate.mbyte_ps(1), 10).value == 10_000_000
        assert transfer_amount(8, 0.5).value == 0.5

    def test_estimate_file_size(self):
        size = estimate_file_size(Rate.mbps(10), 7200)
        assert isinstance(size, Size)
        assert size.value == 9_000_000_000
        assert size.humanize() == "8.38 GB"


class TestHumanizeHelpers:

    @pytest.mark.parametrize(
        "n, precision, delimiter, expected",
        [
            pytest.param(1536, 2, " ", "1.5 kB", id="default"),
            pytest.param(1048576, 2, " ", "1 MB", id="whole"),
            pytest.param(1100, 1, "", "1.1kB", id="delimiter"),
        ],
    )
    def test_humanize_bytes(self, n, precision, delimiter, expected):
        assert humanize_bytes(n, precision, delimiter) == expected

    @pytest.mark.parametrize(
        "bits_per_second, family, expected",
        [
            pytest.param(8000, "bit", "8 kbps", id="bit"),
            pytest.param(8000, "byte", "1 kBps", id="byte"),
            pytest.param(100_000_000, "byte", "12.5 MBps", id="byte-fraction"),
        ],
    )
    def test_humanize_rate(self, bits_per_second, family, expected):
        assert humanize_rate(bits_per_second, family) == expected
