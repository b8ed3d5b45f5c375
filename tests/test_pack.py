#
# Bitsize - Pack Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from packaging.version import InvalidVersion

# Local ----------------------------------------------------------------------------------------------------------------
import bitsize.pack
from bitsize.pack import is_pep440_version, package_version


# Tests ----------------------------------------------------------------------------------------------------------------

class TestPack:

    @pytest.mark.parametrize(
        "version, expected",
        [
            pytest.param("1.0.0", True, id="semantic"),
            pytest.param("2024.1", True, id="calendar"),
            pytest.param("1.0.0rc1", True, id="pre-release"),
            pytest.param("1.0.0-rc1", False, id="not-normalized"),
            pytest.param("one", False, id="invalid"),
        ],
    )
    def test_is_pep440_version(self, version, expected):
        assert is_pep440_version(version) is expected

    def test_is_pep440_version_raises(self):
        with pytest.raises(InvalidVersion, match=r"Normalized version can be 1.0.0rc1"):
            is_pep440_version("1.0.0-rc1", raise_exception=True)

    def test_package_version(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(target=bitsize.pack, name="metadata_version", value=lambda name: "0.1.0")
        assert package_version() == "0.1.0"

    def test_package_not_installed(self):
        with pytest.raises(ValueError, match=r"is not installed"):
            package_version("bitsize-no-such-distribution")
