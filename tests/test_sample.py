"""Tests for the HTTP status sample dictionary."""

from chaindict.data.sample import UNUSED_CODE, sample_dictionary


class TestSampleDictionary:
    """The sample layers exact phrases over class ranges."""

    def test_exact_phrase(self) -> None:
        d = sample_dictionary()
        assert d.get(404) == "Not Found"
        assert d.get(418) == "I'm a teapot"

    def test_class_fallback(self) -> None:
        d = sample_dictionary()
        assert d.get(299) == "Success"
        assert d.get(451) == "Client Error"
        assert d.get(599) == "Server Error"

    def test_outside_any_class(self) -> None:
        d = sample_dictionary()
        assert d.get(99) is None
        assert d.get(600) is None
        assert d.get("404") is None

    def test_removed_code_blocks_range(self) -> None:
        d = sample_dictionary()
        assert d.get(UNUSED_CODE) is None
        assert d.get(305) == "Redirection"

    def test_removed_code_can_be_reinstated(self) -> None:
        d = sample_dictionary().insert(UNUSED_CODE, "Switch Proxy")
        assert d.get(UNUSED_CODE) == "Switch Proxy"
