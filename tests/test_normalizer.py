"""
Tests for domain normalization.
"""

import pytest

from login_finder.core.normalizer import (
    DomainValidationError,
    InvalidDomainError,
    MissingInputError,
    normalize_domain,
)


class TestNormalizeDomain:
    """Test extraction of a bare domain from free-form input."""

    def test_email_address(self):
        assert normalize_domain("user@example.com") == "example.com"

    def test_uses_part_after_last_at(self):
        assert normalize_domain('"odd@local"@Mail.Example.org') == "mail.example.org"

    def test_plain_domain_is_trimmed_and_lowercased(self):
        assert normalize_domain("  Example.COM \n") == "example.com"

    @pytest.mark.parametrize("raw", [
        "https://example.com/owa?x=1",
        "http://example.com:8443",
        "example.com#frag",
        "example.com/path/to",
        "someone@example.com/extra",
    ])
    def test_strips_scheme_port_path_query_fragment(self, raw):
        assert normalize_domain(raw) == "example.com"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_input(self, raw):
        with pytest.raises(MissingInputError) as exc:
            normalize_domain(raw)
        assert str(exc.value) == "missing input"

    @pytest.mark.parametrize("raw", [
        "not a domain",
        "localhost",
        "example.c",
        "example.c0m",
        "user@",
        "https://",
    ])
    def test_invalid_domain_format(self, raw):
        with pytest.raises(InvalidDomainError) as exc:
            normalize_domain(raw)
        assert str(exc.value) == "invalid domain format"

    def test_errors_share_base_class(self):
        assert issubclass(MissingInputError, DomainValidationError)
        assert issubclass(InvalidDomainError, DomainValidationError)
