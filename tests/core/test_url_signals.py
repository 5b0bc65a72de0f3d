import pytest
from scamscope.core.url_signals import (
    R_INSECURE,
    R_MALFORMED,
    R_RAW_IP,
    R_SENSITIVE_PATH,
    R_SUSPICIOUS_TLD,
    is_ipv4_host,
    parse_url,
    score_url,
)


def test_raw_ip_login_over_http():
    s = score_url("http://192.168.1.5/login")
    assert s.score == 65
    assert set(s.reasons) == {R_INSECURE, R_RAW_IP, R_SENSITIVE_PATH}
    assert s.url == "http://192.168.1.5/login"


@pytest.mark.parametrize("bad", [
    "not a url",
    "example.com/login",
    "http://",
    "http://exa mple.com",
    "http://example.com:99999/",
    "http://[::1/",
    "http://bad^host.com/",
])
def test_malformed_urls_score_max(bad):
    s = score_url(bad)
    assert s.score == 100
    assert s.reasons == (R_MALFORMED,)
    assert parse_url(bad) is None


def test_clean_https_url():
    s = score_url("https://example.com/about")
    assert s.score == 0
    assert s.reasons == ()


def test_scheme_comparison_is_case_insensitive():
    assert score_url("HTTPS://EXAMPLE.COM").score == 0


def test_suspicious_tld_and_verify_path():
    s = score_url("https://prize-claim.xyz/verify?id=1")
    assert s.score == 35
    assert s.reasons == (R_SENSITIVE_PATH, R_SUSPICIOUS_TLD)


def test_insecure_checkout_on_info_domain():
    s = score_url("http://free.info/Checkout")
    assert s.score == 65
    assert s.reasons == (R_INSECURE, R_SENSITIVE_PATH, R_SUSPICIOUS_TLD)


def test_ip_check_requires_whole_host():
    assert is_ipv4_host("10.0.0.1")
    assert not is_ipv4_host("10.0.0.1.xyz")
    s = score_url("https://10.0.0.1.xyz/")
    assert s.reasons == (R_SUSPICIOUS_TLD,)


def test_non_http_scheme_is_insecure():
    s = score_url("ftp://files.example.com/pub")
    assert s.score == 30
    assert s.reasons == (R_INSECURE,)


def test_ipv6_literal_host_parses():
    s = score_url("https://[2001:db8::1]/")
    assert s.score == 0


def test_surrounding_whitespace_ignored_but_url_echoed():
    s = score_url("  https://example.com  ")
    assert s.score == 0
    assert s.url == "  https://example.com  "


def test_deterministic():
    assert score_url("http://a.top/login") == score_url("http://a.top/login")


def test_space_in_query_is_not_malformed():
    s = score_url("https://www.google.com/search?q=hello world")
    assert s.score == 0
    assert s.reasons == ()
    assert parse_url("https://www.google.com/search?q=hello world") is not None


def test_space_in_path_keeps_other_checks():
    s = score_url("http://example.com/my login")
    assert s.reasons == (R_INSECURE,)
