import types

import pytest

from proxer.core import http_client as hc
from proxer.core.errors import ConnectError, TransportError


def test_api_url_joins_version_category_action():
    assert hc.api_url("manga", "chapter") == "https://proxer.me/api/v1/manga/chapter"
    assert hc.api_url("manga", "chapter", "https://example.org/api/") == "https://example.org/api/v1/manga/chapter"


def test_session_url_does_not_depend_on_params(session):
    assert session.url("manga", "chapter") == "https://proxer.me/api/v1/manga/chapter"
    assert session.url("manga", "chapter") == session.url("manga", "chapter")


def test_headers_are_fixed_and_read_only(session):
    h = session.headers
    assert h["Content-Type"] == "application/x-www-form-urlencoded"
    assert h["User-Agent"].startswith("proxer-py/")
    assert h["proxer-api-token"] == "test-key"
    with pytest.raises(TypeError):
        h["proxer-api-token"] = "other"


def test_headers_installed_on_transport_once():
    s = hc.Session("abc")
    assert s._http.headers["proxer-api-token"] == "abc"
    assert s._http.headers["User-Agent"] == hc.UA
    assert "abc" not in repr(s)


def test_send_posts_form_body_with_timeout(session, http):
    http.reply({"error": 0, "data": []})
    r = session.send("https://proxer.me/api/v1/manga/chapter", "id=1&episode=2")
    assert r.status_code == 200
    call = http.last
    assert call["method"] == "POST"
    assert call["url"] == "https://proxer.me/api/v1/manga/chapter"
    assert call["data"] == "id=1&episode=2"
    assert call["timeout"] == hc.DEFAULT_TIMEOUT
    assert len(http.calls) == 1, "no retry on success"


def test_get_passes_query_params(session, http):
    session.get(hc.LEGACY_NEWS_URL, params={"format": "json", "s": "news", "p": 1})
    assert http.last["method"] == "GET"
    assert http.last["params"] == {"format": "json", "s": "news", "p": 1}


def test_timeout_becomes_transport_error(session, http):
    http.fail(hc.requests.Timeout("read timed out"))
    with pytest.raises(TransportError) as ei:
        session.send("https://proxer.me/api/v1/user/userinfo")
    assert ei.value.status_code is None
    assert len(http.calls) == 1, "must not retry"


def test_connection_error_becomes_transport_error(session, http):
    http.fail(hc.requests.ConnectionError("network down"))
    with pytest.raises(TransportError):
        session.send("https://proxer.me/api/v1/user/userinfo")


def test_http_error_status_carries_code(session, http):
    http.reply(status_code=503, content=b"<html>cloudflare</html>")
    with pytest.raises(TransportError) as ei:
        session.send("https://proxer.me/api/v1/user/userinfo")
    assert ei.value.status_code == 503
    assert len(http.calls) == 1


def test_unreachable_host_raises_transport_error():
    s = hc.Session("k", base_url="http://127.0.0.1:9/api", timeout=2)
    with pytest.raises(TransportError):
        s.send(s.url("notifications", "count"))


def test_missing_ca_bundle_is_connect_error(tmp_path):
    with pytest.raises(ConnectError):
        hc.Session("k", verify=str(tmp_path / "missing.pem"))


def test_broken_ca_bundle_is_connect_error(tmp_path):
    bad = tmp_path / "bad.pem"
    bad.write_text("not a certificate")
    with pytest.raises(ConnectError):
        hc.Session("k", verify=str(bad))


def test_verify_false_skips_tls_check():
    s = hc.Session("k", verify=False)
    assert s._http.verify is False


def test_min_interval_spaces_requests(session, http, monkeypatch):
    clock = {"now": 100.0}
    sleeps = []

    def fake_sleep(sec):
        sleeps.append(sec)
        clock["now"] += sec

    monkeypatch.setattr(hc, "time", types.SimpleNamespace(monotonic=lambda: clock["now"], sleep=fake_sleep))
    session.min_interval = 1.0

    session.send("https://proxer.me/api/v1/a/b")
    clock["now"] += 0.25
    session.send("https://proxer.me/api/v1/a/b")

    assert sleeps == [pytest.approx(0.75)]
    assert len(http.calls) == 2


def test_no_throttle_by_default(session, monkeypatch):
    monkeypatch.setattr(hc, "time", types.SimpleNamespace(monotonic=lambda: 0.0, sleep=pytest.fail))
    session.send("https://proxer.me/api/v1/a/b")
    session.send("https://proxer.me/api/v1/a/b")


def test_from_env_reads_settings():
    s = hc.Session.from_env({
        "PROXER_API_KEY": "envkey",
        "PROXER_BASE_URL": "https://staging.example/api",
        "PROXER_TIMEOUT": "3.5",
        "PROXER_MIN_INTERVAL": "2",
    })
    assert s.headers["proxer-api-token"] == "envkey"
    assert s.url("user", "login") == "https://staging.example/api/v1/user/login"
    assert s.timeout == 3.5
    assert s.min_interval == 2.0


def test_from_env_without_key_is_connect_error():
    with pytest.raises(ConnectError):
        hc.Session.from_env({})


def test_close_releases_transport(session, http):
    with session:
        pass
    assert http.closed


def test_legacy_get_does_not_send_api_key(monkeypatch):
    sent = []

    def fake_send(self, prep, **kw):
        sent.append(prep)
        return types.SimpleNamespace(status_code=200, content=b"{\"error\": 0, \"notifications\": []}")

    monkeypatch.setattr(hc.requests.Session, "send", fake_send)
    s = hc.Session("SECRET-KEY")
    s.get(hc.LEGACY_NEWS_URL, params={"format": "json", "s": "news", "p": 1})
    s.send("https://proxer.me/api/v1/notifications/count")

    legacy, api = sent
    assert legacy.url.startswith("http://proxer.me/notifications?")
    assert "proxer-api-token" not in legacy.headers
    assert "SECRET-KEY" not in str(legacy.headers)
    assert legacy.headers["User-Agent"] == hc.UA
    assert api.headers["proxer-api-token"] == "SECRET-KEY"


def test_get_drops_token_header(session, http):
    session.get(hc.LEGACY_NEWS_URL)
    assert http.last["headers"] == {"proxer-api-token": None}
    session.send("https://proxer.me/api/v1/a/b")
    assert "headers" not in http.last


@pytest.mark.parametrize("key, value", [
    ("PROXER_TIMEOUT", "soon"),
    ("PROXER_TIMEOUT", ""),
    ("PROXER_MIN_INTERVAL", "1s"),
])
def test_from_env_with_malformed_number_is_connect_error(key, value):
    with pytest.raises(ConnectError) as ei:
        hc.Session.from_env({"PROXER_API_KEY": "envkey", key: value})
    assert key in str(ei.value)
