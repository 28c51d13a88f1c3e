import json
import urllib.parse

import pytest

from proxer.core.http_client import Session


class DummyResponse:
    def __init__(self, status_code=200, json_data=None, content=None):
        self.status_code = status_code
        if content is None:
            content = json.dumps(json_data if json_data is not None else {}).encode("utf-8")
        self.content = content


class FakeHttp:
    """Stands in for requests.Session: records calls, replays queued replies."""

    def __init__(self):
        self.calls = []
        self.replies = []
        self.closed = False

    def reply(self, json_data=None, status_code=200, content=None):
        self.replies.append(DummyResponse(status_code, json_data, content))

    def fail(self, exc):
        self.replies.append(exc)

    def request(self, method, url, timeout=None, **kw):
        self.calls.append({"method": method, "url": url, "timeout": timeout, **kw})
        item = self.replies.pop(0) if self.replies else DummyResponse(200, {"error": 0, "data": []})
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self):
        self.closed = True

    @property
    def last(self):
        return self.calls[-1]

    def last_form(self):
        """Decoded body of the last request as an ordered list of pairs."""
        return urllib.parse.parse_qsl(self.last["data"], keep_blank_values=True)


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def session(http):
    s = Session("test-key")
    s._http = http
    return s
