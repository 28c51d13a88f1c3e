import pytest

from proxer.core.errors import ApiError, MissingDataError
from proxer.endpoints import notification

NEWS = {
    "nid": "7001", "time": "1484931600", "mid": "380000", "description": "Neue Folgen",
    "image_id": "5a3f", "image_style": "margin-top: -40px", "subject": "Wochenrückblick",
    "hits": "1500", "thread": "380000", "uid": "1", "uname": "genesis", "posts": "12",
    "catid": "5", "catname": "Proxer News",
}


def test_news_defaults_send_empty_body(session, http):
    http.reply({"error": 0, "data": [NEWS]})
    items = notification.news(session)
    assert http.last["url"] == "https://proxer.me/api/v1/notifications/news"
    assert http.last["data"] == ""
    assert items[0]["nid"] == 7001
    assert items[0]["thread"] == 380000


def test_news_paging(session, http):
    http.reply({"error": 0, "data": []})
    notification.news(session, p=2, limit=5)
    assert http.last_form() == [("p", "2"), ("limit", "5")]


def test_news_links():
    item = notification.news_link({"catid": 5, "thread": 380000})
    assert item == "https://proxer.me/forum/5/380000"
    rec = {"nid": 7001, "image_id": "5a3f"}
    assert notification.news_image_url(rec) == "https://cdn.proxer.me/news/7001_5a3f.png"
    assert notification.news_image_url(rec, thumbnail=True) == "https://cdn.proxer.me/news/th/7001_5a3f.png"


@pytest.mark.parametrize("data", ["0,0,2,1,5,3", [0, 0, 2, 1, 5, 3], ["0", "2", "1", "5", "3"]])
def test_count_shapes(session, http, data):
    http.reply({"error": 0, "data": data})
    c = notification.count(session)
    assert c["private_messages"] == 2
    assert c["friend_requests"] == 1
    assert c["news"] == 5
    assert c["notifications"] == 3


def test_count_requires_login(session, http):
    http.reply({"error": 1, "code": 3002, "message": "Du bist nicht eingeloggt."})
    with pytest.raises(ApiError) as ei:
        notification.count(session)
    assert ei.value.code == 3002


def test_delete_all_read(session, http):
    http.reply({"error": 0, "message": "Erfolgreich"})
    assert notification.delete(session) is None
    assert http.last["url"] == "https://proxer.me/api/v1/notifications/delete"
    assert http.last["data"] == ""


def test_delete_one(session, http):
    http.reply({"error": 0})
    notification.delete(session, nid=12)
    assert http.last_form() == [("nid", "12")]


def test_legacy_news_uses_get_and_flat_envelope(session, http):
    legacy = dict(NEWS)
    legacy.pop("mid")
    http.reply({"error": 0, "notifications": [legacy]})
    items = notification.legacy_news(session, page=2)
    call = http.last
    assert call["method"] == "GET"
    assert call["url"] == "http://proxer.me/notifications"
    assert call["params"] == {"format": "json", "s": "news", "p": 2}
    assert items[0]["nid"] == 7001
    assert "mid" not in items[0]


def test_legacy_news_error(session, http):
    http.reply({"error": 1, "message": "Fehler"})
    with pytest.raises(ApiError) as ei:
        notification.legacy_news(session)
    assert ei.value.message == "Fehler"


def test_legacy_news_missing_list(session, http):
    http.reply({"error": 0, "message": None})
    with pytest.raises(MissingDataError):
        notification.legacy_news(session)
