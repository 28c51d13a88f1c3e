"""Type definitions for proxer-py."""

from typing import Any, TypedDict, Optional, List


class Envelope(TypedDict, total=False):
    error: int
    code: Optional[int]
    message: Optional[str]
    data: Any


class News(TypedDict):
    nid: int
    time: int                      # unix timestamp
    mid: int
    description: str
    image_id: str
    image_style: str               # CSS
    subject: str
    hits: int
    thread: int
    uid: int
    uname: str
    posts: int
    catid: int
    catname: str


class NewsNotification(TypedDict):
    nid: int
    time: int
    description: str
    image_id: str
    image_style: str
    subject: str
    hits: int
    thread: int
    uid: int
    uname: str
    posts: int
    catid: int
    catname: str


class NotificationCount(TypedDict):
    private_messages_legacy: int
    private_messages: int
    friend_requests: int
    news: int
    notifications: int


class Page(TypedDict):
    name: str
    height: int
    width: int


class Chapter(TypedDict):
    cid: int
    eid: int
    title: str
    uploader: int
    username: str
    timestamp: int
    tid: Optional[int]             # scanlator group
    tname: Optional[str]
    server: int
    pages: List[Page]


class Stream(TypedDict):
    id: int
    type: str                      # hoster key
    name: str
    img: str
    uploader: int
    username: str
    timestamp: int
    tid: Optional[int]
    tname: Optional[str]


class Entry(TypedDict):
    id: int
    name: str
    genre: List[str]
    fsk: List[str]
    description: str
    medium: str                    # animeseries/movie/ova/mangaseries/oneshot...
    count: int
    state: int
    rate_sum: int
    rate_count: int
    clicks: int
    kat: str                       # anime/manga
    license: int


class EntryName(TypedDict):
    id: int
    eid: int
    type: str
    name: str


class UserInfo(TypedDict):
    uid: int
    username: str
    avatar: str
    status: str
    status_time: int
    points_uploads: int
    points_anime: int
    points_manga: int
    points_info: int
    points_forum: int
    points_misc: int


class Login(TypedDict):
    uid: int
    avatar: str
    token: str


class Conference(TypedDict):
    id: int
    topic: str
    topic_custom: str
    count: int
    group: bool
    image: str
    read: bool
    timestamp_end: int
    read_mid: int


class Message(TypedDict):
    message_id: int
    conference_id: int
    user_id: int
    username: str
    message: str
    action: str
    timestamp: int
    device: str


class Header(TypedDict):
    id: int
    img: str
    path: str


class UcpEntry(TypedDict):
    id: int
    name: str
    count: int
    medium: str
    estate: int                    # airing/publishing state of the entry
    cid: int                       # comment id
    comment: str
    state: int                     # watched/watching/will watch/cancelled
    episode: int
    rating: int
    timestamp: int
