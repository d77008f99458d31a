from urllib.parse import parse_qs, urlsplit

from src.attendance_book.attendance_book.qr.links import (
    build_checkin_link,
    encode_component,
    parse_member_link,
    qr_image_url,
)


def test_link_drops_trailing_slash_and_encodes_params():
    link = build_checkin_link("https://attendance.example.com/", "수요반 A", "월요일", "오전")

    parts = urlsplit(link)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://attendance.example.com"
    assert parse_qs(parts.query) == {
        "mode": ["member"],
        "classId": ["수요반 A"],
        "day": ["월요일"],
        "slot": ["오전"],
    }


def test_encode_component_matches_encode_uri_component():
    assert encode_component("class 1(a)!") == "class%201(a)!"
    assert encode_component("a/b&c=d") == "a%2Fb%26c%3Dd"


def test_qr_image_url_embeds_encoded_link():
    url = qr_image_url("https://x.example/?mode=member&day=1", size=300)

    assert url.startswith("https://api.qrserver.com/v1/create-qr-code/?size=300x300&data=")
    assert parse_qs(urlsplit(url).query)["data"] == ["https://x.example/?mode=member&day=1"]


def test_parse_member_link():
    qr = parse_member_link({"mode": "member", "classId": "수요반", "day": "월요일", "slot": "저녁"})

    assert qr is not None
    assert qr.to_dict() == {"class_id": "수요반", "day": "월요일", "slot": "저녁"}


def test_parse_member_link_requires_mode_and_all_params():
    assert parse_member_link({"classId": "수요반", "day": "월요일", "slot": "저녁"}) is None
    assert parse_member_link({"mode": "member", "classId": "수요반", "slot": "저녁"}) is None
    assert parse_member_link({"mode": "admin", "classId": "a", "day": "b", "slot": "c"}) is None
