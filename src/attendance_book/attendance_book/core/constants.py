"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

TIME_SLOTS = ("오전", "오후", "저녁")
DAYS_KR = ("일요일", "월요일", "화요일", "수요일", "목요일", "금요일", "토요일")

# Words that look like names in a scanned sheet but never are.
EXCLUDED_WORDS = frozenset(
    {
        "출석",
        "결석",
        "지각",
        "오전",
        "오후",
        "저녁",
        "요일",
        "명단",
        "확인",
        "선생님",
        "수업",
        "체크",
        "이름",
        "번호",
    }
)

NAME_TOKEN_PATTERN = r"[가-힣]{2,4}"

DEFAULT_MEMBER_GROUP = "정회원"
MAX_MEMBER_NAME_LENGTH = 10
MIN_SELF_REGISTER_NAME_LENGTH = 2

DEFAULT_QR_SIZE = 250
QR_SERVICE_URL = "https://api.qrserver.com/v1/create-qr-code/"
