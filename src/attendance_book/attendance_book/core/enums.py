from __future__ import annotations

from enum import Enum


class ViewMode(str, Enum):
    """화면 모드: 관리자 대시보드 또는 QR로 들어온 회원 화면."""

    ADMIN = "admin"
    MEMBER = "member"


class ReportView(str, Enum):
    """통계 리포트 종류."""

    INDIVIDUAL = "individual"
    DAILY = "daily"


class CheckInAction(str, Enum):
    CHECKED_IN = "CHECKED_IN"
    CANCELLED = "CANCELLED"
