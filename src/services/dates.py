import datetime as dt
from typing import Optional
from zoneinfo import ZoneInfo

KST = ZoneInfo("Asia/Seoul")

DISPLAY_DATE_FORMAT = "%Y. %m. %d"
DISPLAY_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_kst() -> dt.datetime:
    return dt.datetime.now(KST).replace(microsecond=0)


def display_date(day: Optional[dt.date] = None) -> str:
    """화면 표시용 날짜 "2025. 01. 31" (기본값: 오늘 KST)"""
    if day is None:
        day = now_kst().date()
    return day.strftime(DISPLAY_DATE_FORMAT)


def display_datetime() -> str:
    return now_kst().strftime(DISPLAY_DATETIME_FORMAT)


def iso_to_display_date(value: str) -> str:
    """"2025-01-31" -> "2025. 01. 31". 형식이 틀리면 ValueError"""
    return display_date(dt.date.fromisoformat(value.strip()))
