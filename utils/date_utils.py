"""
날짜/월 문자열 파싱

API 에서 주고받는 형식:
- 날짜: "2026-01-15" (YYYY-MM-DD)
- 월:   "2026-01"    (YYYY-MM)
- 요일: 0=일요일, 1=월요일, ... 6=토요일

파싱 실패 시 ValueError 를 발생시킵니다.
"""

import re
from datetime import date, timedelta

_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')
_MONTH_RE = re.compile(r'^\d{4}-\d{2}$')


def parse_iso_date(text):
    """
    YYYY-MM-DD 문자열을 date 로 변환

    Example:
        >>> parse_iso_date("2026-01-15")
        datetime.date(2026, 1, 15)

    Raises:
        ValueError: 형식이 틀리거나 존재하지 않는 날짜
    """
    if isinstance(text, date):
        return text
    if text is None or not _DATE_RE.match(str(text).strip()):
        raise ValueError(f"잘못된 날짜 형식: {text}")
    return date.fromisoformat(str(text).strip())


def parse_optional_date(text):
    """빈 문자열/None 은 None, 그 외는 parse_iso_date"""
    if text is None:
        return None
    if isinstance(text, str) and not text.strip():
        return None
    return parse_iso_date(text)


def month_range(month):
    """
    YYYY-MM 문자열을 반열림 구간 [해당 월 1일, 다음 달 1일) 로 변환

    Example:
        >>> month_range("2026-12")
        (datetime.date(2026, 12, 1), datetime.date(2027, 1, 1))

    Raises:
        ValueError: 형식이 틀리거나 월이 1~12 가 아닌 경우
    """
    if month is None or not _MONTH_RE.match(str(month).strip()):
        raise ValueError(f"잘못된 월 형식: {month}")

    year, mon = (int(part) for part in str(month).strip().split('-'))
    if not (1 <= mon <= 12):
        raise ValueError(f"잘못된 월: {mon}월")

    start = date(year, mon, 1)
    if mon == 12:
        end = date(year + 1, 1, 1)
    else:
        end = date(year, mon + 1, 1)
    return (start, end)


def iter_days(start, end):
    """start 부터 end 직전까지 하루씩"""
    current = start
    while current < end:
        yield current
        current += timedelta(days=1)


def weekday_index(day):
    """
    일요일 기준 요일 인덱스

    date.weekday() 는 월요일=0 이므로 한 칸 밀어줍니다.

    Example:
        >>> weekday_index(date(2026, 1, 18))  # 일요일
        0
        >>> weekday_index(date(2026, 1, 15))  # 목요일
        4
    """
    return (day.weekday() + 1) % 7
