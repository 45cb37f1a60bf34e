"""
관리자 정원 설정 관리

날짜별/요일별 설정을 추가(덮어쓰기)하거나 삭제합니다.
삭제하면 다음 우선순위(요일 설정 또는 기본값)가 적용됩니다.
"""

from models import DateSetting, WeekdaySetting
from utils.date_utils import month_range, parse_iso_date
from utils.validators import validate_capacity_value, validate_weekday


class InvalidSettingError(ValueError):
    """잘못된 설정 키/값"""


class SettingsManager:

    def __init__(self, store, default_max):
        self.store = store
        self.default_max = default_max

    def list_date_settings(self, day=None, month=None):
        """
        날짜 설정 조회

        Args:
            day (str, optional): "YYYY-MM-DD" 단일 날짜
            month (str, optional): "YYYY-MM" 월 전체

        Returns:
            list: [DateSetting, ...] (날짜순)
        """
        try:
            if day:
                parsed = parse_iso_date(day)
                row = self.store.get_date_setting(parsed)
                return [DateSetting.from_row(row)] if row else []
            if month:
                start, end = month_range(month)
                rows = self.store.list_date_settings(start, end)
            else:
                rows = self.store.list_date_settings()
        except ValueError as e:
            raise InvalidSettingError(str(e)) from e

        return [DateSetting.from_row(row) for row in rows]

    def list_weekday_settings(self):
        return [WeekdaySetting.from_row(row) for row in self.store.list_weekday_settings()]

    def save_date_setting(self, day, max_male=None, max_female=None):
        """
        날짜 설정 저장 (기존 설정은 전체 교체)

        Returns:
            DateSetting: 저장된 설정
        """
        if not day:
            raise InvalidSettingError("Date is required")
        try:
            parsed = parse_iso_date(day)
        except ValueError as e:
            raise InvalidSettingError(str(e)) from e

        max_male, max_female = self._capacity_pair(max_male, max_female)
        self.store.upsert_date_setting(parsed, max_male, max_female)
        return DateSetting(parsed, max_male, max_female)

    def save_weekday_setting(self, weekday, max_male=None, max_female=None):
        """
        요일 설정 저장 (기존 설정은 전체 교체)

        Returns:
            WeekdaySetting: 저장된 설정
        """
        weekday = self._weekday(weekday)
        max_male, max_female = self._capacity_pair(max_male, max_female)
        self.store.upsert_weekday_setting(weekday, max_male, max_female)
        return WeekdaySetting(weekday, max_male, max_female)

    def delete_date_setting(self, day):
        """날짜 설정 삭제. 삭제된 행 수를 반환"""
        if not day:
            raise InvalidSettingError("Date or weekday is required")
        try:
            parsed = parse_iso_date(day)
        except ValueError as e:
            raise InvalidSettingError(str(e)) from e
        return self.store.delete_date_setting(parsed)

    def delete_weekday_setting(self, weekday):
        """요일 설정 삭제. 삭제된 행 수를 반환"""
        return self.store.delete_weekday_setting(self._weekday(weekday))

    def _weekday(self, value):
        weekday, error = validate_weekday(value)
        if error:
            raise InvalidSettingError(error)
        return weekday

    def _capacity_pair(self, max_male, max_female):
        male, error = validate_capacity_value(max_male, self.default_max)
        if error:
            raise InvalidSettingError(error)
        female, error = validate_capacity_value(max_female, self.default_max)
        if error:
            raise InvalidSettingError(error)
        return male, female
