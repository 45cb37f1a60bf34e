"""
날짜별 최대 인원 결정

우선순위: 특정 날짜 설정 > 요일 설정 > 기본값

각 단계(tier)는 해당 날짜에 적용되는 설정 row 를 찾거나 None 을 반환합니다.
처음으로 찾은 row 가 최종 결정이며, row 안의 NULL 값은
다음 단계가 아니라 기본값으로 채웁니다.
"""

from models import Capacity, DateSetting, WeekdaySetting
from utils.date_utils import iter_days, weekday_index


class DateSettingTier:
    """date_settings 테이블 조회"""

    def __init__(self, store):
        self.store = store

    def lookup(self, day):
        row = self.store.get_date_setting(day)
        return DateSetting.from_row(row) if row else None

    def preload(self, start, end):
        settings = {}
        for row in self.store.list_date_settings(start, end):
            setting = DateSetting.from_row(row)
            settings[setting.date] = setting
        return PreloadedTier(settings, key=lambda day: day)


class WeekdaySettingTier:
    """weekday_settings 테이블 조회 (0=일요일)"""

    def __init__(self, store):
        self.store = store

    def lookup(self, day):
        row = self.store.get_weekday_setting(weekday_index(day))
        return WeekdaySetting.from_row(row) if row else None

    def preload(self, start, end):
        settings = {}
        for row in self.store.list_weekday_settings():
            setting = WeekdaySetting.from_row(row)
            settings[setting.weekday] = setting
        return PreloadedTier(settings, key=weekday_index)


class PreloadedTier:
    """한 번에 읽어 둔 설정으로 lookup 하는 tier (월별 조회용)"""

    def __init__(self, settings, key):
        self.settings = settings
        self.key = key

    def lookup(self, day):
        return self.settings.get(self.key(day))


class CapacityResolver:
    """
    날짜별 성별 최대 인원 결정기

    Args:
        store: 설정 테이블을 조회할 저장소
        default_max (int): 어떤 설정도 없을 때의 성별당 최대 인원
        tiers (list, optional): 우선순위 순서의 tier 목록
    """

    def __init__(self, store, default_max, tiers=None):
        if default_max < 0:
            raise ValueError("default_max must be >= 0")
        self.default_max = default_max
        if tiers is None:
            tiers = [DateSettingTier(store), WeekdaySettingTier(store)]
        self.tiers = tiers

    def resolve(self, day):
        """
        해당 날짜의 최대 인원

        Returns:
            Capacity: 항상 0 이상의 정수로 채워진 값
        """
        return self._resolve_with(self.tiers, day)

    def resolve_range(self, start, end):
        """
        [start, end) 기간의 날짜별 최대 인원

        tier 마다 한 번씩만 조회합니다.

        Returns:
            dict: {date: Capacity}
        """
        tiers = [tier.preload(start, end) for tier in self.tiers]
        return {day: self._resolve_with(tiers, day) for day in iter_days(start, end)}

    def _resolve_with(self, tiers, day):
        for tier in tiers:
            setting = tier.lookup(day)
            if setting is not None:
                return Capacity(
                    max_male=self._or_default(setting.max_male),
                    max_female=self._or_default(setting.max_female),
                )
        return Capacity(self.default_max, self.default_max)

    def _or_default(self, value):
        return self.default_max if value is None else value
