"""
날짜/성별 마감 여부 판단

최대 인원(CapacityResolver)과 확정 인원(OccupancyCounter)을 조합합니다.
두 번의 조회 외에는 부수효과가 없으므로 여러 번 호출해도 같은 결과를 돌려줍니다.
"""

from models import Gender, Occupancy
from utils.date_utils import month_range


class DateStatus:
    """날짜의 확정 인원 / 최대 인원 / 마감 여부"""

    def __init__(self, day, occupancy, capacity):
        self.date = day
        self.male_count = occupancy.male
        self.female_count = occupancy.female
        self.max_male = capacity.max_male
        self.max_female = capacity.max_female

    @property
    def is_male_closed(self):
        return self.male_count >= self.max_male

    @property
    def is_female_closed(self):
        return self.female_count >= self.max_female

    def to_dict(self):
        return {
            'date': self.date.isoformat(),
            'maleCount': self.male_count,
            'femaleCount': self.female_count,
            'maxMale': self.max_male,
            'maxFemale': self.max_female,
            'isMaleClosed': self.is_male_closed,
            'isFemaleClosed': self.is_female_closed,
        }


class AvailabilityResult(DateStatus):
    """
    특정 성별의 신청 가능 여부

    Attributes:
        is_available (bool): 신청 가능 여부
        message (str or None): 마감 시 사용자에게 보여줄 메시지
    """

    def __init__(self, day, occupancy, capacity, is_available, message=None):
        super().__init__(day, occupancy, capacity)
        self.is_available = is_available
        self.message = message

    def to_dict(self):
        data = super().to_dict()
        data['isAvailable'] = self.is_available
        if self.message:
            data['message'] = self.message
        return data


def closed_message(day, gender, count, maximum):
    """
    마감 안내 메시지

    Example:
        >>> closed_message(date(2026, 1, 15), Gender.MALE, 4, 4)
        '해당 날짜(2026-01-15)는 남성 신청이 마감되었습니다. (4/4명)'
    """
    label = '남성' if gender is Gender.MALE else '여성'
    return (
        f"해당 날짜({day.isoformat()})는 {label} 신청이 마감되었습니다. "
        f"({count}/{maximum}명)"
    )


class AvailabilityEvaluator:
    """날짜별 신청 가능 여부 판단기"""

    def __init__(self, resolver, counter):
        self.resolver = resolver
        self.counter = counter

    def get_date_status(self, day):
        """성별 무관 날짜 현황"""
        capacity = self.resolver.resolve(day)
        occupancy = self.counter.count_confirmed(day)
        return DateStatus(day, occupancy, capacity)

    def check(self, day, gender):
        """
        특정 날짜에 해당 성별이 신청 가능한지 확인

        '기타' 성별은 정원 구분이 없으므로 항상 신청 가능합니다.
        (남/여 마감 여부는 화면 표시용으로 그대로 반환)

        Args:
            day (date): 희망 날짜
            gender (Gender or str): '남', '여', '기타'

        Returns:
            AvailabilityResult
        """
        gender = Gender.parse(gender)
        capacity = self.resolver.resolve(day)
        occupancy = self.counter.count_confirmed(day)

        if gender is Gender.MALE and occupancy.male >= capacity.max_male:
            return AvailabilityResult(
                day, occupancy, capacity, is_available=False,
                message=closed_message(day, gender, occupancy.male, capacity.max_male)
            )
        if gender is Gender.FEMALE and occupancy.female >= capacity.max_female:
            return AvailabilityResult(
                day, occupancy, capacity, is_available=False,
                message=closed_message(day, gender, occupancy.female, capacity.max_female)
            )
        return AvailabilityResult(day, occupancy, capacity, is_available=True)

    def get_month_status(self, month):
        """
        월별 날짜 현황 (해당 월의 모든 날짜, 날짜순)

        Args:
            month (str): "YYYY-MM"

        Returns:
            list: [DateStatus, ...]

        Raises:
            ValueError: 월 형식 오류
        """
        start, end = month_range(month)
        capacities = self.resolver.resolve_range(start, end)
        occupancies = self.counter.count_confirmed_by_date(start, end)
        return [
            DateStatus(day, occupancies.get(day, Occupancy()), capacity)
            for day, capacity in sorted(capacities.items())
        ]
