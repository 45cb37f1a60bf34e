"""
확정 인원 집계

status = 'confirmed' 인 신청만 정원에 포함됩니다.
'기타' 성별은 남/여 어느 쪽에도 집계하지 않습니다.
저장소 오류(DataAccessError)는 0명으로 간주하지 않고 그대로 전파합니다.
"""

from models import Gender, Occupancy


def _add(occupancy, gender, count):
    if gender == Gender.MALE.value:
        occupancy.male += count
    elif gender == Gender.FEMALE.value:
        occupancy.female += count


class OccupancyCounter:
    """신청 테이블 기반 인원 집계기"""

    def __init__(self, store):
        self.store = store

    def count_confirmed(self, day):
        """
        특정 날짜의 확정 인원

        Returns:
            Occupancy: 남/여 확정 인원
        """
        occupancy = Occupancy()
        for gender, count in self.store.count_confirmed_by_gender(day).items():
            _add(occupancy, gender, count)
        return occupancy

    def count_confirmed_by_date(self, start, end):
        """
        [start, end) 기간의 날짜별 확정 인원

        Returns:
            dict: {date: Occupancy} (확정 인원이 있는 날짜만)
        """
        by_date = {}
        for row in self.store.count_confirmed_by_date(start, end):
            occupancy = by_date.setdefault(row['desired_date'], Occupancy())
            _add(occupancy, row['gender'], row['cnt'])
        return by_date

    def count_all_by_date(self, start, end):
        """
        [start, end) 기간의 날짜별 전체 신청 수 (상태 무관)

        캘린더 현황 화면용입니다.

        Returns:
            tuple: (by_date, totals)
                by_date: {date: {'male', 'female', 'other', 'total'}}
                totals: {'male', 'female', 'total'}
        """
        keys = {
            Gender.MALE.value: 'male',
            Gender.FEMALE.value: 'female',
        }
        by_date = {}
        totals = {'male': 0, 'female': 0, 'total': 0}

        for row in self.store.count_applications_by_date(start, end):
            day = row['desired_date']
            if day is None:
                continue
            key = keys.get(row['gender'], 'other')
            counts = by_date.setdefault(
                day, {'male': 0, 'female': 0, 'other': 0, 'total': 0}
            )
            counts[key] += row['cnt']
            counts['total'] += row['cnt']

            if key != 'other':
                totals[key] += row['cnt']
            totals['total'] += row['cnt']

        return by_date, totals
