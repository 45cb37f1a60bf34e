"""
도메인 모델

DB 접근은 raw SQL(utils/store.py)로 하고,
이 모듈은 조회 결과(dict row)를 감싸는 값 객체와 열거형을 정의합니다.
"""

from datetime import date, datetime
from enum import Enum


# 요일 이름 (0=일요일 ... 6=토요일)
WEEKDAY_NAMES = ['일', '월', '화', '수', '목', '금', '토']


class Gender(str, Enum):
    """신청자 성별"""
    MALE = '남'
    FEMALE = '여'
    OTHER = '기타'

    @classmethod
    def parse(cls, value):
        """
        문자열을 Gender로 변환

        Raises:
            ValueError: '남', '여', '기타' 외의 값
        """
        if isinstance(value, cls):
            return value
        return cls(value)


class ApplicationStatus(str, Enum):
    """신청 처리 상태"""
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    MATCHED = 'matched'
    REJECTED = 'rejected'

    @classmethod
    def parse(cls, value):
        """
        문자열을 ApplicationStatus로 변환

        Raises:
            ValueError: 네 가지 상태 외의 값
        """
        if isinstance(value, cls):
            return value
        return cls(value)


def _iso(value):
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class Application:
    """
    신청 모델

    Attributes:
        id (int): 신청 고유 ID
        name (str): 이름 (1~50자)
        age (int or None): 나이
        gender (Gender): 성별
        phone (str): 연락처
        kakao_id (str or None): 카카오톡 ID
        location (str or None): 지역
        preferred_gender (str or None): 선호 성별
        note (str or None): 신청자 메모
        desired_date (date or None): 희망 날짜
        status (ApplicationStatus): 처리 상태
        admin_note (str or None): 관리자 메모
        created_at (datetime): 신청 시간
    """
    def __init__(self, id, name, age, gender, phone, kakao_id=None,
                 location=None, preferred_gender=None, note=None,
                 desired_date=None, status=ApplicationStatus.PENDING,
                 admin_note=None, created_at=None, agree_privacy=True):
        self.id = id
        self.name = name
        self.age = age
        self.gender = Gender.parse(gender)
        self.phone = phone
        self.kakao_id = kakao_id
        self.location = location
        self.preferred_gender = preferred_gender
        self.note = note
        self.desired_date = desired_date
        self.status = ApplicationStatus.parse(status)
        self.admin_note = admin_note
        self.created_at = created_at
        self.agree_privacy = bool(agree_privacy)

    @classmethod
    def from_row(cls, row):
        """DB row(dict)에서 생성"""
        return cls(
            id=row['id'],
            name=row['name'],
            age=row.get('age'),
            gender=row['gender'],
            phone=row['phone'],
            kakao_id=row.get('kakao_id'),
            location=row.get('location'),
            preferred_gender=row.get('preferred_gender'),
            note=row.get('note'),
            desired_date=row.get('desired_date'),
            status=row.get('status', ApplicationStatus.PENDING.value),
            admin_note=row.get('admin_note'),
            created_at=row.get('created_at'),
            agree_privacy=row.get('agree_privacy', True),
        )

    def to_dict(self):
        """관리자 API 응답용 dict"""
        return {
            'id': self.id,
            'name': self.name,
            'age': self.age,
            'gender': self.gender.value,
            'phone': self.phone,
            'kakao_id': self.kakao_id,
            'location': self.location,
            'preferred_gender': self.preferred_gender,
            'note': self.note,
            'desired_date': _iso(self.desired_date),
            'status': self.status.value,
            'admin_note': self.admin_note,
            'agree_privacy': self.agree_privacy,
            'created_at': _iso(self.created_at),
        }


class DateSetting:
    """
    특정 날짜 정원 설정

    max_male / max_female 이 None이면 기본값을 사용합니다.
    """
    def __init__(self, date, max_male=None, max_female=None):
        self.date = date
        self.max_male = max_male
        self.max_female = max_female

    @classmethod
    def from_row(cls, row):
        return cls(row['date'], row.get('max_male'), row.get('max_female'))

    def to_dict(self):
        return {
            'date': _iso(self.date),
            'max_male': self.max_male,
            'max_female': self.max_female,
        }


class WeekdaySetting:
    """
    요일별 정원 설정 (0=일요일 ... 6=토요일)
    """
    def __init__(self, weekday, max_male=None, max_female=None):
        self.weekday = weekday
        self.max_male = max_male
        self.max_female = max_female

    @classmethod
    def from_row(cls, row):
        return cls(row['weekday'], row.get('max_male'), row.get('max_female'))

    def to_dict(self):
        return {
            'weekday': self.weekday,
            'weekday_name': WEEKDAY_NAMES[self.weekday],
            'max_male': self.max_male,
            'max_female': self.max_female,
        }


class Capacity:
    """날짜별로 확정된 성별 최대 인원 (항상 0 이상의 정수)"""
    def __init__(self, max_male, max_female):
        self.max_male = max_male
        self.max_female = max_female

    def __eq__(self, other):
        if not isinstance(other, Capacity):
            return NotImplemented
        return (self.max_male, self.max_female) == (other.max_male, other.max_female)

    def __repr__(self):
        return f"Capacity(max_male={self.max_male}, max_female={self.max_female})"


class Occupancy:
    """확정(confirmed) 인원 집계"""
    def __init__(self, male=0, female=0):
        self.male = male
        self.female = female

    def __eq__(self, other):
        if not isinstance(other, Occupancy):
            return NotImplemented
        return (self.male, self.female) == (other.male, other.female)

    def __repr__(self):
        return f"Occupancy(male={self.male}, female={self.female})"
