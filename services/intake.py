"""
신청서 접수

처리 순서:
1. 입력값 검증 (실패 시 일반 메시지, 상세 내역은 로그에만)
2. 허니팟 필드 확인 (값이 있으면 저장 없이 성공 응답)
3. 개인정보 동의 확인
4. 희망 날짜가 있고 성별이 남/여이면 서버에서 마감 여부 재확인
5. status='pending' 으로 저장

재확인과 저장 사이에는 잠금이 없습니다.
동시에 들어온 신청이 모두 통과할 수 있으며, 실제 정원 관리는 관리자 확정 단계에서 이루어집니다.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from models import Gender
from utils.date_utils import parse_optional_date


INVALID_INPUT_MESSAGE = "입력값을 확인해주세요."
CONSENT_REQUIRED_MESSAGE = "개인정보 수집/이용에 동의가 필요합니다."


class ApplicationForm(BaseModel):
    """신청서 입력 스키마"""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=50)
    age: int = Field(ge=19, le=60)
    gender: Gender
    phone: str = Field(min_length=8, max_length=20)
    kakao_id: Optional[str] = Field(default=None, alias='kakaoId', max_length=50)
    location: Optional[str] = Field(default=None, max_length=50)
    preferred_gender: Optional[str] = Field(default=None, alias='preferredGender', max_length=20)
    note: Optional[str] = Field(default=None, max_length=500)
    desired_date: Optional[date] = Field(default=None, alias='desiredDate')
    agree_privacy: bool = Field(default=False, alias='agreePrivacy')
    # 허니팟: 화면에 보이지 않는 필드
    website: Optional[str] = None

    @field_validator('desired_date', mode='before')
    @classmethod
    def _parse_desired_date(cls, value):
        return parse_optional_date(value)

    @field_validator('agree_privacy', mode='before')
    @classmethod
    def _missing_consent(cls, value):
        return False if value is None else value

    def to_row(self):
        """저장용 dict (빈 선택 항목은 NULL)"""
        return {
            'name': self.name,
            'age': self.age,
            'gender': self.gender.value,
            'phone': self.phone,
            'kakao_id': self.kakao_id or None,
            'location': self.location or None,
            'preferred_gender': self.preferred_gender or None,
            'note': self.note or None,
            'desired_date': self.desired_date,
            'agree_privacy': self.agree_privacy,
        }


class ApplicationRejected(Exception):
    """
    신청 거부

    Attributes:
        message (str): 사용자에게 보여줄 메시지
        status_code (int): HTTP 상태 코드
        is_closed (bool): 정원 마감으로 인한 거부 여부
        issues (list or None): 검증 실패 상세 (로그용)
    """

    def __init__(self, message, status_code=400, is_closed=False, issues=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.is_closed = is_closed
        self.issues = issues


class IntakeResult:
    """
    접수 결과

    dropped=True 이면 허니팟에 걸려 저장하지 않은 경우입니다.
    """

    def __init__(self, application_id=None, dropped=False):
        self.application_id = application_id
        self.dropped = dropped


def _issue_list(error):
    return [
        {'field': '.'.join(str(part) for part in issue['loc']), 'type': issue['type']}
        for issue in error.errors()
    ]


class ApplicationIntake:
    """신청서 검증 및 저장"""

    def __init__(self, store, evaluator, logger):
        self.store = store
        self.evaluator = evaluator
        self.logger = logger

    def submit(self, payload):
        """
        신청서 제출

        Args:
            payload (dict): 요청 JSON

        Returns:
            IntakeResult

        Raises:
            ApplicationRejected: 검증 실패, 동의 누락, 정원 마감
            DataAccessError: 저장소 오류
        """
        if not isinstance(payload, dict):
            self.logger.warning("신청 검증 실패: JSON object 아님")
            raise ApplicationRejected(INVALID_INPUT_MESSAGE)

        try:
            form = ApplicationForm.model_validate(payload)
        except ValidationError as e:
            issues = _issue_list(e)
            self.logger.warning(f"신청 검증 실패: {issues}")
            raise ApplicationRejected(INVALID_INPUT_MESSAGE, issues=issues) from e

        # 봇이면 조용히 성공 처리
        if form.website:
            self.logger.warning("허니팟 감지: 저장하지 않음")
            return IntakeResult(dropped=True)

        if not form.agree_privacy:
            raise ApplicationRejected(CONSENT_REQUIRED_MESSAGE)

        if form.desired_date is not None and form.gender is not Gender.OTHER:
            availability = self.evaluator.check(form.desired_date, form.gender)
            if not availability.is_available:
                self.logger.info(
                    f"마감으로 신청 거부: date={form.desired_date}, gender={form.gender.value}, "
                    f"male={availability.male_count}/{availability.max_male}, "
                    f"female={availability.female_count}/{availability.max_female}"
                )
                raise ApplicationRejected(availability.message, is_closed=True)

        application_id = self.store.insert_application(form.to_row())

        self.logger.info(
            f"신청 접수 완료: id={application_id}, gender={form.gender.value}, "
            f"date={form.desired_date}"
        )
        return IntakeResult(application_id=application_id)
