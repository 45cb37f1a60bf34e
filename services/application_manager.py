"""
관리자 신청 관리

- 목록 조회 (상태 / 신청 월 필터)
- 상태 변경 (pending, confirmed, matched, rejected 간 자유 전환)
- 삭제
"""

from models import Application, ApplicationStatus, Gender
from utils.date_utils import month_range
from utils.store import UNSET


class InvalidApplicationUpdate(ValueError):
    """잘못된 신청 ID / 상태 값"""


def parse_application_id(value):
    """
    신청 ID 검증

    Raises:
        InvalidApplicationUpdate: 양의 정수가 아닌 경우
    """
    if isinstance(value, bool) or value is None:
        raise InvalidApplicationUpdate("Missing id")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidApplicationUpdate("Invalid id")
    try:
        application_id = int(value)
    except (TypeError, ValueError) as e:
        raise InvalidApplicationUpdate("Invalid id") from e
    if application_id <= 0:
        raise InvalidApplicationUpdate("Invalid id")
    return application_id


def parse_status(value):
    try:
        return ApplicationStatus.parse(value)
    except ValueError as e:
        raise InvalidApplicationUpdate(f"Invalid status: {value}") from e


class ApplicationManager:

    def __init__(self, store, evaluator, logger):
        self.store = store
        self.evaluator = evaluator
        self.logger = logger

    def list_applications(self, status=None, month=None):
        """
        신청 목록 (최신순)

        Args:
            status (str, optional): 상태 필터
            month (str, optional): "YYYY-MM" 신청(created_at) 월 필터

        Returns:
            list: [Application, ...]
        """
        status_value = parse_status(status).value if status else None
        start = end = None
        if month:
            try:
                start, end = month_range(month)
            except ValueError as e:
                raise InvalidApplicationUpdate(str(e)) from e

        rows = self.store.list_applications(status=status_value, start=start, end=end)
        return [Application.from_row(row) for row in rows]

    def update_status(self, application_id, status, note=UNSET):
        """
        상태 변경

        note 가 전달된 경우에만 admin_note 를 덮어씁니다.

        Returns:
            int: 변경된 행 수
        """
        application_id = parse_application_id(application_id)
        if not status:
            raise InvalidApplicationUpdate("Missing id or status")
        status = parse_status(status)
        if note is not UNSET and note is not None and not isinstance(note, str):
            raise InvalidApplicationUpdate("Invalid note")

        if status is ApplicationStatus.CONFIRMED:
            self._warn_if_over_capacity(application_id)

        return self.store.update_application(application_id, status.value, admin_note=note)

    def delete(self, application_id):
        """삭제. 삭제된 행 수를 반환"""
        return self.store.delete_application(parse_application_id(application_id))

    def _warn_if_over_capacity(self, application_id):
        row = self.store.get_application(application_id)
        if not row or row.get('desired_date') is None:
            return

        application = Application.from_row(row)
        # 이미 확정된 신청은 집계에 포함되어 있음
        if application.gender is Gender.OTHER or application.status is ApplicationStatus.CONFIRMED:
            return

        availability = self.evaluator.check(application.desired_date, application.gender)
        if not availability.is_available:
            self.logger.warning(
                f"정원 초과 확정: id={application_id}, "
                f"date={application.desired_date}, {availability.message}"
            )
