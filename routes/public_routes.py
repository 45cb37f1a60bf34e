"""
공개 라우트

신청 화면과 캘린더에서 사용하는 API 엔드포인트
- GET  /api/availability: 날짜/월별 확정 인원 및 마감 여부
- GET  /api/status: 월별 전체 신청 현황 (상태 무관)
- POST /api/apply: 신청서 제출
"""

from flask import Blueprint, request, current_app

from extensions import get_services
from services.intake import ApplicationRejected, INVALID_INPUT_MESSAGE
from utils.date_utils import month_range, parse_iso_date
from utils.db import DataAccessError
from utils.logging_setup import log_api_call
from utils.responses import ok, fail, server_error

bp = Blueprint('public', __name__, url_prefix='/api')


@bp.route('/availability', methods=['GET'])
def get_availability():
    """
    확정 인원 및 마감 여부 조회 API

    - ?date=2026-01-15: 단일 날짜
    - ?month=2026-01: 월 전체 (모든 날짜)
    """
    date_param = request.args.get('date')
    month_param = request.args.get('month')

    log_api_call(current_app, '/api/availability', {'date': date_param, 'month': month_param})

    services = get_services()

    try:
        if date_param:
            try:
                day = parse_iso_date(date_param)
            except ValueError as e:
                current_app.logger.warning(f"날짜 파싱 에러: {str(e)}")
                return fail("Invalid date format", 400)

            status = services.evaluator.get_date_status(day)
            return ok(
                date=day.isoformat(),
                male=status.male_count,
                female=status.female_count,
                maxMale=status.max_male,
                maxFemale=status.max_female,
                isMaleClosed=status.is_male_closed,
                isFemaleClosed=status.is_female_closed,
            )

        if month_param:
            try:
                statuses = services.evaluator.get_month_status(month_param)
            except ValueError as e:
                current_app.logger.warning(f"월 파싱 에러: {str(e)}")
                return fail("Invalid month format", 400)

            return ok(
                byDate=[status.to_dict() for status in statuses],
                defaultMaxPerGender=services.default_max,
            )

        return fail("date or month parameter required", 400)

    except DataAccessError as e:
        current_app.logger.error(f"Availability 조회 실패: {str(e)}", exc_info=True)
        return server_error()


@bp.route('/status', methods=['GET'])
def get_status():
    """
    월별 신청 현황 API (캘린더 화면용)

    상태와 무관하게 희망 날짜가 해당 월인 모든 신청을 집계합니다.
    """
    month_param = request.args.get('month', '')

    log_api_call(current_app, '/api/status', {'month': month_param})

    try:
        start, end = month_range(month_param)
    except ValueError:
        return fail("Invalid month format", 400)

    try:
        by_date, totals = get_services().counter.count_all_by_date(start, end)
    except DataAccessError as e:
        current_app.logger.error(f"현황 조회 실패: {str(e)}", exc_info=True)
        return server_error()

    return ok(
        month=month_param,
        byDate={day.isoformat(): counts for day, counts in sorted(by_date.items())},
        male=totals['male'],
        female=totals['female'],
        total=totals['total'],
    )


@bp.route('/apply', methods=['POST'])
def apply():
    """
    신청서 제출 API

    Body:
        {name, age, gender, phone, kakaoId?, location?, preferredGender?,
         note?, desiredDate?, agreePrivacy, website}
    """
    data = request.get_json(silent=True)

    log_api_call(current_app, '/api/apply', {
        'gender': data.get('gender') if isinstance(data, dict) else None,
        'desiredDate': data.get('desiredDate') if isinstance(data, dict) else None,
    })

    if data is None:
        return fail(INVALID_INPUT_MESSAGE, 400)

    try:
        get_services().intake.submit(data)
    except ApplicationRejected as e:
        if e.is_closed:
            return fail(e.message, e.status_code, isClosed=True)
        return fail(e.message, e.status_code)
    except DataAccessError as e:
        current_app.logger.error(f"신청 저장 실패: {str(e)}", exc_info=True)
        return server_error("저장 중 오류가 발생했습니다.")

    return ok()
