"""
관리자 라우트

관리자 전용 API 엔드포인트 (Authorization: Bearer <ADMIN_TOKEN>)
- GET    /api/admin/applications: 신청 목록
- PATCH  /api/admin/applications: 상태 변경
- DELETE /api/admin/applications: 신청 삭제
- GET    /api/admin/settings: 정원 설정 조회 (인증 불필요)
- POST   /api/admin/settings: 정원 설정 추가/수정
- DELETE /api/admin/settings: 정원 설정 삭제 (기본값으로 복원)
"""

from flask import Blueprint, request, current_app

from extensions import get_services
from models import WEEKDAY_NAMES
from services.application_manager import InvalidApplicationUpdate
from services.settings_manager import InvalidSettingError
from utils.auth import admin_required
from utils.db import DataAccessError
from utils.logging_setup import log_api_call, log_admin_action
from utils.responses import ok, fail, server_error
from utils.store import UNSET

bp = Blueprint('admin', __name__, url_prefix='/api/admin')


@bp.route('/applications', methods=['GET'])
@admin_required
def list_applications():
    """
    신청 목록 조회

    Query:
        status: pending, confirmed, matched, rejected
        month: YYYY-MM (신청 월)
    """
    status = request.args.get('status') or None
    month = request.args.get('month') or None

    log_api_call(current_app, '/api/admin/applications', {'status': status, 'month': month})

    try:
        applications = get_services().applications.list_applications(status=status, month=month)
    except InvalidApplicationUpdate as e:
        current_app.logger.warning(f"목록 조회 파라미터 에러: {str(e)}")
        return fail(str(e), 400)
    except DataAccessError as e:
        current_app.logger.error(f"Admin fetch error: {str(e)}", exc_info=True)
        return server_error("Database error")

    return ok(data=[application.to_dict() for application in applications])


@bp.route('/applications', methods=['PATCH'])
@admin_required
def update_application():
    """
    신청 상태 변경

    Body: {id, status, note?}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return fail("Missing id or status", 400)

    application_id = data.get('id')
    status = data.get('status')
    note = data['note'] if 'note' in data else UNSET

    try:
        updated = get_services().applications.update_status(application_id, status, note=note)
    except InvalidApplicationUpdate as e:
        current_app.logger.warning(f"상태 변경 파라미터 에러: {str(e)}")
        return fail(str(e), 400)
    except DataAccessError as e:
        current_app.logger.error(f"Admin update error: {str(e)}", exc_info=True)
        return server_error("Update failed")

    log_admin_action(current_app, "UPDATE_STATUS", {
        'id': application_id, 'status': status, 'rows': updated
    })
    return ok()


@bp.route('/applications', methods=['DELETE'])
@admin_required
def delete_application():
    """신청 삭제 (?id=)"""
    application_id = request.args.get('id')
    if not application_id:
        return fail("Missing id", 400)

    try:
        deleted = get_services().applications.delete(application_id)
    except InvalidApplicationUpdate as e:
        return fail(str(e), 400)
    except DataAccessError as e:
        current_app.logger.error(f"Admin delete error: {str(e)}", exc_info=True)
        return server_error("Delete failed")

    log_admin_action(current_app, "DELETE_APPLICATION", {'id': application_id, 'rows': deleted})
    return ok()


@bp.route('/settings', methods=['GET'])
def get_settings():
    """
    정원 설정 조회 (신청 화면에서도 사용하므로 인증 없음)

    - ?type=weekday: 요일별 설정
    - ?date=2026-01-15: 단일 날짜
    - ?month=2026-01: 월 전체
    - 파라미터 없음: 전체 날짜 설정
    """
    setting_type = request.args.get('type')
    date_param = request.args.get('date')
    month_param = request.args.get('month')

    log_api_call(current_app, '/api/admin/settings', {
        'type': setting_type, 'date': date_param, 'month': month_param
    })

    services = get_services()

    try:
        if setting_type == 'weekday':
            settings = services.settings.list_weekday_settings()
            return ok(
                data=[setting.to_dict() for setting in settings],
                weekdayNames=WEEKDAY_NAMES,
                defaultMaxPerGender=services.default_max,
            )

        settings = services.settings.list_date_settings(day=date_param, month=month_param)
    except InvalidSettingError as e:
        return fail(str(e), 400)
    except DataAccessError as e:
        current_app.logger.error(f"Settings fetch error: {str(e)}", exc_info=True)
        return server_error("Database error")

    return ok(
        data=[setting.to_dict() for setting in settings],
        defaultMaxPerGender=services.default_max,
    )


@bp.route('/settings', methods=['POST'])
@admin_required
def save_setting():
    """
    정원 설정 추가/수정 (기존 설정은 전체 교체)

    Body (날짜): {type: "date", date: "2026-01-15", maxMale: 4, maxFemale: 4}
    Body (요일): {type: "weekday", weekday: 0, maxMale: 4, maxFemale: 4}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return fail("Invalid body", 400)

    manager = get_services().settings

    try:
        if data.get('type') == 'weekday':
            setting = manager.save_weekday_setting(
                data.get('weekday'), data.get('maxMale'), data.get('maxFemale')
            )
            action = "SAVE_WEEKDAY_SETTING"
        else:
            setting = manager.save_date_setting(
                data.get('date'), data.get('maxMale'), data.get('maxFemale')
            )
            action = "SAVE_DATE_SETTING"
    except InvalidSettingError as e:
        current_app.logger.warning(f"설정 저장 파라미터 에러: {str(e)}")
        return fail(str(e), 400)
    except DataAccessError as e:
        current_app.logger.error(f"Settings upsert error: {str(e)}", exc_info=True)
        return server_error("Failed to save settings")

    log_admin_action(current_app, action, setting.to_dict())
    return ok()


@bp.route('/settings', methods=['DELETE'])
@admin_required
def delete_setting():
    """
    정원 설정 삭제

    - ?date=2026-01-15
    - ?weekday=0
    """
    date_param = request.args.get('date')
    weekday_param = request.args.get('weekday')

    manager = get_services().settings

    try:
        if weekday_param is not None:
            deleted = manager.delete_weekday_setting(weekday_param)
            details = {'weekday': weekday_param, 'rows': deleted}
        else:
            deleted = manager.delete_date_setting(date_param)
            details = {'date': date_param, 'rows': deleted}
    except InvalidSettingError as e:
        return fail(str(e), 400)
    except DataAccessError as e:
        current_app.logger.error(f"Settings delete error: {str(e)}", exc_info=True)
        return server_error("Failed to delete")

    log_admin_action(current_app, "DELETE_SETTING", details)
    return ok()
