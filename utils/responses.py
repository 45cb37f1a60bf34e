"""
JSON 응답 템플릿 함수

모든 API 응답은 {"ok": bool, ...} 구조를 가집니다.
반복되는 jsonify 구조를 템플릿 함수로 묶어 둡니다.
"""

from flask import jsonify


def ok(status_code=200, **payload):
    """
    성공 응답 생성

    Example:
        >>> ok(date="2026-01-15", male=1)
        # ({"ok": true, "date": "2026-01-15", "male": 1}, 200)
    """
    body = {"ok": True}
    body.update(payload)
    return jsonify(body), status_code


def fail(message, status_code=400, **extra):
    """
    실패 응답 생성

    Args:
        message (str): 사용자에게 표시할 메시지
        status_code (int): HTTP 상태 코드
        **extra: isClosed 등 추가 필드

    Example:
        >>> fail("입력값을 확인해주세요.")
        # ({"ok": false, "message": "입력값을 확인해주세요."}, 400)
    """
    body = {"ok": False, "message": message}
    body.update(extra)
    return jsonify(body), status_code


def unauthorized():
    """401 응답 (상세 사유는 노출하지 않음)"""
    return fail("Unauthorized", 401)


def server_error(message="서버 오류가 발생했습니다. 잠시 후 다시 시도해주세요."):
    """500 응답"""
    return fail(message, 500)
