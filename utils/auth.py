"""
관리자 인증 로직

관리자 API 는 Authorization: Bearer <ADMIN_TOKEN> 헤더로 인증합니다.
설정된 토큰이 비어 있으면 모든 요청을 거부합니다.
"""

from functools import wraps

from flask import current_app, request

from utils.responses import unauthorized


def verify_bearer_token(auth_header, admin_token):
    """
    Bearer 토큰 검증

    Args:
        auth_header (str or None): Authorization 헤더 값
        admin_token (str): 설정된 관리자 토큰

    Returns:
        bool: 토큰이 정확히 일치하면 True

    Example:
        >>> verify_bearer_token("Bearer secret", "secret")
        True

        >>> verify_bearer_token("Bearer ", "")
        False
    """
    if not admin_token:
        return False

    if not auth_header or not auth_header.startswith('Bearer '):
        return False

    return auth_header[len('Bearer '):] == admin_token


def admin_required(f):
    """관리자 토큰이 필요한 라우트 데코레이터"""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not verify_bearer_token(
            request.headers.get('Authorization'),
            current_app.config.get('ADMIN_TOKEN', '')
        ):
            current_app.logger.warning(f"권한 거부: {request.method} {request.path}")
            return unauthorized()

        return f(*args, **kwargs)

    return decorated_function
