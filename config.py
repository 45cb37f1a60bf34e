"""Flask 앱 설정"""
import os
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()

FALLBACK_MAX_PER_GENDER = 4


def read_default_max(value):
    """
    성별당 기본 최대 인원 파싱

    Args:
        value (str or None): DEFAULT_MAX_PER_GENDER 환경변수 값

    Returns:
        int: 0 이상의 정수 (없거나 잘못된 값이면 4)

    Example:
        >>> read_default_max("6")
        6
        >>> read_default_max(None)
        4
        >>> read_default_max("-1")
        4
    """
    if value is None or not str(value).strip():
        return FALLBACK_MAX_PER_GENDER
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return FALLBACK_MAX_PER_GENDER
    if parsed < 0:
        return FALLBACK_MAX_PER_GENDER
    return parsed


class Config:
    """기본 설정 클래스"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key'
    DB_HOST = os.environ.get('DB_HOST', 'localhost')
    DB_PORT = int(os.environ.get('DB_PORT', 3306))
    DB_USER = os.environ.get('DB_USER', 'root')
    DB_PASSWORD = os.environ.get('DB_PASSWORD', '')
    DB_NAME = os.environ.get('DB_NAME', 'matchdb')
    DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE', 5))
    FLASK_ENV = os.environ.get('FLASK_ENV', 'production')
    DEBUG = (FLASK_ENV == 'development')
    TESTING = False

    # 관리자 API 토큰 (비어 있으면 모든 관리자 요청 거부)
    ADMIN_TOKEN = os.environ.get('ADMIN_TOKEN', '')

    # 날짜/요일 설정이 없을 때 적용되는 성별당 최대 인원
    DEFAULT_MAX_PER_GENDER = read_default_max(os.environ.get('DEFAULT_MAX_PER_GENDER'))

    LOG_DIR = os.environ.get('LOG_DIR', 'logs')
    LOG_TO_FILE = True

    @staticmethod
    def init_app(app):
        """앱 초기화 시 실행되는 설정"""
        app.json.ensure_ascii = False


class DevelopmentConfig(Config):
    """개발 환경 설정"""
    DEBUG = True


class ProductionConfig(Config):
    """프로덕션 환경 설정"""
    DEBUG = False


class TestingConfig(Config):
    """테스트 환경 설정"""
    TESTING = True
    DEBUG = False
    LOG_TO_FILE = False
    ADMIN_TOKEN = 'test-admin-token'
    DEFAULT_MAX_PER_GENDER = FALLBACK_MAX_PER_GENDER


# 환경별 설정 매핑
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}
