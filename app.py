"""
Flask 메인 애플리케이션

매칭 이벤트 예약 접수 서버입니다.
"""

from flask import Flask
from werkzeug.exceptions import HTTPException

from config import config
from extensions import init_services
from utils.db import create_connection_pool
from utils.logging_setup import setup_logging
from utils.responses import fail, server_error
from utils.store import MySQLStore
import os


def create_app(config_name=None, store=None):
    """
    Flask 앱 팩토리

    Args:
        config_name (str): 설정 이름 ('development', 'production', 'testing')
        store (optional): 저장소 객체. 없으면 MySQL Connection Pool 로 생성

    Returns:
        Flask: 설정된 Flask 앱 객체
    """
    app = Flask(__name__)

    # 환경 설정 로드
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # 설정 적용
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    # 로깅 설정
    setup_logging(app)

    # 저장소 초기화
    if store is None:
        try:
            store = MySQLStore(create_connection_pool(app.config))
            app.logger.info("✅ MySQL Connection Pool initialized")
        except Exception as e:
            app.logger.error(f"❌ Failed to initialize Connection Pool: {e}")
            raise

    init_services(app, store)
    app.logger.info(
        f"Default max per gender: {app.config['DEFAULT_MAX_PER_GENDER']}"
    )

    # 라우트 등록
    from routes import public_routes, admin_routes

    app.register_blueprint(public_routes.bp)
    app.register_blueprint(admin_routes.bp)

    app.logger.info("✅ All routes registered")

    # 헬스 체크 엔드포인트
    @app.route('/health')
    def health_check():
        """서버 상태 확인"""
        return {
            "status": "healthy",
            "service": "match-reservation",
            "version": "1.0.0"
        }, 200

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        """404, 405 등은 상태 코드를 유지한 JSON 으로 반환"""
        return fail(e.name, e.code)

    # 에러 핸들러
    @app.errorhandler(Exception)
    def handle_error(e):
        """
        전역 에러 핸들러

        모든 예외를 로그에 기록하고
        사용자에게는 통일된 에러 메시지를 반환합니다.
        """
        app.logger.error(f"Unhandled exception: {str(e)}", exc_info=True)
        return server_error()

    return app


if __name__ == '__main__':
    # 로컬 개발 서버 실행 (개발 전용)
    # 프로덕션에서는 WSGI 서버 사용
    create_app().run(host='0.0.0.0', port=5000, debug=True)
