"""
로그 로테이션 및 레벨 설정

이 모듈은 Flask 앱의 로깅을 설정하며,
개발/프로덕션 환경에 따라 자동으로 로그 레벨을 전환합니다.
"""

import os
import logging
from logging.handlers import RotatingFileHandler


def setup_logging(app):
    """
    Flask 앱 로깅 설정

    Args:
        app (Flask): Flask 앱 객체

    Note:
        - 개발 환경 (FLASK_ENV=development): DEBUG 레벨
        - 그 외: INFO 레벨
        - LOG_TO_FILE 이 켜져 있으면 <LOG_DIR>/app.log 에 기록
        - 로그 로테이션: 10MB × 5개 백업
        - 감사 로그: INFO 레벨 (신청/상태 변경/설정 변경 기록)

    Example:
        >>> from flask import Flask
        >>> app = Flask(__name__)
        >>> setup_logging(app)
        >>> app.logger.info("Application 12 confirmed")  # INFO 레벨 기록
    """
    # 환경 변수로 로그 레벨 자동 전환
    if app.config.get('FLASK_ENV') == 'development' or app.debug:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    app.logger.setLevel(log_level)

    if not app.config.get('LOG_TO_FILE', True):
        return

    log_dir = app.config.get('LOG_DIR', 'logs')
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'app.log')

    # 10MB 초과 시 자동으로 app.log.1, app.log.2... 생성
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,              # 최대 5개 백업 파일
        encoding='utf-8'
    )

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(log_level)

    app.logger.addHandler(file_handler)

    # 시작 메시지
    app.logger.info('=' * 50)
    app.logger.info('Reservation Server Starting')
    app.logger.info(f'Log level: {logging.getLevelName(log_level)}')
    app.logger.info(f'Log file: {log_file}')
    app.logger.info('=' * 50)


def log_api_call(app, endpoint, params=None):
    """
    API 호출 로그 기록 (감사 로그)

    Args:
        app (Flask): Flask 앱 객체
        endpoint (str): API 엔드포인트 (예: "/api/apply")
        params (dict, optional): 추가 파라미터 (개인정보 제외)

    Example:
        >>> log_api_call(app, "/api/availability", {"date": "2026-01-15"})
        # 로그: INFO - API Call: /api/availability | Params: {...}
    """
    log_msg = f"API Call: {endpoint}"
    if params:
        log_msg += f" | Params: {params}"
    app.logger.info(log_msg)


def log_admin_action(app, action, details=None):
    """
    관리자 액션 로그 기록

    Args:
        app (Flask): Flask 앱 객체
        action (str): 액션 종류 (예: "UPDATE_STATUS")
        details (dict, optional): 상세 정보

    Example:
        >>> log_admin_action(app, "DELETE_APPLICATION", {"id": 50})
        # 로그: INFO - Admin Action: DELETE_APPLICATION | Details: {...}
    """
    log_msg = f"Admin Action: {action}"
    if details:
        log_msg += f" | Details: {details}"
    app.logger.info(log_msg)
