"""
WSGI 진입점

gunicorn 등 WSGI 서버에서 참조합니다.
    gunicorn wsgi:application

환경 변수(DB_*, ADMIN_TOKEN, DEFAULT_MAX_PER_GENDER)는
.env 파일 또는 서버 환경에서 설정합니다.
"""

import os

from app import create_app

application = create_app(os.environ.get('FLASK_ENV', 'production'))
