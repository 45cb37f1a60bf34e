"""
MySQL Connection Pool 관리

이 모듈은 MySQL 연결 풀을 생성하고,
연결 풀 부족 시 대기+재시도 로직을 제공합니다.
"""

import time
import mysql.connector
from mysql.connector import pooling
from mysql.connector.errors import PoolError


class DataAccessError(Exception):
    """
    데이터 저장소 접근 실패

    DB 연결 불가, 쿼리 실패 등을 감쌉니다.
    호출자는 이 예외를 0건/기본값으로 대체하지 않고 그대로 전파해야 합니다.
    """


def create_connection_pool(app_config):
    """
    MySQL Connection Pool 생성

    Args:
        app_config (Mapping): DB_HOST, DB_PORT, DB_USER, DB_PASSWORD,
            DB_NAME, DB_POOL_SIZE 를 가진 설정 (Flask app.config)

    Returns:
        MySQLConnectionPool: mysql-connector-python 연결 풀 객체

    Raises:
        mysql.connector.Error: DB 연결 실패 시

    Note:
        - pool_reset_session=True: 연결 재사용 시 세션 초기화
        - autocommit=False: 트랜잭션 명시적 제어
    """
    return pooling.MySQLConnectionPool(
        pool_name="reservation_pool",
        pool_size=app_config.get('DB_POOL_SIZE', 5),
        pool_reset_session=True,
        host=app_config.get('DB_HOST', 'localhost'),
        port=int(app_config.get('DB_PORT', 3306)),
        user=app_config.get('DB_USER', 'root'),
        password=app_config.get('DB_PASSWORD', ''),
        database=app_config.get('DB_NAME', 'matchdb'),
        autocommit=False,  # 트랜잭션 수동 제어
        get_warnings=True,
        charset='utf8mb4',
        collation='utf8mb4_unicode_ci'
    )


def get_db_connection(pool, max_retries=3, retry_delay=0.1):
    """
    Connection Pool에서 연결 가져오기 (대기+재시도 로직)

    Args:
        pool (MySQLConnectionPool): 연결 풀
        max_retries (int): 최대 재시도 횟수 (기본 3회)
        retry_delay (float): 재시도 대기 시간(초) (기본 0.1초)

    Returns:
        mysql.connector.connection.MySQLConnection: DB 연결 객체

    Raises:
        DataAccessError: 풀이 없거나, 재시도 후에도 연결을 얻지 못한 경우

    Note:
        - 재시도는 풀 고갈(PoolError)에만 적용됩니다.
        - 쿼리 실패는 재시도하지 않습니다.
    """
    if pool is None:
        raise DataAccessError("Connection pool not initialized")

    for attempt in range(max_retries):
        try:
            return pool.get_connection()
        except PoolError as e:
            if attempt < max_retries - 1:
                # 연결 풀 부족, 대기 후 재시도
                time.sleep(retry_delay)
            else:
                raise DataAccessError(
                    f"Connection pool exhausted after {max_retries} retries. "
                    f"Error: {str(e)}"
                ) from e
        except mysql.connector.Error as e:
            raise DataAccessError(f"DB 연결 실패: {e}") from e
