"""
예약 데이터 저장소 (raw SQL)

applications, date_settings, weekday_settings 테이블에 대한
단일 행 조회/삽입/수정/삭제만 제공합니다.
여러 행에 걸친 트랜잭션은 사용하지 않습니다.
"""

from contextlib import contextmanager

import mysql.connector

from utils.db import DataAccessError, get_db_connection


UNSET = object()

_APPLICATION_COLUMNS = (
    "id, name, age, gender, phone, kakao_id, location, preferred_gender, "
    "note, desired_date, status, admin_note, agree_privacy, created_at"
)


class MySQLStore:
    """
    MySQL 저장소

    각 메서드는 풀에서 연결을 하나 가져와 쿼리 후 반납합니다.
    mysql.connector.Error 는 모두 DataAccessError 로 변환됩니다.
    """

    def __init__(self, pool):
        self.pool = pool

    @contextmanager
    def _cursor(self, commit=False):
        conn = None
        cursor = None
        try:
            conn = get_db_connection(self.pool)
            cursor = conn.cursor(dictionary=True)
            yield cursor
            if commit:
                conn.commit()
        except mysql.connector.Error as err:
            if conn is not None and commit:
                conn.rollback()
            raise DataAccessError(str(err)) from err
        finally:
            if cursor:
                cursor.close()
            if conn:
                conn.close()

    # ------------------------------------------------------------------
    # 정원 설정
    # ------------------------------------------------------------------

    def get_date_setting(self, day):
        with self._cursor() as cursor:
            cursor.execute(
                "SELECT date, max_male, max_female FROM date_settings WHERE date = %s",
                (day,)
            )
            return cursor.fetchone()

    def get_weekday_setting(self, weekday):
        with self._cursor() as cursor:
            cursor.execute(
                "SELECT weekday, max_male, max_female FROM weekday_settings WHERE weekday = %s",
                (weekday,)
            )
            return cursor.fetchone()

    def list_date_settings(self, start=None, end=None):
        """날짜 설정 목록 (start <= date < end, 날짜순)"""
        query = "SELECT date, max_male, max_female FROM date_settings"
        params = []
        conditions = []
        if start is not None:
            conditions.append("date >= %s")
            params.append(start)
        if end is not None:
            conditions.append("date < %s")
            params.append(end)
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY date"

        with self._cursor() as cursor:
            cursor.execute(query, tuple(params))
            return cursor.fetchall()

    def list_weekday_settings(self):
        with self._cursor() as cursor:
            cursor.execute(
                "SELECT weekday, max_male, max_female FROM weekday_settings ORDER BY weekday"
            )
            return cursor.fetchall()

    def upsert_date_setting(self, day, max_male, max_female):
        with self._cursor(commit=True) as cursor:
            cursor.execute("""
                INSERT INTO date_settings (date, max_male, max_female)
                VALUES (%s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    max_male = VALUES(max_male),
                    max_female = VALUES(max_female)
            """, (day, max_male, max_female))

    def upsert_weekday_setting(self, weekday, max_male, max_female):
        with self._cursor(commit=True) as cursor:
            cursor.execute("""
                INSERT INTO weekday_settings (weekday, max_male, max_female)
                VALUES (%s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    max_male = VALUES(max_male),
                    max_female = VALUES(max_female)
            """, (weekday, max_male, max_female))

    def delete_date_setting(self, day):
        with self._cursor(commit=True) as cursor:
            cursor.execute("DELETE FROM date_settings WHERE date = %s", (day,))
            return cursor.rowcount

    def delete_weekday_setting(self, weekday):
        with self._cursor(commit=True) as cursor:
            cursor.execute("DELETE FROM weekday_settings WHERE weekday = %s", (weekday,))
            return cursor.rowcount

    # ------------------------------------------------------------------
    # 인원 집계
    # ------------------------------------------------------------------

    def count_confirmed_by_gender(self, day):
        """
        특정 날짜의 확정 인원 (성별별)

        Returns:
            dict: {'남': 3, '여': 2, '기타': 1} 형태 (없는 성별은 키 없음)
        """
        with self._cursor() as cursor:
            cursor.execute("""
                SELECT gender, COUNT(*) AS cnt
                FROM applications
                WHERE desired_date = %s
                  AND status = 'confirmed'
                GROUP BY gender
            """, (day,))
            return {row['gender']: row['cnt'] for row in cursor.fetchall()}

    def count_confirmed_by_date(self, start, end):
        """
        기간 내 확정 인원 (날짜 x 성별)

        Returns:
            list: [{'desired_date': date, 'gender': '남', 'cnt': 2}, ...]
        """
        with self._cursor() as cursor:
            cursor.execute("""
                SELECT desired_date, gender, COUNT(*) AS cnt
                FROM applications
                WHERE status = 'confirmed'
                  AND desired_date IS NOT NULL
                  AND desired_date >= %s
                  AND desired_date < %s
                GROUP BY desired_date, gender
            """, (start, end))
            return cursor.fetchall()

    def count_applications_by_date(self, start, end):
        """기간 내 전체 신청 (상태 무관, 날짜 x 성별)"""
        with self._cursor() as cursor:
            cursor.execute("""
                SELECT desired_date, gender, COUNT(*) AS cnt
                FROM applications
                WHERE desired_date >= %s
                  AND desired_date < %s
                GROUP BY desired_date, gender
            """, (start, end))
            return cursor.fetchall()

    # ------------------------------------------------------------------
    # 신청
    # ------------------------------------------------------------------

    def insert_application(self, fields):
        """
        신청 저장

        Args:
            fields (dict): name, age, gender, phone, kakao_id, location,
                preferred_gender, note, desired_date, agree_privacy

        Returns:
            int: 새 신청 ID
        """
        with self._cursor(commit=True) as cursor:
            cursor.execute("""
                INSERT INTO applications
                (name, age, gender, phone, kakao_id, location, preferred_gender,
                 note, desired_date, agree_privacy, status)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, 'pending')
            """, (
                fields['name'],
                fields['age'],
                fields['gender'],
                fields['phone'],
                fields.get('kakao_id'),
                fields.get('location'),
                fields.get('preferred_gender'),
                fields.get('note'),
                fields.get('desired_date'),
                fields.get('agree_privacy', True),
            ))
            return cursor.lastrowid

    def get_application(self, application_id):
        with self._cursor() as cursor:
            cursor.execute(
                f"SELECT {_APPLICATION_COLUMNS} FROM applications WHERE id = %s",
                (application_id,)
            )
            return cursor.fetchone()

    def list_applications(self, status=None, start=None, end=None):
        """신청 목록 (최신순, status / created_at 기간 필터)"""
        query = f"SELECT {_APPLICATION_COLUMNS} FROM applications"
        params = []
        conditions = []
        if status is not None:
            conditions.append("status = %s")
            params.append(status)
        if start is not None:
            conditions.append("created_at >= %s")
            params.append(start)
        if end is not None:
            conditions.append("created_at < %s")
            params.append(end)
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY created_at DESC"

        with self._cursor() as cursor:
            cursor.execute(query, tuple(params))
            return cursor.fetchall()

    def update_application(self, application_id, status, admin_note=UNSET):
        """상태 변경 (admin_note 는 전달된 경우에만 수정)"""
        if admin_note is UNSET:
            query = "UPDATE applications SET status = %s WHERE id = %s"
            params = (status, application_id)
        else:
            query = "UPDATE applications SET status = %s, admin_note = %s WHERE id = %s"
            params = (status, admin_note, application_id)

        with self._cursor(commit=True) as cursor:
            cursor.execute(query, params)
            return cursor.rowcount

    def delete_application(self, application_id):
        with self._cursor(commit=True) as cursor:
            cursor.execute("DELETE FROM applications WHERE id = %s", (application_id,))
            return cursor.rowcount
