"""
테스트 공용 fixture

MySQL 대신 MySQLStore 와 같은 인터페이스를 가진 메모리 저장소를 사용합니다.
"""

from datetime import date, datetime

import pytest

from app import create_app
from utils.db import DataAccessError
from utils.store import UNSET


ADMIN_TOKEN = 'test-admin-token'


class FakeStore:
    """메모리 기반 저장소 (테스트 전용)"""

    def __init__(self):
        self.applications = {}
        self.date_settings = {}
        self.weekday_settings = {}
        self.next_id = 1
        self.fail = False
        self.calls = []

    def _check(self, name):
        self.calls.append(name)
        if self.fail:
            raise DataAccessError("store unreachable")

    # 테스트 데이터 준비용
    def add_application(self, gender, desired_date=None, status='confirmed',
                        created_at=None, name='홍길동'):
        application_id = self.next_id
        self.next_id += 1
        self.applications[application_id] = {
            'id': application_id,
            'name': name,
            'age': 30,
            'gender': gender,
            'phone': '010-1234-5678',
            'kakao_id': None,
            'location': None,
            'preferred_gender': None,
            'note': None,
            'desired_date': desired_date,
            'status': status,
            'admin_note': None,
            'agree_privacy': True,
            'created_at': created_at or datetime(2026, 1, 1, 12, 0, application_id % 60),
        }
        return application_id

    # 정원 설정
    def get_date_setting(self, day):
        self._check('get_date_setting')
        return self.date_settings.get(day)

    def get_weekday_setting(self, weekday):
        self._check('get_weekday_setting')
        return self.weekday_settings.get(weekday)

    def list_date_settings(self, start=None, end=None):
        self._check('list_date_settings')
        return [
            row for day, row in sorted(self.date_settings.items())
            if (start is None or day >= start) and (end is None or day < end)
        ]

    def list_weekday_settings(self):
        self._check('list_weekday_settings')
        return [row for _, row in sorted(self.weekday_settings.items())]

    def upsert_date_setting(self, day, max_male, max_female):
        self._check('upsert_date_setting')
        self.date_settings[day] = {'date': day, 'max_male': max_male, 'max_female': max_female}

    def upsert_weekday_setting(self, weekday, max_male, max_female):
        self._check('upsert_weekday_setting')
        self.weekday_settings[weekday] = {
            'weekday': weekday, 'max_male': max_male, 'max_female': max_female
        }

    def delete_date_setting(self, day):
        self._check('delete_date_setting')
        return 1 if self.date_settings.pop(day, None) else 0

    def delete_weekday_setting(self, weekday):
        self._check('delete_weekday_setting')
        return 1 if self.weekday_settings.pop(weekday, None) else 0

    # 인원 집계
    def _grouped(self, rows):
        counts = {}
        for row in rows:
            key = (row['desired_date'], row['gender'])
            counts[key] = counts.get(key, 0) + 1
        return [
            {'desired_date': day, 'gender': gender, 'cnt': cnt}
            for (day, gender), cnt in counts.items()
        ]

    def count_confirmed_by_gender(self, day):
        self._check('count_confirmed_by_gender')
        counts = {}
        for row in self.applications.values():
            if row['desired_date'] == day and row['status'] == 'confirmed':
                counts[row['gender']] = counts.get(row['gender'], 0) + 1
        return counts

    def count_confirmed_by_date(self, start, end):
        self._check('count_confirmed_by_date')
        return self._grouped(
            row for row in self.applications.values()
            if row['status'] == 'confirmed'
            and row['desired_date'] is not None
            and start <= row['desired_date'] < end
        )

    def count_applications_by_date(self, start, end):
        self._check('count_applications_by_date')
        return self._grouped(
            row for row in self.applications.values()
            if row['desired_date'] is not None
            and start <= row['desired_date'] < end
        )

    # 신청
    def insert_application(self, fields):
        self._check('insert_application')
        application_id = self.next_id
        self.next_id += 1
        row = dict(fields)
        row.update({
            'id': application_id,
            'status': 'pending',
            'admin_note': None,
            'created_at': datetime(2026, 1, 10, 9, 0, 0),
        })
        self.applications[application_id] = row
        return application_id

    def get_application(self, application_id):
        self._check('get_application')
        return self.applications.get(application_id)

    def list_applications(self, status=None, start=None, end=None):
        self._check('list_applications')
        rows = [
            row for row in self.applications.values()
            if (status is None or row['status'] == status)
            and (start is None or row['created_at'].date() >= start)
            and (end is None or row['created_at'].date() < end)
        ]
        return sorted(rows, key=lambda row: row['created_at'], reverse=True)

    def update_application(self, application_id, status, admin_note=UNSET):
        self._check('update_application')
        row = self.applications.get(application_id)
        if row is None:
            return 0
        row['status'] = status
        if admin_note is not UNSET:
            row['admin_note'] = admin_note
        return 1

    def delete_application(self, application_id):
        self._check('delete_application')
        return 1 if self.applications.pop(application_id, None) else 0


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def app(store):
    return create_app('testing', store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    return app.extensions['reservation']


@pytest.fixture
def admin_headers():
    return {'Authorization': f'Bearer {ADMIN_TOKEN}'}


@pytest.fixture
def jan15():
    return date(2026, 1, 15)
