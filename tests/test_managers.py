"""
관리자 설정/신청 관리 테스트
"""

import logging
from datetime import date, datetime

import pytest

from models import Capacity
from services.application_manager import ApplicationManager, InvalidApplicationUpdate
from services.availability import AvailabilityEvaluator
from services.capacity import CapacityResolver
from services.occupancy import OccupancyCounter
from services.settings_manager import InvalidSettingError, SettingsManager


@pytest.fixture
def settings(store):
    return SettingsManager(store, default_max=4)


@pytest.fixture
def resolver(store):
    return CapacityResolver(store, default_max=4)


@pytest.fixture
def applications(store, resolver):
    evaluator = AvailabilityEvaluator(resolver, OccupancyCounter(store))
    return ApplicationManager(store, evaluator, logging.getLogger('test.admin'))


class TestSettingsManager:

    def test_save_date_setting_fills_omitted_with_default(self, store, settings, jan15):
        saved = settings.save_date_setting('2026-01-15', max_male=2)

        assert saved.to_dict() == {'date': '2026-01-15', 'max_male': 2, 'max_female': 4}
        assert store.date_settings[jan15] == {'date': jan15, 'max_male': 2, 'max_female': 4}

    def test_save_replaces_whole_row(self, store, settings, jan15):
        settings.save_date_setting('2026-01-15', 1, 1)
        settings.save_date_setting('2026-01-15', max_female=3)

        assert store.date_settings[jan15]['max_male'] == 4
        assert store.date_settings[jan15]['max_female'] == 3

    def test_delete_date_setting_falls_back_to_weekday(self, settings, resolver, jan15):
        settings.save_weekday_setting(4, 2, 2)
        settings.save_date_setting('2026-01-15', 0, 0)
        assert resolver.resolve(jan15) == Capacity(0, 0)

        assert settings.delete_date_setting('2026-01-15') == 1

        assert resolver.resolve(jan15) == Capacity(2, 2)

    def test_delete_weekday_setting_falls_back_to_default(self, settings, resolver, jan15):
        settings.save_weekday_setting('4', 1, 1)

        settings.delete_weekday_setting('4')

        assert resolver.resolve(jan15) == Capacity(4, 4)

    @pytest.mark.parametrize('weekday', [-1, 7, '7', 'mon', None, True, 2.5, '\u00b2', ''])
    def test_invalid_weekday_rejected(self, store, settings, weekday):
        with pytest.raises(InvalidSettingError):
            settings.save_weekday_setting(weekday, 1, 1)
        with pytest.raises(InvalidSettingError):
            settings.delete_weekday_setting(weekday)
        assert store.weekday_settings == {}

    @pytest.mark.parametrize('value', [-1, '3', 1.5, True])
    def test_invalid_capacity_rejected(self, settings, value):
        with pytest.raises(InvalidSettingError):
            settings.save_date_setting('2026-01-15', value, 1)

    def test_zero_capacity_is_valid(self, store, settings):
        settings.save_weekday_setting(0, 0, 0)
        assert store.weekday_settings[0] == {'weekday': 0, 'max_male': 0, 'max_female': 0}

    @pytest.mark.parametrize('day', ['', None, '2026-1-5', '2026-02-30'])
    def test_invalid_date_rejected(self, settings, day):
        with pytest.raises(InvalidSettingError):
            settings.save_date_setting(day, 1, 1)

    def test_list_date_settings_by_month(self, settings):
        settings.save_date_setting('2026-01-31', 1, 1)
        settings.save_date_setting('2026-02-01', 2, 2)
        settings.save_date_setting('2026-01-02', 3, 3)

        listed = settings.list_date_settings(month='2026-01')

        assert [s.date for s in listed] == [date(2026, 1, 2), date(2026, 1, 31)]

    def test_list_single_date(self, settings):
        settings.save_date_setting('2026-01-15', 1, 1)

        assert len(settings.list_date_settings(day='2026-01-15')) == 1
        assert settings.list_date_settings(day='2026-01-16') == []

    def test_list_rejects_bad_month(self, settings):
        with pytest.raises(InvalidSettingError):
            settings.list_date_settings(month='Jan')


class TestApplicationManager:

    def test_list_filters_by_status_and_month(self, store, applications):
        store.add_application('남', status='pending', created_at=datetime(2026, 1, 5, 10, 0))
        store.add_application('여', status='confirmed', created_at=datetime(2026, 1, 6, 10, 0))
        store.add_application('여', status='pending', created_at=datetime(2026, 2, 1, 0, 0))

        assert len(applications.list_applications()) == 3
        assert len(applications.list_applications(status='pending')) == 2
        january = applications.list_applications(month='2026-01')
        assert [a.created_at.day for a in january] == [6, 5]
        assert len(applications.list_applications(status='pending', month='2026-01')) == 1

    def test_list_rejects_unknown_status(self, applications):
        with pytest.raises(InvalidApplicationUpdate):
            applications.list_applications(status='done')

    @pytest.mark.parametrize('start, target', [
        ('pending', 'confirmed'),
        ('confirmed', 'matched'),
        ('rejected', 'pending'),
        ('matched', 'rejected'),
    ])
    def test_any_status_transition_allowed(self, store, applications, start, target):
        application_id = store.add_application('남', status=start)

        assert applications.update_status(application_id, target) == 1
        assert store.applications[application_id]['status'] == target

    def test_note_only_written_when_given(self, store, applications):
        application_id = store.add_application('여', status='pending')
        store.applications[application_id]['admin_note'] = '기존 메모'

        applications.update_status(application_id, 'rejected')
        assert store.applications[application_id]['admin_note'] == '기존 메모'

        applications.update_status(str(application_id), 'pending', note='재검토')
        assert store.applications[application_id]['admin_note'] == '재검토'

    @pytest.mark.parametrize('application_id, status', [
        (None, 'confirmed'),
        ('abc', 'confirmed'),
        (1.9, 'rejected'),
        (float('nan'), 'rejected'),
        (0, 'confirmed'),
        (1, None),
        (1, 'done'),
    ])
    def test_invalid_update_rejected(self, applications, application_id, status):
        with pytest.raises(InvalidApplicationUpdate):
            applications.update_status(application_id, status)

    @pytest.mark.parametrize('note', [{'x': 1}, ['메모'], 3])
    def test_non_string_note_rejected(self, store, applications, note):
        application_id = store.add_application('여', status='pending')

        with pytest.raises(InvalidApplicationUpdate):
            applications.update_status(application_id, 'rejected', note=note)
        assert store.applications[application_id]['status'] == 'pending'

    def test_null_note_clears_admin_note(self, store, applications):
        application_id = store.add_application('여', status='pending')
        store.applications[application_id]['admin_note'] = '기존 메모'

        applications.update_status(application_id, 'rejected', note=None)
        assert store.applications[application_id]['admin_note'] is None

    def test_confirming_over_capacity_logs_warning(self, store, applications, jan15, caplog):
        store.upsert_date_setting(jan15, 1, 1)
        store.add_application('남', jan15, status='confirmed')
        application_id = store.add_application('남', jan15, status='pending')

        with caplog.at_level(logging.WARNING, logger='test.admin'):
            applications.update_status(application_id, 'confirmed')

        assert store.applications[application_id]['status'] == 'confirmed'
        assert '정원 초과 확정' in caplog.text

    def test_delete(self, store, applications):
        application_id = store.add_application('남')

        assert applications.delete(application_id) == 1
        assert applications.delete(application_id) == 0
