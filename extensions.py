"""
서비스 객체 초기화

create_app() 에서 저장소와 기본 정원을 주입해 한 번만 생성하고,
라우트에서는 get_services() 로 꺼내 씁니다.
"""

from flask import current_app

from services.application_manager import ApplicationManager
from services.availability import AvailabilityEvaluator
from services.capacity import CapacityResolver
from services.intake import ApplicationIntake
from services.occupancy import OccupancyCounter
from services.settings_manager import SettingsManager

EXTENSION_KEY = 'reservation'


class ReservationServices:
    """앱 단위로 공유되는 서비스 묶음"""

    def __init__(self, store, default_max, logger):
        self.store = store
        self.default_max = default_max
        self.resolver = CapacityResolver(store, default_max)
        self.counter = OccupancyCounter(store)
        self.evaluator = AvailabilityEvaluator(self.resolver, self.counter)
        self.intake = ApplicationIntake(store, self.evaluator, logger)
        self.settings = SettingsManager(store, default_max)
        self.applications = ApplicationManager(store, self.evaluator, logger)


def init_services(app, store):
    services = ReservationServices(
        store,
        default_max=app.config['DEFAULT_MAX_PER_GENDER'],
        logger=app.logger,
    )
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services():
    return current_app.extensions[EXTENSION_KEY]
