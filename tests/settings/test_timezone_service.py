from datetime import date, datetime, timezone

from src.attendance_recap.attendance_recap.settings.service import TimezoneService


class FakeSettingsRepo:
    def __init__(self, value):
        self.value = value
        self.reads = 0

    def get_timezone(self):
        self.reads += 1
        return self.value


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_zone_cached_for_ttl():
    repo, clock = FakeSettingsRepo("Asia/Makassar"), FakeClock()
    svc = TimezoneService(repo, ttl_seconds=300, clock=clock)

    assert svc.get_zone().key == "Asia/Makassar"
    repo.value = "Asia/Jayapura"
    clock.now = 299
    assert svc.get_zone().key == "Asia/Makassar"
    clock.now = 301
    assert svc.get_zone().key == "Asia/Jayapura"
    assert repo.reads == 2


def test_missing_or_invalid_setting_uses_default():
    assert TimezoneService(FakeSettingsRepo(None)).get_zone().key == "Asia/Jakarta"
    assert TimezoneService(FakeSettingsRepo("Not/AZone"), default_timezone="UTC").get_zone().key == "UTC"


def test_set_cached_skips_repository():
    repo = FakeSettingsRepo("Asia/Jakarta")
    svc = TimezoneService(repo, clock=FakeClock())
    svc.set_cached("Asia/Makassar")
    assert svc.get_zone().key == "Asia/Makassar"
    assert repo.reads == 0


def test_today_uses_zone():
    svc = TimezoneService(FakeSettingsRepo("Asia/Jakarta"))
    assert svc.today(now=datetime(2025, 1, 6, 17, 30, tzinfo=timezone.utc)) == date(2025, 1, 7)
