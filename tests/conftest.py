import json
import random

import pytest

from pawsettings.constants import STORE_KEY
from pawsettings.i18n.locale import StaticLocaleResolver
from pawsettings.settings.service import AppSettingsService
from pawsettings.storage.protocols import MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def resolver() -> StaticLocaleResolver:
    return StaticLocaleResolver(culture="de-DE")


@pytest.fixture
def service(store: MemoryStore, resolver: StaticLocaleResolver) -> AppSettingsService:
    return AppSettingsService(store, resolver, rng=random.Random(1234))


def stored_record(store: MemoryStore) -> dict[str, object]:
    raw = store.get(STORE_KEY)
    assert raw is not None
    return json.loads(raw)
