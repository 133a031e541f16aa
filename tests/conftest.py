import datetime

import pytest

from fodselsnr import faker_providers


@pytest.fixture(autouse=True, scope="session")
def fodselsnr_faker_provider(_session_faker):
    _session_faker.add_provider(faker_providers.NorwegianIdentityProvider)


@pytest.fixture
def today():
    return datetime.date(2026, 10, 19)
