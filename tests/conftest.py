import pytest

from interface_support.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
	get_settings.cache_clear()
	yield
	get_settings.cache_clear()
