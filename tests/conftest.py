"""
pytest conftest: shared fixtures for unit tests.
"""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; drop the cache so monkeypatched env vars apply."""
    from validata.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def validator():
    from validata import Validator
    return Validator()


@pytest.fixture
def R(validator):
    return validator.rules


@pytest.fixture
def signup_rules(R):
    return {
        "email": [R.required("Email is required"), R.email("Email is not valid")],
        "first_name": [R.max(10, "Too long, must be :max characters or less")],
        "age": [R.between([1, 10], "Out of range")],
    }


@pytest.fixture
def schema_dir(tmp_path, monkeypatch):
    """Empty schema directory picked up by load_schema(name)."""
    monkeypatch.setenv("VALIDATA_SCHEMA_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_schema(schema_dir):
    def _write(name, text):
        path = schema_dir / f"{name}.yaml"
        path.write_text(text)
        return path
    return _write
