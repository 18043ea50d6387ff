import logging
import os

import pytest
from fastapi.testclient import TestClient

from app.api import ENDPOINTS
from app.config import DEFAULT_DICTIONARY_DIR
from app.main import app as app_under_test
from app.services.translator import DictionaryConfig, Translator, get_translator, load_dictionaries

logger = logging.getLogger(__name__)

api = ENDPOINTS()


@pytest.fixture(autouse=True)
def set_env_vars():
    os.environ["DISABLE_BUGSNAG_LOGGING"] = "True"


@pytest.fixture()
def fake_dictionaries() -> DictionaryConfig:
    """Small dictionaries so tests don't depend on the bundled data."""
    return DictionaryConfig(
        american_only={"popsicle": "ice lolly", "parking lot": "car park", "check": "bill"},
        british_only={"ice lolly": "popsicle", "car park": "parking lot", "bin": "trash can"},
        american_to_british_spelling={"favor": "favour", "color": "colour", "check": "cheque"},
        american_to_british_titles={"dr.": "doctor", "mr.": "mr"},
    )


@pytest.fixture()
def translator(fake_dictionaries) -> Translator:
    return Translator(fake_dictionaries)


@pytest.fixture(scope="session")
def bundled_translator() -> Translator:
    return Translator(load_dictionaries(DEFAULT_DICTIONARY_DIR))


@pytest.fixture
def test_app():
    yield app_under_test
    app_under_test.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app, translator):
    test_app.dependency_overrides[get_translator] = lambda: translator
    return TestClient(test_app)


@pytest.fixture
def translate_url():
    return api.translate()
