import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv


def load_environment_variables():
    if os.path.exists("../.env"):
        load_dotenv("../.env")


def env_variable(name: str, default=None) -> Union[str, bool]:
    value = os.getenv(name, default)
    if value and str(value).lower() == "false":
        return False
    if value and str(value).lower() == "true":
        return True
    return value


load_environment_variables()

IS_DEV = env_variable("IS_DEV")
URL_HOSTNAME = os.getenv("URL_HOSTNAME", "http://localhost:" + os.getenv("PORT", "5312"))

DEFAULT_DICTIONARY_DIR = Path(__file__).parent / "data"
DICTIONARY_DIR = Path(os.getenv("DICTIONARY_DIR", str(DEFAULT_DICTIONARY_DIR)))

REQUEST_TIMEOUT_SECS = int(os.getenv("REQUEST_TIMEOUT_SECS", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def bugsnag_enabled() -> bool:
    return bool(
        not env_variable("DISABLE_BUGSNAG_LOGGING")
        and env_variable("BUGSNAG_API_KEY")
        and env_variable("BUGSNAG_RELEASE_STAGE"),
    )


BUGSNAG_API_KEY = env_variable("BUGSNAG_API_KEY")
BUGSNAG_RELEASE_STAGE = env_variable("BUGSNAG_RELEASE_STAGE")
BUGSNAG_ENABLED = bugsnag_enabled()
