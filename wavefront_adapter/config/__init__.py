"""Module which initializes Dynaconf"""

from dynaconf import Dynaconf, Validator
from httpx import URL, InvalidURL

from wavefront_adapter.logger import LEVELS


def is_absolute_url(value) -> bool:
    """True, if value is absolute http(s) URL"""
    try:
        url = URL(str(value))
    except InvalidURL:
        return False
    return url.is_absolute_url and url.scheme in ("http", "https")


VALIDATORS = [
    Validator(
        "wavefront.url",
        must_exist=True,
        condition=is_absolute_url,
        messages={"condition": "{value} is not valid Wavefront url, expected https://INSTANCE.wavefront.com"},
    ),
    Validator(
        "wavefront.token",
        must_exist=True,
        condition=bool,
        messages={"condition": "Wavefront API token must not be empty"},
    ),
    Validator("log_level", default="info", cast=lambda level: str(level).lower(), is_in=list(LEVELS)),
]

settings = Dynaconf(
    environments=True,
    lowercase_read=True,
    load_dotenv=True,
    settings_files=["config/settings.yaml", "config/secrets.yaml"],
    envvar_prefix="WAVEFRONT",
    merge_enabled=True,
    validators=VALIDATORS,
)
