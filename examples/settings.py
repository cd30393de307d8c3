"""Django settings for the example development server.

Serves the bundled site content with DEBUG on.  Set ``DEVSUMMIT_ENV`` to
``production`` (in the environment or ``.env``) to serve prebuilt assets from
``res/`` instead of the development folders.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from django_devsummit.site.templating import DEFAULT_SITE_ROOT, template_settings

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

PRODUCTION = os.environ.get("DEVSUMMIT_ENV", "") == "production"
SITE_ROOT = Path(os.environ.get("DEVSUMMIT_SITE_ROOT", DEFAULT_SITE_ROOT))

SECRET_KEY = "example-dev-key-not-for-production"
DEBUG = not PRODUCTION
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "django_devsummit.site",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "urls"

TEMPLATES = [template_settings(SITE_ROOT, debug=DEBUG)]

DATABASES = {}

USE_TZ = True

DJANGO_DEVSUMMIT = {
    "production": PRODUCTION,
    "site_root": SITE_ROOT,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {
        "django_devsummit": {"handlers": ["console"], "level": "DEBUG" if DEBUG else "INFO"},
    },
}
