from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('NAVEXA_SECRET_KEY', 'django-insecure-navexa-key')
DEBUG = os.environ.get('NAVEXA_DEBUG', '1') == '1'
ALLOWED_HOSTS = ['*']

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'fleetops',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'navexa.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'navexa.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.environ.get('NAVEXA_TIME_ZONE', 'Asia/Kolkata')
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'fleetops': {
            'handlers': ['console'],
            'level': os.environ.get('NAVEXA_LOG_LEVEL', 'INFO'),
        },
    },
}

# Fleet ledger
# Store backends: DatabaseStore keeps both collections in sqlite,
# JsonFileStore in NAVEXA_STORE_PATH (handy on hosts without a database).
NAVEXA_STORE_BACKEND = os.environ.get('NAVEXA_STORE_BACKEND', 'fleetops.store.DatabaseStore')
if os.environ.get('RENDER') or os.environ.get('RENDER_EXTERNAL_URL'):
    NAVEXA_STORE_PATH = Path('/tmp/navexa_store.json')
else:
    NAVEXA_STORE_PATH = BASE_DIR / 'navexa_store.json'

NAVEXA_INSIGHT_GENERATOR = 'fleetops.insight.ReportInsightGenerator'

# Treat an empty or unreadable maintenance date as urgent instead of safe.
NAVEXA_FLAG_UNKNOWN_DATES = os.environ.get('NAVEXA_FLAG_UNKNOWN_DATES', '0') == '1'
