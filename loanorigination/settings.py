"""
Django settings for the loan origination service.

Every value that differs between environments is read from the process
environment, with defaults suitable for local development.
"""

from pathlib import Path

from loans.conf import LoanSettings, ServiceSettings

BASE_DIR = Path(__file__).resolve().parent.parent

SERVICE = ServiceSettings()
LOAN_POLICY = LoanSettings()

SECRET_KEY = SERVICE.SECRET_KEY

DEBUG = SERVICE.DEBUG

ALLOWED_HOSTS = SERVICE.allowed_hosts

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'loans',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'loanorigination.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'loanorigination.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': SERVICE.DATABASE_PATH or str(BASE_DIR / 'db.sqlite3'),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = SERVICE.TIME_ZONE
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'DEFAULT_PARSER_CLASSES': ['rest_framework.parsers.JSONParser'],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'UNAUTHENTICATED_USER': None,
}

# Loan policy
MAX_LOAN_AMOUNT = LOAN_POLICY.MAX_LOAN_AMOUNT
MAX_LOAN_TERM_IN_DAYS = LOAN_POLICY.MAX_LOAN_TERM_IN_DAYS
LOAN_WEEKLY_INTEREST_FACTOR = LOAN_POLICY.LOAN_WEEKLY_INTEREST_FACTOR

# Risk analysis
RISK_WORKING_HOURS_START = LOAN_POLICY.RISK_WORKING_HOURS_START
RISK_WORKING_HOURS_END = LOAN_POLICY.RISK_WORKING_HOURS_END
RISK_MAX_REQUESTS_PER_WINDOW = LOAN_POLICY.RISK_MAX_REQUESTS_PER_WINDOW
RISK_REQUEST_WINDOW_HOURS = LOAN_POLICY.RISK_REQUEST_WINDOW_HOURS

# Celery
CELERY_BROKER_URL = SERVICE.CELERY_BROKER_URL
CELERY_RESULT_BACKEND = SERVICE.CELERY_RESULT_BACKEND
CELERY_TASK_ALWAYS_EAGER = SERVICE.CELERY_TASK_ALWAYS_EAGER
CELERY_BEAT_SCHEDULE = {
    'purge-request-history': {
        'task': 'loans.tasks.purge_request_history',
        'schedule': 60 * 60,
    },
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'loans': {
            'handlers': ['console'],
            'level': SERVICE.LOG_LEVEL,
            'propagate': False,
        },
    },
}
