"""
Настройки проекта для разработки и тестов приложения model_translations.
"""
from pathlib import Path
from decouple import config

# Базовые пути проекта
BASE_DIR = Path(__file__).resolve().parent

# Настройки безопасности
SECRET_KEY = config('SECRET_KEY', default='test-secret-key')
DEBUG = config('DEBUG', default=True, cast=bool)
ALLOWED_HOSTS = ['localhost', '127.0.0.1']

# Список установленных приложений
INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',

    # Внешние приложения
    'rest_framework',

    # Локальные приложения
    'model_translations',
    'catalog',
]

# База данных
DATABASES = {
    'default': {
        'ENGINE': config('DB_ENGINE', default='django.db.backends.sqlite3'),
        'NAME': config('DB_NAME', default=str(BASE_DIR / 'db.sqlite3')),
        'USER': config('DB_USER', default=''),
        'PASSWORD': config('DB_PASSWORD', default=''),
        'HOST': config('DB_HOST', default=''),
        'PORT': config('DB_PORT', default=''),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Настройки локализации
LANGUAGE_CODE = config('LANGUAGE_CODE', default='en')
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Поддерживаемые языки
LANGUAGES = [
    ('en', 'English'),
    ('ru', 'Russian'),
    ('de', 'German'),
    ('fr', 'French'),
    ('ar', 'Arabic'),
]

# Переводимые поля моделей
MODEL_TRANSLATIONS = {
    # Подгружать переводы при каждой выборке переводимых моделей
    'AUTO_LOAD': config('MODEL_TRANSLATIONS_AUTO_LOAD', default=False, cast=bool),
    # none | app-default | first-available
    'FALLBACK': config('MODEL_TRANSLATIONS_FALLBACK', default='none'),
}

# Логирование
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': True,
        },
        'model_translations': {
            'handlers': ['console'],
            'level': config('MODEL_TRANSLATIONS_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}
