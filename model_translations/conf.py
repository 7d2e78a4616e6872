"""
Настройки приложения model_translations.

Все значения читаются из settings.MODEL_TRANSLATIONS при каждом обращении,
поэтому override_settings в тестах применяется сразу.

Пример:
    MODEL_TRANSLATIONS = {
        'AUTO_LOAD': False,
        'FALLBACK': 'app-default',
    }
"""

from django.conf import settings

from .exceptions import TranslationConfigurationError

FALLBACK_NONE = 'none'
FALLBACK_APP_DEFAULT = 'app-default'
FALLBACK_FIRST_AVAILABLE = 'first-available'

FALLBACK_CHOICES = (FALLBACK_NONE, FALLBACK_APP_DEFAULT, FALLBACK_FIRST_AVAILABLE)

DEFAULTS = {
    'AUTO_LOAD': False,
    'FALLBACK': FALLBACK_NONE,
}


def get_setting(name):
    """
    Возвращает значение настройки с учетом значений по умолчанию.

    Args:
        name: Имя ключа в MODEL_TRANSLATIONS

    Returns:
        Значение настройки
    """
    user_settings = getattr(settings, 'MODEL_TRANSLATIONS', None) or {}
    return user_settings.get(name, DEFAULTS[name])


def auto_load_enabled():
    return bool(get_setting('AUTO_LOAD'))


def normalize_fallback(policy):
    """
    Проверяет политику fallback. None эквивалентен 'none'.

    Raises:
        TranslationConfigurationError: Неизвестная политика
    """
    if policy is None:
        return FALLBACK_NONE
    if policy not in FALLBACK_CHOICES:
        raise TranslationConfigurationError(
            f"Unknown translation fallback policy {policy!r}. "
            f"Expected one of: {', '.join(FALLBACK_CHOICES)}."
        )
    return policy


def get_fallback_policy():
    return normalize_fallback(get_setting('FALLBACK'))


def get_default_locale():
    """Язык по умолчанию приложения (цель политики app-default)."""
    return settings.LANGUAGE_CODE
