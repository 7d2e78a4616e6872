"""
Исключения приложения model_translations.

Этот модуль содержит исключения для:
1. Ошибок конфигурации переводимых моделей
2. Ошибок формата переводов во входных данных

Ошибки хранилища (IntegrityError, DatabaseError) не оборачиваются
и пробрасываются вызывающему коду без изменений.
"""

from django.core.exceptions import ImproperlyConfigured
from django.utils.translation import gettext_lazy as _
from rest_framework.exceptions import ValidationError


class TranslationConfigurationError(ImproperlyConfigured):
    """
    Модель не объявила набор переводимых полей или объявила его некорректно.

    Фатальная ошибка: ни чтение, ни запись не выполняются,
    пока объявление не будет исправлено.
    """


class NotRegistered(TranslationConfigurationError):
    """Модель не зарегистрирована в реестре переводов."""


class AlreadyRegistered(TranslationConfigurationError):
    """Модель уже зарегистрирована в реестре переводов."""


class InvalidTranslationFormat(ValidationError):
    """
    Переводимое поле передано не в виде словаря {'locale': 'value'}.

    Ошибка клиентских данных: в DRF-представлениях превращается в ответ 400,
    внутри записи откатывает всю транзакцию.
    """
    default_code = 'invalid_translation_format'

    def __init__(self, attribute, code=None):
        self.attribute = attribute
        message = _(
            "The '%(attribute)s' attribute must be a mapping of translations "
            "in the format {'locale': 'value'}."
        ) % {'attribute': attribute}
        super().__init__(message, code=code)
