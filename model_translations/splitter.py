"""
Разделение входных данных записи на базовые поля и переводы.

split_translations({'code': 'x', 'name': {'en': 'Laptop', 'fr': 'Ordinateur'}}, ('name',))
    -> ({'code': 'x'}, {'en': {'name': 'Laptop'}, 'fr': {'name': 'Ordinateur'}})
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Tuple

from .exceptions import InvalidTranslationFormat

NON_SCALAR_TYPES = (Mapping, list, tuple, set, frozenset)


def validate_translation_value(attribute: str, value: Any) -> Dict[str, Any]:
    """
    Проверяет, что значение переводимого поля имеет вид {'locale': scalar}.

    Args:
        attribute: Имя переводимого поля
        value: Переданное значение

    Returns:
        dict: Копия словаря переводов

    Raises:
        InvalidTranslationFormat: Значение не словарь или содержит вложенные структуры
    """
    if not isinstance(value, Mapping):
        raise InvalidTranslationFormat(attribute)
    for translated in value.values():
        if isinstance(translated, NON_SCALAR_TYPES):
            raise InvalidTranslationFormat(attribute)
    return dict(value)


def split_translations(
    payload: Mapping,
    fields: Iterable[str],
) -> Tuple[Dict[str, Any], Dict[str, Dict[str, Any]]]:
    """
    Отделяет переводимые поля от базовых.

    Исходный словарь не изменяется. Значение None у переводимого поля
    считается отсутствующим: ключ убирается, перевод не пишется.

    Args:
        payload: Данные записи (имя поля -> значение)
        fields: Объявленные переводимые поля модели

    Returns:
        tuple: (базовые поля, {locale: {поле: значение}})
    """
    base = dict(payload)
    translations: Dict[str, Dict[str, Any]] = {}

    for attribute in fields:
        if attribute not in base:
            continue
        value = base.pop(attribute)
        if value is None:
            continue
        for locale, translated in validate_translation_value(attribute, value).items():
            translations.setdefault(locale, {})[attribute] = translated

    return base, translations
