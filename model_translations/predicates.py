"""
Фильтры базовых записей по значениям переводов.

Каждый фильтр - подзапрос EXISTS к модели переводов, связанный
с базовой записью по первичному ключу:

    Service.objects.filter(translation_exists(Service, 'name', 'Laptop', locale='en'))
"""

import re
from typing import Any, Optional, Tuple

from django.core.exceptions import FieldDoesNotExist
from django.db.models import Exists, OuterRef, Q

from .context import LocaleContext, current_locale
from .registry import get_info

EQUALS = '='

# Операторы в стиле SQL -> (lookup Django, отрицание)
OPERATORS = {
    '=': ('exact', False),
    '==': ('exact', False),
    '!=': ('exact', True),
    '<>': ('exact', True),
    '<': ('lt', False),
    '<=': ('lte', False),
    '>': ('gt', False),
    '>=': ('gte', False),
}

LIKE_OPERATORS = {
    'like': (False, False),
    'not like': (False, True),
    'ilike': (True, False),
    'not ilike': (True, True),
}


def like_to_lookup(pattern: str, case_insensitive: bool = False) -> Tuple[str, Any]:
    """
    Переводит шаблон LIKE в lookup Django.

    '%foo%' -> contains, 'foo%' -> startswith, '%foo' -> endswith,
    'foo' -> exact; шаблоны с '%' или '_' в середине -> regex.
    """
    prefix = 'i' if case_insensitive else ''
    starts = pattern.startswith('%')
    ends = pattern.endswith('%') and len(pattern) > 1
    core = pattern[1 if starts else 0:len(pattern) - 1 if ends else len(pattern)]

    if '%' not in core and '_' not in core:
        if starts and ends:
            return f'{prefix}contains', core
        if starts:
            return f'{prefix}endswith', core
        if ends:
            return f'{prefix}startswith', core
        return f'{prefix}exact', core

    regex = ''.join(
        '.*' if char == '%' else '.' if char == '_' else re.escape(char)
        for char in pattern
    )
    return f'{prefix}regex', f'^{regex}$'


def comparison_q(attribute: str, operator: str, value: Any) -> Q:
    """
    Условие на поле модели переводов для оператора.

    Допускаются SQL-операторы (=, !=, <, like, ...) и имена lookup Django
    (icontains, startswith, in, isnull, ...).
    """
    normalized = operator.strip().lower()
    if normalized in OPERATORS:
        lookup, negated = OPERATORS[normalized]
    elif normalized in LIKE_OPERATORS:
        case_insensitive, negated = LIKE_OPERATORS[normalized]
        lookup, value = like_to_lookup(str(value), case_insensitive)
    else:
        lookup, negated = normalized, False

    condition = Q(**{f'{attribute}__{lookup}': value})
    if negated:
        # NULL не удовлетворяет ни сравнению, ни его отрицанию
        return ~condition & Q(**{f'{attribute}__isnull': False})
    return condition


def translation_exists(
    model,
    attribute: str,
    value: Any,
    *,
    operator: str = EQUALS,
    locale: Optional[str] = None,
    any_locale: bool = False,
    context: Optional[LocaleContext] = None,
) -> Exists:
    """
    Подзапрос EXISTS по строкам переводов записи.

    Args:
        model: Базовая переводимая модель
        attribute: Переводимое поле
        value: Значение для сравнения
        operator: Оператор сравнения
        locale: Локаль строки перевода; None - текущая на момент вызова
        any_locale: Не ограничивать локаль
        context: Явный контекст локалей

    Returns:
        Exists: Выражение для QuerySet.filter()
    """
    info = get_info(model)
    if not info.is_translatable(attribute):
        raise FieldDoesNotExist(f'{info.model._meta.label} has no translatable field {attribute!r}.')

    rows = info.translation_model._base_manager.filter(**{info.fk_name: OuterRef('pk')})
    if not any_locale:
        rows = rows.filter(**{info.locale_field: current_locale(locale, context)})
    rows = rows.filter(comparison_q(attribute, operator, value))
    return Exists(rows)
