"""
Чтение переводов записи с учетом локали и политики fallback.

Строки переводов загружаются один раз на экземпляр записи и переиспользуются
до явного обновления (refresh_translations) или записи через writer.
"""

import logging
from typing import Any, Dict, List, Optional

from django.core.exceptions import FieldDoesNotExist

from . import conf
from .context import LocaleContext
from .registry import get_info

logger = logging.getLogger(__name__)

CACHE_ATTR = '_translations_cache'


def translations_loaded(record) -> bool:
    """Загружены ли строки переводов для этого экземпляра."""
    if CACHE_ATTR in record.__dict__:
        return True
    info = get_info(record)
    return info.related_name in getattr(record, '_prefetched_objects_cache', {})


def load_translations(record) -> List[Any]:
    """
    Возвращает строки переводов записи, загружая их при первом обращении.

    Использует строки, уже подгруженные через prefetch_related
    (AUTO_LOAD или with_translations()), иначе выполняет один запрос.
    Порядок строк - по первичному ключу.
    """
    cached = record.__dict__.get(CACHE_ATTR)
    if cached is not None:
        return cached

    info = get_info(record)
    prefetched = getattr(record, '_prefetched_objects_cache', {})
    if info.related_name in prefetched:
        rows = list(prefetched[info.related_name])
    elif record.pk is None:
        rows = []
    else:
        rows = list(getattr(record, info.related_name).order_by('pk'))

    set_translations_cache(record, rows)
    return rows


def set_translations_cache(record, rows):
    record.__dict__[CACHE_ATTR] = list(rows)


def clear_translations_cache(record):
    record.__dict__.pop(CACHE_ATTR, None)
    info = get_info(record)
    prefetched = getattr(record, '_prefetched_objects_cache', None)
    if prefetched:
        prefetched.pop(info.related_name, None)


def refresh_translations(record) -> List[Any]:
    """Сбрасывает кэш строк переводов и загружает их заново."""
    clear_translations_cache(record)
    return load_translations(record)


def get_translation_row(record, locale):
    """Загруженная строка перевода для локали или None."""
    info = get_info(record)
    for row in load_translations(record):
        if getattr(row, info.locale_field) == locale:
            return row
    return None


def _check_attribute(info, attribute):
    if not info.is_translatable(attribute):
        raise FieldDoesNotExist(f'{info.model._meta.label} has no translatable field {attribute!r}.')


def resolve(
    record,
    attribute: str,
    locale: Optional[str] = None,
    *,
    context: Optional[LocaleContext] = None,
    fallback: Optional[str] = None,
) -> Optional[Any]:
    """
    Значение переводимого поля для локали.

    Args:
        record: Экземпляр переводимой модели
        attribute: Имя переводимого поля
        locale: Запрошенная локаль; по умолчанию текущая из контекста
        context: Контекст локалей; по умолчанию снимок состояния Django
        fallback: Политика fallback; по умолчанию MODEL_TRANSLATIONS['FALLBACK']

    Returns:
        Значение поля или None, если подходящего перевода нет
    """
    info = get_info(record)
    _check_attribute(info, attribute)
    if context is None:
        context = LocaleContext.from_django()
    requested = locale or context.current
    policy = conf.normalize_fallback(fallback) if fallback is not None else conf.get_fallback_policy()

    row = get_translation_row(record, requested)
    if row is None:
        if policy == conf.FALLBACK_APP_DEFAULT and context.default:
            row = get_translation_row(record, context.default)
        elif policy == conf.FALLBACK_FIRST_AVAILABLE:
            rows = load_translations(record)
            row = rows[0] if rows else None
        if row is not None:
            logger.debug(
                f'{info.model._meta.label} #{record.pk}: no {attribute!r} for {requested!r}, '
                f'using {getattr(row, info.locale_field)!r} ({policy})'
            )

    return getattr(row, attribute) if row is not None else None


def all_locales(record, attribute: str) -> Dict[str, Any]:
    """
    Все переводы поля: {locale: значение} по каждой загруженной строке.
    """
    info = get_info(record)
    _check_attribute(info, attribute)
    return {
        getattr(row, info.locale_field): getattr(row, attribute)
        for row in load_translations(record)
    }
