"""
Запись переводимых моделей.

Этот модуль содержит операции:
1. create - создание записи вместе с переводами
2. update - изменение записи и upsert переводов по (запись, локаль)
3. first_or_create - поиск или создание
4. update_or_create - поиск и изменение или создание

Каждая операция выполняется в одной транзакции: любая ошибка (формат
переводов, ограничения БД) откатывает и базовую запись, и переводы,
после чего исключение пробрасывается без изменений.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from django.db import transaction

from .predicates import translation_exists
from .registry import get_info
from .resolver import refresh_translations, set_translations_cache
from .splitter import split_translations

logger = logging.getLogger(__name__)


def _auto_now_fields(model):
    return [
        field.name for field in model._meta.concrete_fields
        if getattr(field, 'auto_now', False)
    ]


def _writable_base_fields(model, base):
    opts = model._meta
    skipped = {'pk', opts.pk.name, opts.pk.attname}
    for field in opts.get_fields():
        if not getattr(field, 'concrete', False) or field.many_to_many:
            skipped.add(field.name)
    return {name: value for name, value in base.items() if name not in skipped}


def _create_translation_rows(info, record, translations):
    rows = []
    manager = info.translation_model._default_manager
    for locale, values in translations.items():
        rows.append(manager.create(**{
            info.fk_name: record,
            info.locale_field: locale,
            **values,
        }))
    return rows


def _upsert_translation_rows(info, record, translations):
    """
    Upsert строк переводов по уникальному ключу (запись, локаль).

    INSERT ... ON CONFLICT DO UPDATE обновляет только переданные поля,
    поэтому параллельные записи не создают дубликатов локали.
    """
    manager = info.translation_model._default_manager
    touched = _auto_now_fields(info.translation_model)
    for locale, values in translations.items():
        row = info.translation_model(**{
            info.fk_name: record,
            info.locale_field: locale,
            **values,
        })
        manager.bulk_create(
            [row],
            update_conflicts=True,
            unique_fields=[info.fk_name, info.locale_field],
            update_fields=list(values) + [name for name in touched if name not in values],
        )


def create(model, payload: Mapping[str, Any]):
    """
    Создает запись и по одной строке перевода на каждую локаль.

    Args:
        model: Переводимая модель
        payload: Базовые поля и переводимые поля вида {'locale': значение}

    Returns:
        Созданная запись с загруженными переводами

    Raises:
        InvalidTranslationFormat: Переводимое поле передано не словарем
    """
    info = get_info(model)
    with transaction.atomic():
        base, translations = split_translations(payload, info.fields)
        record = model._default_manager.create(**base)
        rows = _create_translation_rows(info, record, translations)

    set_translations_cache(record, rows)
    logger.info(
        f'Created {model._meta.label} #{record.pk} with translations: '
        f'{", ".join(translations) or "none"}'
    )
    return record


def update(record, payload: Mapping[str, Any]) -> bool:
    """
    Изменяет базовые поля записи и upsert-ит переводы переданных локалей.

    Непереданные локали и непереданные поля существующих строк не меняются.
    После записи кэш переводов экземпляра обновляется.

    Первичный ключ и не хранимые в таблице поля (обратные связи, m2m)
    из базовых данных не сохраняются: критерии поиска update_or_create
    могут содержать id.

    Returns:
        bool: True после успешного сохранения, в том числе когда
            менялись только переводы
    """
    info = get_info(record)
    with transaction.atomic():
        base, translations = split_translations(payload, info.fields)

        base = _writable_base_fields(type(record), base)
        if base:
            for name, value in base.items():
                setattr(record, name, value)
            update_fields = list(base) + [
                name for name in _auto_now_fields(type(record)) if name not in base
            ]
            record.save(update_fields=update_fields)

        _upsert_translation_rows(info, record, translations)
        refresh_translations(record)

    logger.info(
        f'Updated {record._meta.label} #{record.pk}: base fields {sorted(base)}, '
        f'translations {", ".join(translations) or "none"}'
    )
    return True


def _match_queryset(model, match: Mapping[str, Any]):
    """
    Выборка по критериям поиска.

    Переводимые поля в критериях проверяются так же, как при создании,
    и должны совпасть для каждой переданной локали.
    """
    info = get_info(model)
    base, translations = split_translations(match, info.fields)
    queryset = model._default_manager.filter(**base)
    for locale, values in translations.items():
        for attribute, value in values.items():
            queryset = queryset.filter(translation_exists(model, attribute, value, locale=locale))
    return queryset.order_by('pk')


def first_or_create(model, match: Mapping[str, Any], extra: Optional[Mapping[str, Any]] = None):
    """
    Возвращает первую запись по критериям или создает новую.

    Найденная запись не изменяется: данные из extra, включая переводы,
    игнорируются.

    Args:
        model: Переводимая модель
        match: Критерии поиска
        extra: Дополнительные данные для создания

    Returns:
        Запись с загруженными переводами
    """
    with transaction.atomic():
        record = _match_queryset(model, match).first()
        if record is not None:
            logger.debug(f'first_or_create: found {model._meta.label} #{record.pk}')
            refresh_translations(record)
            return record

        data: Dict[str, Any] = {**match, **(extra or {})}
        return create(model, data)


def update_or_create(model, match: Mapping[str, Any], extra: Optional[Mapping[str, Any]] = None):
    """
    Изменяет запись, найденную по критериям, или создает новую.

    Критерии объединяются с extra и проходят то же разделение и проверку,
    что и при создании.

    Returns:
        Запись с загруженными переводами
    """
    with transaction.atomic():
        data: Dict[str, Any] = {**match, **(extra or {})}
        record = _match_queryset(model, match).select_for_update().first()
        if record is None:
            return create(model, data)

        logger.debug(f'update_or_create: updating {model._meta.label} #{record.pk}')
        update(record, data)
        return record
