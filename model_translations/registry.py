"""
Реестр переводимых моделей.

Каждая модель явно регистрирует набор переводимых полей и модель переводов
(обычно в модуле translation.py приложения):

    from model_translations.registry import register, TranslationOptions

    @register(Service)
    class ServiceTranslationOptions(TranslationOptions):
        fields = ('name', 'description')

Реестр проверяет объявление один раз при регистрации и устанавливает на модель
дескрипторы для чтения переводов.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Tuple, Type

from django.apps import apps
from django.core.exceptions import FieldDoesNotExist
from django.db import models

from .descriptors import TranslatedAttribute, TranslationsAttribute
from .exceptions import AlreadyRegistered, NotRegistered, TranslationConfigurationError

logger = logging.getLogger(__name__)

TRANSLATIONS_SUFFIX = '_translations'


class TranslationOptions:
    """
    Объявление переводимых полей модели.

    Атрибуты:
        fields: Переводимые поля (обязательно)
        translation_model: Модель переводов или 'app_label.ModelName';
            по умолчанию <ModelName>Translation в том же приложении
        fk_name: Имя внешнего ключа на базовую модель; по умолчанию
            единственный ForeignKey модели переводов на эту модель
        locale_field: Поле с кодом локали
    """
    translation_model = None
    fk_name = None
    locale_field = 'language'


@dataclass(frozen=True)
class ModelTranslationInfo:
    """Разрешенная конфигурация переводов для одной модели."""
    model: Type[models.Model]
    translation_model: Type[models.Model]
    fields: Tuple[str, ...]
    fk_name: str
    related_name: str
    locale_field: str

    def is_translatable(self, attribute):
        return attribute in self.fields


class TranslationRegistry:
    """
    Реестр, индексированный меткой модели (app_label.modelname).
    """

    def __init__(self):
        self._registry: Dict[str, ModelTranslationInfo] = {}

    @staticmethod
    def _key(model):
        return model._meta.label_lower

    def register(self, model, options_class=TranslationOptions):
        """
        Регистрирует модель и устанавливает дескрипторы переводимых полей.

        Args:
            model: Базовая модель
            options_class: Подкласс TranslationOptions

        Returns:
            ModelTranslationInfo: Разрешенная конфигурация

        Raises:
            AlreadyRegistered: Модель уже зарегистрирована
            TranslationConfigurationError: Объявление некорректно
        """
        key = self._key(model)
        if key in self._registry:
            raise AlreadyRegistered(f'{model._meta.label} is already registered for translations.')

        info = self._build_info(model, options_class)
        for attribute in info.fields:
            setattr(model, attribute, TranslatedAttribute(attribute))
            setattr(model, f'{attribute}{TRANSLATIONS_SUFFIX}', TranslationsAttribute(attribute))

        self._registry[key] = info
        logger.debug(
            f'Registered translations for {model._meta.label}: '
            f'{", ".join(info.fields)} -> {info.translation_model._meta.label}'
        )
        return info

    def unregister(self, model):
        info = self.get_info(model)
        for attribute in info.fields:
            delattr(model, attribute)
            delattr(model, f'{attribute}{TRANSLATIONS_SUFFIX}')
        del self._registry[self._key(model)]

    def is_registered(self, model):
        return self._key(model) in self._registry

    def get_info(self, model) -> ModelTranslationInfo:
        """
        Возвращает конфигурацию переводов модели (класса или экземпляра).

        Raises:
            NotRegistered: Модель не объявила переводимые поля
        """
        try:
            return self._registry[self._key(model)]
        except KeyError:
            raise NotRegistered(
                f'{model._meta.label} must declare its translatable fields '
                f'(register it with model_translations.registry.register).'
            ) from None

    def get_registered_models(self):
        return [info.model for info in self._registry.values()]

    def _build_info(self, model, options_class):
        label = model._meta.label
        fields = getattr(options_class, 'fields', None)
        if fields is None:
            raise TranslationConfigurationError(f'{options_class.__name__} must define a `fields` attribute for {label}.')
        if isinstance(fields, str):
            fields = (fields,)
        fields = tuple(fields)
        if not fields:
            raise TranslationConfigurationError(f'{options_class.__name__} declares no translatable fields for {label}.')

        base_columns = {field.name for field in model._meta.concrete_fields}
        base_columns.update(field.attname for field in model._meta.concrete_fields)
        clashing = [name for name in fields if name in base_columns]
        if clashing:
            raise TranslationConfigurationError(
                f'Translatable fields must not be columns of {label}: {", ".join(clashing)}.'
            )

        translation_model = self._resolve_translation_model(model, options_class.translation_model)
        translation_label = translation_model._meta.label

        translation_columns = {field.name for field in translation_model._meta.concrete_fields}
        missing = [name for name in fields if name not in translation_columns]
        if missing:
            raise TranslationConfigurationError(
                f'{translation_label} has no columns for translatable fields: {", ".join(missing)}.'
            )

        locale_field = options_class.locale_field
        if locale_field not in translation_columns:
            raise TranslationConfigurationError(f'{translation_label} has no locale field {locale_field!r}.')

        fk = self._resolve_fk(model, translation_model, options_class.fk_name)
        if not self._has_unique_locale_constraint(translation_model, fk.name, locale_field):
            raise TranslationConfigurationError(
                f'{translation_label} must be unique on ({fk.name}, {locale_field}).'
            )

        return ModelTranslationInfo(
            model=model,
            translation_model=translation_model,
            fields=fields,
            fk_name=fk.name,
            related_name=fk.remote_field.get_accessor_name(),
            locale_field=locale_field,
        )

    @staticmethod
    def _resolve_translation_model(model, declared):
        if declared is None:
            declared = f'{model._meta.app_label}.{model.__name__}Translation'
        if isinstance(declared, str):
            try:
                return apps.get_model(declared)
            except (LookupError, ValueError):
                raise TranslationConfigurationError(
                    f'Translation model {declared!r} for {model._meta.label} was not found.'
                ) from None
        return declared

    @staticmethod
    def _resolve_fk(model, translation_model, fk_name):
        translation_label = translation_model._meta.label
        if fk_name:
            try:
                fk = translation_model._meta.get_field(fk_name)
            except FieldDoesNotExist:
                raise TranslationConfigurationError(f'{translation_label} has no field {fk_name!r}.') from None
            if not isinstance(fk, models.ForeignKey) or fk.remote_field.model is not model:
                raise TranslationConfigurationError(
                    f'{translation_label}.{fk_name} is not a foreign key to {model._meta.label}.'
                )
            return fk

        candidates = [
            field for field in translation_model._meta.concrete_fields
            if isinstance(field, models.ForeignKey) and field.remote_field.model is model
        ]
        if len(candidates) != 1:
            raise TranslationConfigurationError(
                f'{translation_label} must have exactly one foreign key to {model._meta.label} '
                f'(found {len(candidates)}); set fk_name explicitly.'
            )
        return candidates[0]

    @staticmethod
    def _has_unique_locale_constraint(translation_model, fk_name, locale_field):
        expected = {fk_name, locale_field}
        opts = translation_model._meta
        for together in opts.unique_together:
            if set(together) == expected:
                return True
        for constraint in opts.constraints:
            if (
                isinstance(constraint, models.UniqueConstraint)
                and constraint.condition is None
                and set(constraint.fields) == expected
            ):
                return True
        return False


registry = TranslationRegistry()


def register(model, registry=registry):
    """
    Декоратор регистрации: @register(Service) над подклассом TranslationOptions.
    """
    def wrapper(options_class):
        registry.register(model, options_class)
        return options_class
    return wrapper


def get_info(model) -> ModelTranslationInfo:
    return registry.get_info(model)
