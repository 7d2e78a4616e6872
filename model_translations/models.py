"""
Базовая абстрактная модель для моделей с переводимыми полями.

Переводимые поля хранятся не в таблице модели, а в отдельной модели
переводов (одна строка на запись и локаль). Набор полей объявляется
через реестр (см. registry.register).
"""

from django.db import models

from . import resolver, writer
from .managers import TranslatableManager


class TranslatableModel(models.Model):
    """
    Абстрактная модель с операциями записи и чтения переводов.

    Пример:
        service = Service.create_with_translations({
            'code': 'grooming',
            'name': {'en': 'Grooming', 'ru': 'Груминг'},
        })
        service.name                 # значение в активной локали
        service.name_translations    # {'en': 'Grooming', 'ru': 'Груминг'}
    """
    objects = TranslatableManager()

    class Meta:
        abstract = True

    @classmethod
    def create_with_translations(cls, payload):
        return writer.create(cls, payload)

    @classmethod
    def first_or_create_with_translations(cls, match, extra=None):
        return writer.first_or_create(cls, match, extra)

    @classmethod
    def update_or_create_with_translations(cls, match, extra=None):
        return writer.update_or_create(cls, match, extra)

    def update_with_translations(self, payload):
        return writer.update(self, payload)

    def translate(self, attribute, locale=None, fallback=None):
        """
        Значение переводимого поля для конкретной локали.

        Args:
            attribute: Имя переводимого поля
            locale: Локаль; по умолчанию активная
            fallback: Политика fallback; по умолчанию из настроек

        Returns:
            Значение или None
        """
        return resolver.resolve(self, attribute, locale, fallback=fallback)

    def get_translations(self, attribute):
        return resolver.all_locales(self, attribute)

    def refresh_translations(self):
        return resolver.refresh_translations(self)

    def refresh_from_db(self, *args, **kwargs):
        super().refresh_from_db(*args, **kwargs)
        resolver.clear_translations_cache(self)
