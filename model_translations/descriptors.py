"""
Дескрипторы переводимых полей.

Устанавливаются на класс модели один раз при регистрации:
- service.name              -> значение для текущей локали
- service.name_translations -> {locale: значение} по всем загруженным строкам
"""

from django.utils.translation import gettext as _


class TranslatedAttribute:
    """Значение переводимого поля в активной локали с учетом политики fallback."""

    def __init__(self, attribute):
        self.attribute = attribute

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        from .resolver import resolve
        return resolve(instance, self.attribute)

    def __set__(self, instance, value):
        raise AttributeError(
            _("'%(attribute)s' is translatable; use update_with_translations() to change it.")
            % {'attribute': self.attribute}
        )


class TranslationsAttribute:
    """Все переводы поля, сгруппированные по локали."""

    def __init__(self, attribute):
        self.attribute = attribute

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        from .resolver import all_locales
        return all_locales(instance, self.attribute)

    def __set__(self, instance, value):
        raise AttributeError(
            _("'%(attribute)s_translations' is read-only.") % {'attribute': self.attribute}
        )
