"""
QuerySet и менеджер переводимых моделей.

Фильтры по переводам:
- where_translation / where_translation_op - в заданной (или текущей) локали
- where_any_translation / where_any_translation_op - в любой локали
- or_where_* - то же, но через OR с уже заданными условиями

Варианты *_op принимают явный оператор, остальные сравнивают на равенство.
"""

from django.db import models
from django.db.models import Prefetch

from . import conf
from .predicates import EQUALS, translation_exists
from .registry import get_info


class TranslatableQuerySet(models.QuerySet):
    """QuerySet с фильтрами по значениям переводов."""

    def with_translations(self):
        """Подгружает строки переводов для всех записей выборки."""
        info = get_info(self.model)
        for lookup in self._prefetch_related_lookups:
            if getattr(lookup, 'prefetch_to', lookup) == info.related_name:
                return self._chain()
        return self.prefetch_related(
            Prefetch(
                info.related_name,
                queryset=info.translation_model._base_manager.order_by('pk'),
            )
        )

    def _translation_filter(self, attribute, operator, value, locale=None, any_locale=False, combine_or=False):
        condition = translation_exists(
            self.model, attribute, value,
            operator=operator, locale=locale, any_locale=any_locale,
        )
        if not combine_or:
            return self.filter(condition)
        return self | self.model._default_manager.filter(condition)

    def where_translation(self, attribute, value, locale=None):
        return self._translation_filter(attribute, EQUALS, value, locale)

    def where_translation_op(self, attribute, operator, value, locale=None):
        return self._translation_filter(attribute, operator, value, locale)

    def where_any_translation(self, attribute, value):
        return self._translation_filter(attribute, EQUALS, value, any_locale=True)

    def where_any_translation_op(self, attribute, operator, value):
        return self._translation_filter(attribute, operator, value, any_locale=True)

    def or_where_translation(self, attribute, value, locale=None):
        return self._translation_filter(attribute, EQUALS, value, locale, combine_or=True)

    def or_where_translation_op(self, attribute, operator, value, locale=None):
        return self._translation_filter(attribute, operator, value, locale, combine_or=True)

    def or_where_any_translation(self, attribute, value):
        return self._translation_filter(attribute, EQUALS, value, any_locale=True, combine_or=True)

    def or_where_any_translation_op(self, attribute, operator, value):
        return self._translation_filter(attribute, operator, value, any_locale=True, combine_or=True)


class TranslatableManager(models.Manager.from_queryset(TranslatableQuerySet)):
    """
    Менеджер переводимых моделей.

    При MODEL_TRANSLATIONS['AUTO_LOAD'] каждая выборка подгружает переводы.
    """

    def get_queryset(self):
        queryset = super().get_queryset()
        if conf.auto_load_enabled():
            queryset = queryset.with_translations()
        return queryset
