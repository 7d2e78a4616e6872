"""
Конфигурация приложения model_translations.

При запуске импортирует модули translation.py всех установленных
приложений, в которых модели регистрируют переводимые поля.
"""

import logging

from django.apps import AppConfig
from django.utils.module_loading import autodiscover_modules
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


class ModelTranslationsConfig(AppConfig):
    """
    Конфигурация приложения model_translations.

    Особенности:
    - Регистрация переводимых моделей через translation.py
    - Хранение переводов в отдельных таблицах
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'model_translations'
    verbose_name = _('Model Translations')

    def ready(self):
        from .registry import registry

        autodiscover_modules('translation')
        logger.debug(f'Translatable models: {[m._meta.label for m in registry.get_registered_models()]}')
