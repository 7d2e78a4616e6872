"""
Конфигурация приложения catalog.

Демонстрационное приложение: услуга (Service) с переводимыми
названием и описанием, которые хранятся в ServiceTranslation.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class CatalogConfig(AppConfig):
    """
    Конфигурация приложения catalog.

    Переводимые поля Service регистрируются в catalog/translation.py
    и подхватываются model_translations при запуске.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'catalog'
    verbose_name = _('Service Catalog')
