"""
Catalog models for the application.

Этот модуль содержит модели для:
1. Услуг
2. Переводов названий и описаний услуг
"""

from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from model_translations.models import TranslatableModel


class Service(TranslatableModel):
    """
    Модель услуги.

    Название и описание переводятся и хранятся в ServiceTranslation
    (см. catalog/translation.py), в таблице услуги их нет.
    """
    code = models.CharField(
        _('Code'),
        max_length=50,
        unique=True,
        validators=[RegexValidator(
            regex=r'^[a-zA-Z0-9_-]+$',
            message=_('Code must contain only Latin letters, numbers, hyphens and underscores.')
        )],
        help_text=_('Unique technical code. Used for integrations and business logic.')
    )
    icon = models.CharField(
        _('Icon'),
        max_length=50,
        blank=True,
        help_text=_('Icon class or identifier')
    )
    period_days = models.PositiveIntegerField(
        _('Period In Days'),
        null=True,
        blank=True,
        help_text=_('Number of days between periodic procedures')
    )
    is_active = models.BooleanField(
        _('Is Active'),
        default=True,
        help_text=_('Whether the service is currently active')
    )
    created_at = models.DateTimeField(
        _('Created At'),
        auto_now_add=True
    )
    updated_at = models.DateTimeField(
        _('Updated At'),
        auto_now=True
    )

    class Meta:
        verbose_name = _('Service')
        verbose_name_plural = _('Services')
        ordering = ['code']

    def __str__(self):
        return self.name or self.code


class ServiceTranslation(models.Model):
    """
    Перевод услуги на конкретный язык.
    Одна запись = один язык.
    """
    service = models.ForeignKey(
        Service,
        on_delete=models.CASCADE,
        related_name='translations',
        verbose_name=_('Service'),
        help_text=_('Service this translation belongs to')
    )
    language = models.CharField(
        max_length=10,
        choices=settings.LANGUAGES,
        verbose_name=_('Language'),
        help_text=_('Language code (e.g., en, ru, de, fr)')
    )
    name = models.CharField(
        _('Name'),
        max_length=200,
        null=True,
        blank=True,
        help_text=_('Name of the service')
    )
    description = models.TextField(
        _('Description'),
        null=True,
        blank=True,
        help_text=_('Description of the service')
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_('Created At'))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_('Updated At'))

    class Meta:
        verbose_name = _('Service Translation')
        verbose_name_plural = _('Service Translations')
        unique_together = ['service', 'language']
        ordering = ['language']

    def __str__(self):
        return f"{self.service.code} ({self.language})"
