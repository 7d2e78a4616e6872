"""
Интеграция с Django REST Framework.

    class ServiceSerializer(TranslatableModelSerializerMixin, serializers.ModelSerializer):
        name = TranslationsField()
        description = TranslationsField(required=False)

        class Meta:
            model = Service
            fields = ['id', 'code', 'name', 'description']
"""

from rest_framework import serializers

from . import resolver, writer
from .splitter import validate_translation_value


class TranslationsField(serializers.Field):
    """
    Переводимое поле в виде {'locale': значение}.

    Читает все загруженные переводы записи, на запись передает словарь
    в writer без изменений.
    """

    def __init__(self, **kwargs):
        kwargs['source'] = '*'
        super().__init__(**kwargs)

    def to_representation(self, instance):
        return resolver.all_locales(instance, self.field_name)

    def to_internal_value(self, data):
        return {self.field_name: validate_translation_value(self.field_name, data)}


class TranslatableModelSerializerMixin:
    """Создание и изменение записей через writer (одна транзакция на операцию)."""

    def create(self, validated_data):
        return writer.create(self.Meta.model, validated_data)

    def update(self, instance, validated_data):
        writer.update(instance, validated_data)
        return instance
