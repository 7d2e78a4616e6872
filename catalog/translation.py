from model_translations.registry import register, TranslationOptions
from .models import Service


@register(Service)
class ServiceTranslationOptions(TranslationOptions):
    """
    Опции перевода для модели Service.
    Переводятся поля name и description, строки хранятся в ServiceTranslation.
    """
    fields = ('name', 'description',)
