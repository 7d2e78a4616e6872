"""
Вспомогательные функции для тестов переводов.
"""

from itertools import count

from catalog.models import Service

_codes = count(1)


def make_service(**overrides):
    """Создает услугу с переводами en/fr через writer."""
    payload = {
        'code': f'service-{next(_codes)}',
        'icon': 'paw',
        'name': {'en': 'Laptop', 'fr': 'Ordinateur'},
        'description': {'en': 'A laptop', 'fr': 'Un ordinateur'},
    }
    payload.update(overrides)
    return Service.create_with_translations(payload)
