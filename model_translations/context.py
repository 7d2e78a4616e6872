"""
Явный контекст локали для чтения переводов и построения фильтров.
"""

from dataclasses import dataclass
from typing import Optional

from django.utils import translation

from . import conf


@dataclass(frozen=True)
class LocaleContext:
    """
    Текущая локаль запроса и локаль по умолчанию приложения.

    Передается в resolver и предикаты явно; глобальное состояние Django
    читается только в from_django().
    """
    current: Optional[str]
    default: Optional[str]

    @classmethod
    def from_django(cls):
        """Снимок активного языка Django и settings.LANGUAGE_CODE на момент вызова."""
        return cls(
            current=translation.get_language(),
            default=conf.get_default_locale(),
        )


def current_locale(locale=None, context=None):
    """
    Локаль для фильтра или чтения: явная, затем из контекста, затем активная в Django.
    """
    if locale:
        return locale
    if context is not None:
        return context.current
    return translation.get_language()
