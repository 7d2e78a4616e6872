"""
Переводимые поля моделей Django в отдельных таблицах переводов.
"""

__version__ = '1.0.0'
