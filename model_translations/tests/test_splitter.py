"""
Тесты разделения входных данных на базовые поля и переводы.
"""

from django.test import SimpleTestCase

from model_translations.exceptions import InvalidTranslationFormat
from model_translations.splitter import split_translations, validate_translation_value

FIELDS = ('name', 'description')


class SplitTranslationsTest(SimpleTestCase):
    """Тесты split_translations."""

    def test_groups_values_by_locale(self):
        base, translations = split_translations(
            {
                'code': 'grooming',
                'name': {'en': 'Grooming', 'ru': 'Груминг'},
                'description': {'en': 'Full grooming'},
            },
            FIELDS,
        )
        self.assertEqual(base, {'code': 'grooming'})
        self.assertEqual(translations, {
            'en': {'name': 'Grooming', 'description': 'Full grooming'},
            'ru': {'name': 'Груминг'},
        })

    def test_payload_without_translatable_fields(self):
        base, translations = split_translations({'code': 'x', 'is_active': False}, FIELDS)
        self.assertEqual(base, {'code': 'x', 'is_active': False})
        self.assertEqual(translations, {})

    def test_does_not_mutate_payload(self):
        payload = {'code': 'x', 'name': {'en': 'X'}}
        split_translations(payload, FIELDS)
        self.assertEqual(payload, {'code': 'x', 'name': {'en': 'X'}})

    def test_none_value_is_dropped(self):
        base, translations = split_translations({'code': 'x', 'name': None}, FIELDS)
        self.assertEqual(base, {'code': 'x'})
        self.assertEqual(translations, {})

    def test_null_translation_for_locale_is_kept(self):
        _, translations = split_translations({'name': {'en': None}}, FIELDS)
        self.assertEqual(translations, {'en': {'name': None}})

    def test_string_value_raises_with_attribute_name(self):
        with self.assertRaises(InvalidTranslationFormat) as ctx:
            split_translations({'code': 'x', 'name': 'Laptop'}, FIELDS)
        self.assertEqual(ctx.exception.attribute, 'name')
        self.assertIn("'name'", str(ctx.exception.detail[0]))

    def test_list_value_raises(self):
        with self.assertRaises(InvalidTranslationFormat):
            split_translations({'description': ['en', 'A laptop']}, FIELDS)

    def test_nested_mapping_raises(self):
        with self.assertRaises(InvalidTranslationFormat):
            validate_translation_value('name', {'en': {'short': 'Laptop'}})
