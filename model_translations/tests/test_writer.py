"""
Тесты транзакционной записи записей и их переводов.
"""

from unittest.mock import patch

from django.db import DatabaseError, IntegrityError, connection
from django.test import TestCase

from catalog.models import Service, ServiceTranslation
from model_translations import writer
from model_translations.exceptions import InvalidTranslationFormat, NotRegistered
from model_translations.resolver import translations_loaded

from .factories import make_service


def translation_count(service):
    return ServiceTranslation.objects.filter(service=service).count()


class CreateTest(TestCase):
    """Тесты create_with_translations."""

    def test_creates_record_with_translations(self):
        service = make_service(code='laptop')
        self.assertEqual(service.code, 'laptop')
        self.assertEqual(service.translate('name', 'en'), 'Laptop')
        self.assertEqual(service.translate('description', 'fr'), 'Un ordinateur')

    def test_persists_one_row_per_locale(self):
        service = make_service(name={'en': 'Laptop', 'fr': 'Ordinateur', 'ar': 'حاسوب'})
        self.assertEqual(translation_count(service), 3)
        row = ServiceTranslation.objects.get(service=service, language='ar')
        self.assertEqual(row.name, 'حاسوب')
        self.assertIsNone(row.description)

    def test_created_rows_are_cached(self):
        service = make_service()
        self.assertTrue(translations_loaded(service))
        with self.assertNumQueries(0):
            self.assertEqual(service.name_translations, {'en': 'Laptop', 'fr': 'Ordinateur'})

    def test_translatable_columns_not_in_base_table(self):
        make_service()
        with connection.cursor() as cursor:
            columns = {
                column.name for column in
                connection.introspection.get_table_description(cursor, Service._meta.db_table)
            }
        self.assertIn('code', columns)
        self.assertNotIn('name', columns)
        self.assertNotIn('description', columns)

    def test_without_translations(self):
        service = Service.create_with_translations({'code': 'plain'})
        self.assertEqual(translation_count(service), 0)
        self.assertEqual(service.name_translations, {})

    def test_invalid_format_writes_nothing(self):
        with self.assertRaises(InvalidTranslationFormat):
            make_service(code='broken', name='Laptop')
        self.assertFalse(Service.objects.filter(code='broken').exists())
        self.assertEqual(ServiceTranslation.objects.count(), 0)

    def test_storage_failure_rolls_back_base_record(self):
        with patch.object(ServiceTranslation, 'save', side_effect=DatabaseError('disk full')):
            with self.assertRaisesMessage(DatabaseError, 'disk full'):
                make_service(code='rollback')
        self.assertFalse(Service.objects.filter(code='rollback').exists())
        self.assertEqual(ServiceTranslation.objects.count(), 0)

    def test_base_constraint_violation_propagates(self):
        make_service(code='taken')
        with self.assertRaises(IntegrityError):
            make_service(code='taken', name={'de': 'Laptop'})
        self.assertEqual(Service.objects.filter(code='taken').count(), 1)
        self.assertFalse(ServiceTranslation.objects.filter(language='de').exists())

    def test_unregistered_model(self):
        with self.assertRaises(NotRegistered):
            writer.create(ServiceTranslation, {'language': 'en'})


class UpdateTest(TestCase):
    """Тесты update_with_translations."""

    def setUp(self):
        self.service = make_service(code='laptop')

    def test_updates_base_fields(self):
        self.assertTrue(self.service.update_with_translations({'icon': 'computer'}))
        self.service.refresh_from_db()
        self.assertEqual(self.service.icon, 'computer')

    def test_translations_only_update_succeeds(self):
        self.assertTrue(self.service.update_with_translations({'name': {'en': 'Notebook'}}))

    def test_updates_existing_translation(self):
        self.service.update_with_translations({'name': {'en': 'Notebook'}})
        row = ServiceTranslation.objects.get(service=self.service, language='en')
        self.assertEqual(row.name, 'Notebook')
        self.assertEqual(row.description, 'A laptop')

    def test_adds_new_locale(self):
        before = translation_count(self.service)
        self.service.update_with_translations({'name': {'de': 'Rechner'}})
        self.assertEqual(translation_count(self.service), before + 1)
        row = ServiceTranslation.objects.get(service=self.service, language='de')
        self.assertEqual(row.name, 'Rechner')
        self.assertIsNone(row.description)

    def test_unmentioned_locales_unchanged(self):
        fr_before = ServiceTranslation.objects.get(service=self.service, language='fr')
        self.service.update_with_translations({'name': {'en': 'Notebook'}, 'description': {'en': 'Thin'}})
        fr_after = ServiceTranslation.objects.get(service=self.service, language='fr')
        self.assertEqual(fr_after.pk, fr_before.pk)
        self.assertEqual(fr_after.name, 'Ordinateur')
        self.assertEqual(fr_after.description, 'Un ordinateur')
        self.assertEqual(fr_after.updated_at, fr_before.updated_at)

    def test_refreshes_cached_rows(self):
        self.service.name_translations
        self.service.update_with_translations({'name': {'en': 'Notebook', 'de': 'Rechner'}})
        self.assertEqual(
            self.service.name_translations,
            {'en': 'Notebook', 'fr': 'Ordinateur', 'de': 'Rechner'},
        )

    def test_invalid_format_changes_nothing(self):
        with self.assertRaises(InvalidTranslationFormat):
            self.service.update_with_translations({'icon': 'computer', 'description': 'Thin'})
        self.service.refresh_from_db()
        self.assertEqual(self.service.icon, 'paw')

    def test_translation_failure_rolls_back_base_update(self):
        with patch.object(writer, '_upsert_translation_rows', side_effect=DatabaseError('lost connection')):
            with self.assertRaises(DatabaseError):
                self.service.update_with_translations({'icon': 'computer', 'name': {'en': 'Notebook'}})
        self.assertEqual(Service.objects.get(pk=self.service.pk).icon, 'paw')
        self.assertEqual(
            ServiceTranslation.objects.get(service=self.service, language='en').name,
            'Laptop',
        )

    def test_rows_deleted_with_record(self):
        service_id = self.service.pk
        self.service.delete()
        self.assertFalse(ServiceTranslation.objects.filter(service_id=service_id).exists())


class FirstOrCreateTest(TestCase):
    """Тесты first_or_create_with_translations."""

    def test_creates_when_missing(self):
        service = Service.first_or_create_with_translations(
            {'code': 'camera'},
            {'name': {'en': 'Camera', 'fr': 'Appareil photo'}},
        )
        self.assertEqual(service.code, 'camera')
        self.assertEqual(service.name_translations, {'en': 'Camera', 'fr': 'Appareil photo'})

    def test_returns_existing_without_writing(self):
        existing = make_service(code='camera', name={'en': 'Camera'}, description={'en': 'A camera'})
        service = Service.first_or_create_with_translations(
            {'code': 'camera'},
            {'icon': 'lens', 'name': {'en': 'Other', 'de': 'Kamera'}},
        )
        self.assertEqual(service.pk, existing.pk)
        self.assertEqual(service.icon, 'paw')
        self.assertEqual(service.name_translations, {'en': 'Camera'})
        self.assertEqual(translation_count(existing), 1)

    def test_existing_match_ignores_invalid_extra(self):
        existing = make_service(code='camera')
        service = Service.first_or_create_with_translations({'code': 'camera'}, {'name': 'not a mapping'})
        self.assertEqual(service.pk, existing.pk)

    def test_twice_yields_one_record(self):
        first = Service.first_or_create_with_translations({'code': 'lens'}, {'name': {'en': 'Lens', 'fr': 'Objectif'}})
        second = Service.first_or_create_with_translations({'code': 'lens'}, {'name': {'en': 'Lens', 'fr': 'Objectif'}})
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(Service.objects.filter(code='lens').count(), 1)
        self.assertEqual(translation_count(first), 2)

    def test_returned_record_has_translations_loaded(self):
        make_service(code='camera')
        service = Service.first_or_create_with_translations({'code': 'camera'})
        self.assertTrue(translations_loaded(service))

    def test_match_on_translated_value(self):
        existing = make_service(code='camera', name={'en': 'Camera', 'fr': 'Appareil'})
        service = Service.first_or_create_with_translations({'name': {'fr': 'Appareil'}}, {'code': 'other'})
        self.assertEqual(service.pk, existing.pk)

    def test_match_on_translated_value_creates_when_missing(self):
        service = Service.first_or_create_with_translations({'name': {'fr': 'Trépied'}}, {'code': 'tripod'})
        self.assertEqual(service.code, 'tripod')
        self.assertEqual(service.translate('name', 'fr'), 'Trépied')

    def test_invalid_translated_match(self):
        with self.assertRaises(InvalidTranslationFormat):
            Service.first_or_create_with_translations({'name': 'Camera'})
        self.assertEqual(Service.objects.count(), 0)


class UpdateOrCreateTest(TestCase):
    """Тесты update_or_create_with_translations."""

    def test_creates_when_missing(self):
        service = Service.update_or_create_with_translations(
            {'code': 'printer'},
            {'icon': 'print', 'name': {'en': 'Printer'}},
        )
        self.assertEqual(service.icon, 'print')
        self.assertEqual(service.name_translations, {'en': 'Printer'})
        self.assertTrue(translations_loaded(service))

    def test_updates_when_found(self):
        existing = make_service(code='printer', name={'en': 'Printer', 'fr': 'Imprimante'})
        service = Service.update_or_create_with_translations(
            {'code': 'printer'},
            {'icon': 'print', 'name': {'en': 'Laser printer', 'de': 'Drucker'}},
        )
        self.assertEqual(service.pk, existing.pk)
        self.assertEqual(Service.objects.get(pk=existing.pk).icon, 'print')
        self.assertEqual(
            service.name_translations,
            {'en': 'Laser printer', 'fr': 'Imprimante', 'de': 'Drucker'},
        )
        self.assertEqual(Service.objects.filter(code='printer').count(), 1)

    def test_match_on_primary_key(self):
        existing = make_service(code='printer')
        service = Service.update_or_create_with_translations(
            {'id': existing.pk},
            {'icon': 'print', 'name': {'en': 'Printer'}},
        )
        self.assertEqual(service.pk, existing.pk)
        self.assertEqual(Service.objects.get(pk=existing.pk).icon, 'print')
        self.assertEqual(service.translate('name', 'en'), 'Printer')

    def test_invalid_extra_aborts_update(self):
        make_service(code='printer')
        with self.assertRaises(InvalidTranslationFormat):
            Service.update_or_create_with_translations({'code': 'printer'}, {'icon': 'x', 'name': 'Printer'})
        self.assertEqual(Service.objects.get(code='printer').icon, 'paw')
