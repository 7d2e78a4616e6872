import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Service',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(help_text='Unique technical code. Used for integrations and business logic.', max_length=50, unique=True, validators=[django.core.validators.RegexValidator(message='Code must contain only Latin letters, numbers, hyphens and underscores.', regex='^[a-zA-Z0-9_-]+$')], verbose_name='Code')),
                ('icon', models.CharField(blank=True, help_text='Icon class or identifier', max_length=50, verbose_name='Icon')),
                ('period_days', models.PositiveIntegerField(blank=True, help_text='Number of days between periodic procedures', null=True, verbose_name='Period In Days')),
                ('is_active', models.BooleanField(default=True, help_text='Whether the service is currently active', verbose_name='Is Active')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
            ],
            options={
                'verbose_name': 'Service',
                'verbose_name_plural': 'Services',
                'ordering': ['code'],
            },
        ),
        migrations.CreateModel(
            name='ServiceTranslation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('language', models.CharField(choices=[('en', 'English'), ('ru', 'Russian'), ('de', 'German'), ('fr', 'French'), ('ar', 'Arabic')], help_text='Language code (e.g., en, ru, de, fr)', max_length=10, verbose_name='Language')),
                ('name', models.CharField(blank=True, help_text='Name of the service', max_length=200, null=True, verbose_name='Name')),
                ('description', models.TextField(blank=True, help_text='Description of the service', null=True, verbose_name='Description')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
                ('service', models.ForeignKey(help_text='Service this translation belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='translations', to='catalog.service', verbose_name='Service')),
            ],
            options={
                'verbose_name': 'Service Translation',
                'verbose_name_plural': 'Service Translations',
                'ordering': ['language'],
                'unique_together': {('service', 'language')},
            },
        ),
    ]
