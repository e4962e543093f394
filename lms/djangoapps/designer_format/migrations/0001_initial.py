from django.db import migrations, models
import django.utils.timezone
import model_utils.fields
import opaque_keys.edx.django.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='CourseFormatOption',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('course_key', opaque_keys.edx.django.models.CourseKeyField(db_index=True, max_length=255)),
                ('format', models.CharField(default='designer', max_length=21)),
                ('section_id', models.PositiveIntegerField(default=0)),
                ('name', models.CharField(max_length=255)),
                ('value', models.TextField(blank=True, null=True)),
            ],
            options={
                'permissions': (('change_section_options', 'Can change designer section options'),),
                'unique_together': {('course_key', 'format', 'section_id', 'name')},
                'indexes': [models.Index(fields=['course_key', 'section_id'], name='designer_course_section_idx')],
            },
        ),
        migrations.CreateModel(
            name='DesignerModuleOption',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('course_key', opaque_keys.edx.django.models.CourseKeyField(db_index=True, max_length=255)),
                ('module_id', models.PositiveIntegerField(db_index=True)),
                ('name', models.CharField(max_length=255)),
                ('value', models.TextField(blank=True, default='')),
            ],
            options={
                'unique_together': {('course_key', 'module_id', 'name')},
            },
        ),
    ]
