from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CategoryModel',
            fields=[
                ('id', models.CharField(editable=False, max_length=36, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('is_active', models.BooleanField(db_column='activated', default=True)),
                ('created_at', models.DateTimeField()),
                ('updated_at', models.DateTimeField()),
                ('deleted_at', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'db_table': 'categories',
                'indexes': [
                    models.Index(fields=['name'], name='categories_name_idx'),
                    models.Index(fields=['created_at'], name='categories_created_at_idx'),
                    models.Index(fields=['updated_at'], name='categories_updated_at_idx'),
                ],
            },
        ),
    ]
