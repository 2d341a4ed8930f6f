from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import records.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Malady',
            fields=[
                ('id', models.CharField(default=records.models.new_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ('is_deleted', models.BooleanField(db_index=True, default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('malady_name', models.CharField(max_length=255, unique=True)),
            ],
            options={
                'verbose_name_plural': 'maladies',
            },
        ),
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.CharField(default=records.models.new_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ('is_deleted', models.BooleanField(db_index=True, default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('first_name', models.CharField(max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('email', models.EmailField(max_length=254, unique=True)),
            ],
            options={
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Medicament',
            fields=[
                ('id', models.CharField(default=records.models.new_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ('is_deleted', models.BooleanField(db_index=True, default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('medicament_name', models.CharField(max_length=255)),
                ('malady', models.ForeignKey(on_delete=django.db.models.deletion.DO_NOTHING, related_name='medicaments', to='records.malady')),
            ],
            options={
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Consultation',
            fields=[
                ('id', models.CharField(default=records.models.new_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ('is_deleted', models.BooleanField(db_index=True, default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('date', models.DateTimeField(default=django.utils.timezone.now)),
                ('notes', models.TextField(blank=True, default='')),
                ('malady', models.ForeignKey(on_delete=django.db.models.deletion.DO_NOTHING, related_name='consultations', to='records.malady')),
                ('medicament', models.ForeignKey(on_delete=django.db.models.deletion.DO_NOTHING, related_name='consultations', to='records.medicament')),
                ('patient', models.ForeignKey(on_delete=django.db.models.deletion.DO_NOTHING, related_name='consultations', to='records.patient')),
            ],
            options={
                'indexes': [models.Index(fields=['patient', 'created_at'], name='consult_patient_created_idx')],
            },
        ),
    ]
