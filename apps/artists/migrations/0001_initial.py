import uuid

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Artist',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=100)),
                ('real_name', models.CharField(blank=True, max_length=100)),
                ('stage_name', models.CharField(blank=True, max_length=100)),
                ('bio', models.TextField(blank=True, max_length=2000)),
                ('image', models.CharField(blank=True, max_length=500)),
                ('genre', models.CharField(choices=[('Hip-Hop', 'Hip-Hop'), ('Trap', 'Trap'), ('Conscious Rap', 'Conscious Rap'), ('Alternative Hip-Hop', 'Alternative Hip-Hop'), ('Gangsta Rap', 'Gangsta Rap'), ('Boom Bap', 'Boom Bap'), ('Drill', 'Drill'), ('Mumble Rap', 'Mumble Rap'), ('Experimental Hip-Hop', 'Experimental Hip-Hop'), ('Jazz Rap', 'Jazz Rap'), ('Political Hip-Hop', 'Political Hip-Hop'), ('Pop Rap', 'Pop Rap'), ('R&B', 'R&B'), ('Soul', 'Soul'), ('Funk', 'Funk'), ('Reggae', 'Reggae'), ('Afrobeat', 'Afrobeat'), ('Grime', 'Grime'), ('UK Drill', 'UK Drill'), ('Other', 'Other')], default='Hip-Hop', max_length=50)),
                ('hometown', models.CharField(blank=True, max_length=100)),
                ('active_from', models.PositiveIntegerField(blank=True, null=True)),
                ('active_to', models.PositiveIntegerField(blank=True, null=True)),
                ('labels', models.JSONField(blank=True, default=list)),
                ('social_media', models.JSONField(blank=True, default=dict)),
                ('featured', models.BooleanField(default=False)),
                ('verified', models.BooleanField(default=False)),
                ('followers', models.PositiveIntegerField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ('monthly_listeners', models.PositiveIntegerField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'artists',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['genre'], name='artists_genre_idx'),
                    models.Index(fields=['featured', 'created_at'], name='artists_featured_idx'),
                    models.Index(fields=['followers'], name='artists_followers_idx'),
                ],
            },
        ),
    ]
