import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('artists', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Album',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(db_index=True, max_length=200)),
                ('album_type', models.CharField(choices=[('album', 'Album'), ('mixtape', 'Mixtape'), ('EP', 'EP'), ('single', 'Single')], default='album', max_length=20)),
                ('release_date', models.DateField(blank=True, null=True)),
                ('genre', models.CharField(choices=[('Hip-Hop', 'Hip-Hop'), ('Trap', 'Trap'), ('Conscious Rap', 'Conscious Rap'), ('Alternative Hip-Hop', 'Alternative Hip-Hop'), ('Gangsta Rap', 'Gangsta Rap'), ('Boom Bap', 'Boom Bap'), ('Drill', 'Drill'), ('Mumble Rap', 'Mumble Rap'), ('Experimental Hip-Hop', 'Experimental Hip-Hop'), ('Jazz Rap', 'Jazz Rap'), ('Political Hip-Hop', 'Political Hip-Hop'), ('Pop Rap', 'Pop Rap'), ('R&B', 'R&B'), ('Soul', 'Soul'), ('Funk', 'Funk'), ('Reggae', 'Reggae'), ('Afrobeat', 'Afrobeat'), ('Grime', 'Grime'), ('UK Drill', 'UK Drill'), ('Other', 'Other')], default='Hip-Hop', max_length=50)),
                ('cover_art', models.CharField(blank=True, max_length=500)),
                ('description', models.TextField(blank=True, max_length=2000)),
                ('tracklist', models.JSONField(blank=True, default=list)),
                ('total_duration', models.PositiveIntegerField(default=0)),
                ('label', models.CharField(blank=True, max_length=100)),
                ('producers', models.JSONField(blank=True, default=list)),
                ('featured', models.BooleanField(default=False)),
                ('verified', models.BooleanField(default=False)),
                ('streaming_links', models.JSONField(blank=True, default=dict)),
                ('average_rating', models.DecimalField(decimal_places=1, default=Decimal('0.0'), max_digits=2, validators=[django.core.validators.MinValueValidator(Decimal('0.0')), django.core.validators.MaxValueValidator(Decimal('5.0'))])),
                ('total_reviews', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('artist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='albums', to='artists.artist')),
            ],
            options={
                'db_table': 'albums',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['artist', 'release_date'], name='albums_artist_release_idx'),
                    models.Index(fields=['average_rating'], name='albums_rating_idx'),
                    models.Index(fields=['release_date'], name='albums_release_idx'),
                    models.Index(fields=['created_at'], name='albums_created_idx'),
                ],
            },
        ),
    ]
