import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='News',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('slug', models.SlugField(max_length=220, unique=True)),
                ('excerpt', models.CharField(max_length=300)),
                ('content', models.TextField()),
                ('category', models.CharField(choices=[('Breaking News', 'Breaking News'), ('Album Releases', 'Album Releases'), ('Artist Interviews', 'Artist Interviews'), ('Industry News', 'Industry News'), ('Culture', 'Culture'), ('Awards', 'Awards'), ('Events', 'Events'), ('Technology', 'Technology'), ('Politics', 'Politics'), ('Social Issues', 'Social Issues'), ('Fashion', 'Fashion'), ('Sports', 'Sports'), ('Other', 'Other')], default='Other', max_length=30)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('featured_image', models.CharField(blank=True, max_length=500)),
                ('images', models.JSONField(blank=True, default=list)),
                ('featured', models.BooleanField(default=False)),
                ('published', models.BooleanField(default=False)),
                ('publish_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('read_time', models.PositiveIntegerField(default=0)),
                ('views', models.PositiveIntegerField(default=0)),
                ('likes', models.PositiveIntegerField(default=0)),
                ('shares', models.PositiveIntegerField(default=0)),
                ('seo', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('author', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='news_articles', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'news',
                'db_table': 'news',
                'ordering': ['-publish_date'],
                'indexes': [
                    models.Index(fields=['published', 'publish_date'], name='news_published_idx'),
                    models.Index(fields=['category'], name='news_category_idx'),
                ],
            },
        ),
    ]
