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
            name='Kudos',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('points', models.IntegerField(default=0)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='kudos', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'kudos',
            },
        ),
        migrations.CreateModel(
            name='KudosHistory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('points', models.IntegerField()),
                ('created_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('kudos', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='history', to='kudos.kudos')),
            ],
            options={
                'verbose_name_plural': 'kudos history',
                'ordering': ['created_date', 'id'],
            },
        ),
    ]
