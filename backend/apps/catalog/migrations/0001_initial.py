from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AccountSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('bank_name', models.CharField(blank=True, max_length=50, verbose_name='은행명')),
                ('account_number', models.CharField(blank=True, max_length=50, verbose_name='계좌번호')),
                ('account_holder', models.CharField(blank=True, max_length=50, verbose_name='예금주')),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': '입금 계좌 설정',
                'verbose_name_plural': '입금 계좌 설정',
            },
        ),
        migrations.CreateModel(
            name='Textbook',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('category', models.CharField(choices=[('elementary', '초등 과정'), ('middle', '중등 과정'), ('high', '고등 과정')], default='elementary', max_length=15, verbose_name='과정')),
                ('grade', models.CharField(blank=True, max_length=50, verbose_name='학년')),
                ('difficulty', models.CharField(blank=True, max_length=50, verbose_name='난이도')),
                ('name', models.CharField(max_length=200, verbose_name='교재명')),
                ('price', models.PositiveIntegerField(verbose_name='가격')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': '교재',
                'verbose_name_plural': '교재 목록',
                'ordering': ['category', 'grade', 'name'],
                'indexes': [
                    models.Index(fields=['category'], name='textbook_category_idx'),
                ],
            },
        ),
    ]
