from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Student',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='이름')),
                ('grade', models.CharField(blank=True, max_length=50, verbose_name='학년')),
                ('school', models.CharField(blank=True, max_length=100, verbose_name='학교')),
                ('status', models.CharField(choices=[('active', '재원'), ('withdrawn', '퇴원')], default='active', max_length=15, verbose_name='상태')),
            ],
            options={
                'verbose_name': '학생',
                'verbose_name_plural': '학생 명단',
                'indexes': [
                    models.Index(fields=['status'], name='student_status_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Teacher',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='이름')),
                ('subjects', models.JSONField(blank=True, default=list, verbose_name='담당 과목')),
                ('role', models.CharField(choices=[('teacher', '선생님'), ('staff', '직원')], default='teacher', max_length=15, verbose_name='역할')),
            ],
            options={
                'verbose_name': '선생님',
                'verbose_name_plural': '선생님 명단',
            },
        ),
    ]
