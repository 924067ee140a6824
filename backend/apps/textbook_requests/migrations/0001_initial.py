from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='TextbookRequest',
            fields=[
                ('id', models.CharField(editable=False, help_text='선생님_학생_교재명_YYYYMMDDHHmmssSSS', max_length=255, primary_key=True, serialize=False, verbose_name='요청 ID')),
                ('student_name', models.CharField(max_length=100, verbose_name='학생 이름')),
                ('teacher_name', models.CharField(blank=True, max_length=100, verbose_name='담당 선생님')),
                ('request_date', models.DateField(verbose_name='요청일')),
                ('book_name', models.CharField(max_length=200, verbose_name='교재명')),
                ('book_detail', models.CharField(blank=True, max_length=200, verbose_name='상세 내용')),
                ('price', models.PositiveIntegerField(default=0, verbose_name='가격')),
                ('bank_name', models.CharField(blank=True, max_length=50, verbose_name='은행명')),
                ('account_number', models.CharField(blank=True, max_length=50, verbose_name='계좌번호')),
                ('account_holder', models.CharField(blank=True, max_length=50, verbose_name='예금주')),
                ('created_at', models.DateTimeField(verbose_name='작성 시각')),
                ('is_completed', models.BooleanField(default=False, verbose_name='등록 완료')),
                ('completed_at', models.DateTimeField(blank=True, null=True, verbose_name='등록 시각')),
                ('is_paid', models.BooleanField(default=False, verbose_name='납부 완료')),
                ('paid_at', models.DateTimeField(blank=True, null=True, verbose_name='납부 시각')),
                ('is_ordered', models.BooleanField(default=False, verbose_name='주문 완료')),
                ('ordered_at', models.DateTimeField(blank=True, null=True, verbose_name='주문 시각')),
            ],
            options={
                'verbose_name': '교재 요청',
                'verbose_name_plural': '교재 요청 목록',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['created_at'], name='treq_created_idx'),
                    models.Index(fields=['student_name'], name='treq_student_idx'),
                    models.Index(fields=['is_completed', 'is_paid', 'is_ordered'], name='treq_status_idx'),
                ],
            },
        ),
    ]
