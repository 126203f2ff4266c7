from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('description', models.CharField(max_length=255, verbose_name='Описание')),
            ],
            options={
                'db_table': 'projects',
                'verbose_name': 'Проект',
                'verbose_name_plural': 'Проекты',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='ProjectStep',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('description', models.CharField(max_length=255, verbose_name='Описание')),
                ('days_to_deadline', models.IntegerField(default=0, verbose_name='Дней до срока')),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='steps', to='persistence.project', verbose_name='Проект')),
            ],
            options={
                'db_table': 'project_steps',
                'verbose_name': 'Шаг проекта',
                'verbose_name_plural': 'Шаги проекта',
                'ordering': ['project', 'id'],
            },
        ),
        migrations.CreateModel(
            name='TaskGroup',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('description', models.CharField(max_length=255, verbose_name='Описание')),
                ('deadline', models.DateTimeField(blank=True, null=True, verbose_name='Срок')),
                ('done', models.BooleanField(default=False, verbose_name='Выполнено')),
                ('project', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='task_groups', to='persistence.project', verbose_name='Проект')),
            ],
            options={
                'db_table': 'task_groups',
                'verbose_name': 'Группа задач',
                'verbose_name_plural': 'Группы задач',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['project', 'done'], name='task_groups_project_done_idx')],
            },
        ),
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('description', models.CharField(max_length=255, verbose_name='Описание')),
                ('deadline', models.DateTimeField(blank=True, null=True, verbose_name='Срок')),
                ('done', models.BooleanField(db_index=True, default=False, verbose_name='Выполнено')),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tasks', to='persistence.taskgroup', verbose_name='Группа задач')),
            ],
            options={
                'db_table': 'tasks',
                'verbose_name': 'Задача',
                'verbose_name_plural': 'Задачи',
                'ordering': ['group', 'id'],
            },
        ),
    ]
