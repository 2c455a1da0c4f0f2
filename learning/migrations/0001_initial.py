import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ReviewSchedule",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField()),
                ("card_id", models.UUIDField()),
                ("card_type", models.CharField(choices=[("lesson", "Lesson"), ("quiz", "Quiz")], default="quiz", max_length=16)),
                ("ease_factor", models.FloatField(default=2.5)),
                ("interval_days", models.PositiveIntegerField(default=0)),
                ("repetitions", models.PositiveIntegerField(default=0)),
                ("consecutive_correct", models.PositiveIntegerField(default=0)),
                ("next_review_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("last_review_at", models.DateTimeField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "indexes": [models.Index(fields=["user_id", "next_review_at"], name="learning_re_user_id_3f0c1a_idx")],
                "unique_together": {("user_id", "card_id")},
            },
        ),
        migrations.CreateModel(
            name="ReviewLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField()),
                ("card_id", models.UUIDField()),
                ("quality", models.SmallIntegerField()),
                ("idempotency_key", models.CharField(max_length=64)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("interval_days", models.PositiveIntegerField()),
                ("repetitions", models.PositiveIntegerField()),
                ("ease_factor", models.FloatField()),
                ("consecutive_correct", models.PositiveIntegerField()),
                ("next_review_at", models.DateTimeField()),
                ("xp_earned", models.PositiveIntegerField(default=0)),
            ],
            options={
                "indexes": [models.Index(fields=["user_id", "card_id", "created_at"], name="learning_re_user_id_8b2d4e_idx")],
                "unique_together": {("user_id", "card_id", "idempotency_key")},
            },
        ),
        migrations.CreateModel(
            name="LearnerProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField(unique=True)),
                ("xp", models.PositiveIntegerField(default=0)),
                ("streak_count", models.PositiveIntegerField(default=0)),
                ("last_streak_date", models.DateField(blank=True, null=True)),
                ("questions_completed_today", models.PositiveIntegerField(default=0)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name="Activity",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.UUIDField()),
                ("activity_type", models.CharField(default="study_session", max_length=32)),
                ("mode", models.CharField(choices=[("learn", "Learn"), ("lessons", "Lessons"), ("quiz", "Quiz")], max_length=16)),
                ("details", models.JSONField(default=dict)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "indexes": [models.Index(fields=["user_id", "created_at"], name="learning_ac_user_id_5e7a9c_idx")],
            },
        ),
    ]
