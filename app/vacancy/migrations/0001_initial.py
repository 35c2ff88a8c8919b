from __future__ import annotations

import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Company",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                (
                    "admin_user_id",
                    models.CharField(
                        db_index=True,
                        help_text="공고를 관리할 수 있는 단일 사용자 ID",
                        max_length=64,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "recruitment_company",
            },
        ),
        migrations.CreateModel(
            name="Vacancy",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("location", models.CharField(max_length=500)),
                ("province", models.CharField(blank=True, max_length=255, null=True)),
                ("district", models.CharField(blank=True, max_length=255, null=True)),
                ("quantity", models.PositiveIntegerField()),
                (
                    "salary_min",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=14, null=True
                    ),
                ),
                (
                    "salary_max",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=14, null=True
                    ),
                ),
                ("salary_type", models.CharField(default="monthly", max_length=32)),
                (
                    "required_skills",
                    models.JSONField(
                        blank=True, default=list, help_text="요구 기술 스택 (JSON 배열)"
                    ),
                ),
                (
                    "experience_years",
                    models.PositiveSmallIntegerField(blank=True, null=True),
                ),
                (
                    "education_level",
                    models.CharField(blank=True, max_length=255, null=True),
                ),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField(blank=True, null=True)),
                ("application_deadline", models.DateTimeField()),
                ("commission_rule_id", models.UUIDField()),
                (
                    "escrow_amount",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=14, null=True
                    ),
                ),
                (
                    "payment_policy",
                    models.CharField(default="post_paid", max_length=32),
                ),
                ("is_internal_only", models.BooleanField(default=False)),
                ("priority_level", models.PositiveSmallIntegerField(default=1)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("published", "Published"),
                            ("closed", "Closed"),
                        ],
                        db_index=True,
                        default="draft",
                        max_length=16,
                    ),
                ),
                ("created_by", models.CharField(db_index=True, max_length=64)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
                ("version", models.PositiveIntegerField(default=1)),
                (
                    "company",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="vacancies",
                        to="vacancy.company",
                    ),
                ),
            ],
            options={
                "db_table": "recruitment_vacancy",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="VacancyApplication",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("candidate_id", models.CharField(max_length=64)),
                (
                    "recruiter_id",
                    models.CharField(blank=True, max_length=64, null=True),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("applied", "Applied"),
                            ("shortlisted", "Shortlisted"),
                            ("interviewed", "Interviewed"),
                            ("contract_signed", "Contract signed"),
                            ("rejected", "Rejected"),
                        ],
                        default="applied",
                        max_length=32,
                    ),
                ),
                ("applied_at", models.DateTimeField(auto_now_add=True)),
                ("last_updated_at", models.DateTimeField(auto_now=True)),
                (
                    "vacancy",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="applications",
                        to="vacancy.vacancy",
                    ),
                ),
            ],
            options={
                "db_table": "recruitment_vacancy_application",
            },
        ),
    ]
