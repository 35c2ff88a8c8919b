import uuid

from django.db import models


class Company(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    admin_user_id = models.CharField(
        max_length=64, db_index=True, help_text="공고를 관리할 수 있는 단일 사용자 ID"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "recruitment_company"

    def __str__(self):
        return self.name


class Vacancy(models.Model):
    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        PUBLISHED = "published", "Published"
        CLOSED = "closed", "Closed"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(
        Company, on_delete=models.CASCADE, related_name="vacancies"
    )
    title = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=500)
    province = models.CharField(max_length=255, null=True, blank=True)
    district = models.CharField(max_length=255, null=True, blank=True)
    quantity = models.PositiveIntegerField()
    salary_min = models.DecimalField(
        max_digits=14, decimal_places=2, null=True, blank=True
    )
    salary_max = models.DecimalField(
        max_digits=14, decimal_places=2, null=True, blank=True
    )
    salary_type = models.CharField(max_length=32, default="monthly")
    required_skills = models.JSONField(
        default=list, blank=True, help_text="요구 기술 스택 (JSON 배열)"
    )
    experience_years = models.PositiveSmallIntegerField(null=True, blank=True)
    education_level = models.CharField(max_length=255, null=True, blank=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)
    application_deadline = models.DateTimeField()
    commission_rule_id = models.UUIDField()
    escrow_amount = models.DecimalField(
        max_digits=14, decimal_places=2, null=True, blank=True
    )
    payment_policy = models.CharField(max_length=32, default="post_paid")
    is_internal_only = models.BooleanField(default=False)
    priority_level = models.PositiveSmallIntegerField(default=1)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.DRAFT, db_index=True
    )
    created_by = models.CharField(max_length=64, db_index=True)
    # 서비스가 직접 관리 (auto_now 사용하지 않음)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()
    version = models.PositiveIntegerField(default=1)

    class Meta:
        db_table = "recruitment_vacancy"
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"{self.title} ({self.status})"


class VacancyApplication(models.Model):
    class Status(models.TextChoices):
        APPLIED = "applied", "Applied"
        SHORTLISTED = "shortlisted", "Shortlisted"
        INTERVIEWED = "interviewed", "Interviewed"
        CONTRACT_SIGNED = "contract_signed", "Contract signed"
        REJECTED = "rejected", "Rejected"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    vacancy = models.ForeignKey(
        Vacancy, on_delete=models.CASCADE, related_name="applications"
    )
    candidate_id = models.CharField(max_length=64)
    recruiter_id = models.CharField(max_length=64, null=True, blank=True)
    status = models.CharField(
        max_length=32, choices=Status.choices, default=Status.APPLIED
    )
    applied_at = models.DateTimeField(auto_now_add=True)
    last_updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "recruitment_vacancy_application"

    def __str__(self):
        return f"{self.candidate_id} -> {self.vacancy_id} ({self.status})"
