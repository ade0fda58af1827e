from django.apps import AppConfig


class JobOfferConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "job_offer"
    verbose_name = "Job offers"
