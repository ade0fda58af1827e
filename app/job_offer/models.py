from django.db import models


class JobOffer(models.Model):
    """채용 공고"""

    title = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True, default="")
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "job_offer"
        ordering = ["id"]

    def __str__(self):
        return f"{self.title} - {self.location}"
