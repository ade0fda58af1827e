from django.contrib import admin
from job_offer.models import JobOffer


@admin.register(JobOffer)
class JobOfferAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "location", "created_at"]
    search_fields = ["title", "location"]
    list_filter = ["created_at"]
    ordering = ["-created_at"]
    list_per_page = 100
