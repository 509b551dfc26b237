"""
Admin configuration for Votes app.
"""

from django.contrib import admin

from apps.polls.admin import ReadOnlyAdminMixin

from .models import VoterRecord


@admin.register(VoterRecord)
class VoterRecordAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Admin interface for VoterRecord model (audit view)."""

    list_display = ["voter_identity", "poll", "voted", "updated_at"]
    list_filter = ["voted", "updated_at"]
    search_fields = ["voter_identity", "address"]
    readonly_fields = ["address", "created_at", "updated_at"]
    fieldsets = (
        ("Voter", {"fields": ("voter_identity", "voted", "poll")}),
        ("Storage", {"fields": ("address",)}),
        ("Timestamps", {"fields": ("created_at", "updated_at")}),
    )
