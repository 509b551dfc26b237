"""
Admin configuration for Polls app.

Counters and addresses are only changed by the ledger operations, so the
admin is read-only.
"""

from django.contrib import admin

from .models import Candidate, Poll


class ReadOnlyAdminMixin:
    """Disable add, change and delete in the admin."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class CandidateInline(ReadOnlyAdminMixin, admin.TabularInline):
    model = Candidate
    fields = ["candidate_name", "candidate_votes", "address", "created_at"]
    readonly_fields = fields
    extra = 0


@admin.register(Poll)
class PollAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Admin interface for Poll model."""

    list_display = ["poll_id", "description", "poll_start", "poll_end", "candidate_amount", "total_votes", "created_by"]
    search_fields = ["description", "created_by", "address"]
    readonly_fields = ["address", "created_at"]
    inlines = [CandidateInline]
    fieldsets = (
        ("Basic Information", {"fields": ("poll_id", "description", "created_by")}),
        ("Timing", {"fields": ("poll_start", "poll_end")}),
        ("Counters", {"fields": ("candidate_amount", "total_votes")}),
        ("Storage", {"fields": ("address", "created_at")}),
    )


@admin.register(Candidate)
class CandidateAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    """Admin interface for Candidate model."""

    list_display = ["candidate_name", "poll", "candidate_votes", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["candidate_name", "address"]
    readonly_fields = ["address", "created_at"]
