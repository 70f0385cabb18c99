from django.contrib import admin

from .models import StoredEntry


@admin.register(StoredEntry)
class StoredEntryAdmin(admin.ModelAdmin):
    """
    Read-only view of the key-value store.

    Entries are written by the record store only; editing them here would
    bypass the per-day capacity check.
    """

    list_display = ['key', 'value_length', 'updated_at']
    search_fields = ['key']
    readonly_fields = ['key', 'value', 'updated_at']

    def value_length(self, obj):
        return len(obj.value)
    value_length.short_description = 'Size (chars)'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
