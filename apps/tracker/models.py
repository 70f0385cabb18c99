from django.db import models


class StoredEntry(models.Model):
    """One entry of the local durable key-value store."""

    key = models.CharField(max_length=100, unique=True)
    value = models.TextField(blank=True)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'stored_entries'
        ordering = ['key']
        verbose_name_plural = 'stored entries'

    def __str__(self):
        return f"{self.key} ({len(self.value)} chars)"
