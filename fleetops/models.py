from django.db import models


class StoredCollection(models.Model):
    """One named record collection, serialized as a JSON list."""
    name = models.CharField(primary_key=True, max_length=50)
    payload = models.TextField(blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name
