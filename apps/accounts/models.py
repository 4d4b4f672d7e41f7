from django.db import models


class Account(models.Model):
    """Account keyed by email. `password` holds the hasher digest only."""

    email = models.EmailField(unique=True, max_length=255)
    nickname = models.CharField(max_length=100)
    password = models.CharField(max_length=128)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'accounts'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['created_at'], name='accounts_created_at_idx'),
        ]

    def __str__(self):
        return self.email
