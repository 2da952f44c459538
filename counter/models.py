# counter/models.py
from django.db import models
from django.utils import timezone


class Operation(models.TextChoices):
    INCREMENT = 'increment', 'Increment'
    DECREMENT = 'decrement', 'Decrement'


class Counter(models.Model):
    value = models.IntegerField(default=0)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"Counter #{self.id} = {self.value}"
