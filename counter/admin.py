# counter/admin.py
from django.contrib import admin
from .models import Counter


@admin.register(Counter)
class CounterAdmin(admin.ModelAdmin):
    list_display = ('id', 'value', 'updated_at')
    readonly_fields = ('updated_at',)
    ordering = ('id',)
