# counter/serializers.py
from rest_framework import serializers
from .models import Counter, Operation


class CounterSerializer(serializers.ModelSerializer):
    class Meta:
        model = Counter
        fields = ['id', 'value', 'updated_at']
        read_only_fields = fields


class UpdateCounterSerializer(serializers.Serializer):
    operation = serializers.ChoiceField(choices=Operation.choices)
