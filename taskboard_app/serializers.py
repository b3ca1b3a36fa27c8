from rest_framework import serializers

from .models import TaskUpdate


class StrictCharField(serializers.CharField):
    """CharField that only accepts JSON strings and keeps them as sent."""

    def __init__(self, **kwargs):
        kwargs.setdefault('trim_whitespace', False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that rejects strings, floats and booleans instead of coercing them."""

    def to_internal_value(self, data):
        if isinstance(data, (str, float, bool)):
            self.fail('invalid')
        return super().to_internal_value(data)


class ContextSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    color = serializers.CharField(read_only=True)


class ContextInputSerializer(serializers.Serializer):
    name = StrictCharField(
        max_length=100,
        error_messages={
            'required': 'Context name is required',
            'blank': 'Context name is required',
            'null': 'Context name is required',
        },
    )
    color = StrictCharField(max_length=32, required=False, allow_blank=True)


class TaskWithContextSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    comments = serializers.CharField(read_only=True, allow_null=True)
    contextId = serializers.IntegerField(source='context_id', read_only=True, allow_null=True)
    context = ContextSerializer(read_only=True, allow_null=True)


class TaskInputSerializer(serializers.Serializer):
    """
    Validates task bodies for both creation and partial updates.

    Pass the current TaskWithContext as instance together with partial=True
    to validate a PATCH body; save() then applies only the supplied fields.
    """

    name = StrictCharField(
        max_length=50,
        error_messages={
            'required': 'Item name is required',
            'blank': 'Item name is required',
            'null': 'Item name is required',
            'max_length': 'Item name cannot exceed 50 characters',
        },
    )
    description = StrictCharField(
        max_length=200,
        error_messages={
            'required': 'Description is required',
            'blank': 'Description is required',
            'null': 'Description is required',
            'max_length': 'Description cannot exceed 200 characters',
        },
    )
    comments = StrictCharField(
        max_length=1000,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={'max_length': 'Comments cannot exceed 1000 characters'},
    )
    contextId = StrictIntegerField(
        source='context_id',
        required=False,
        allow_null=True,
        error_messages={'invalid': 'Context ID must be a number'},
    )

    def create(self, validated_data):
        return self.context['store'].create_task(validated_data)

    def update(self, instance, validated_data):
        update = TaskUpdate.from_data(validated_data)
        if update.is_empty():
            return instance
        return self.context['store'].update_task(instance.id, update)
