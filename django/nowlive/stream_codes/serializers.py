from rest_framework import serializers

from .descriptors import KIND_MULTI, KIND_SINGLE, PLATFORMS, InvalidDescriptor, parse_descriptor


class StreamMemberSerializer(serializers.Serializer):
    platform = serializers.ChoiceField(choices=PLATFORMS)
    playback_ref = serializers.CharField(required=False, allow_blank=True)
    display_name = serializers.CharField(required=False, allow_blank=True)


class StreamDescriptorSerializer(serializers.Serializer):
    """
    Validates a descriptor without reshaping it.

    Descriptors carry arbitrary display fields, so the validated payload is the
    original request body (see ``descriptor``), not ``validated_data``.
    """

    kind = serializers.ChoiceField(choices=[KIND_SINGLE, KIND_MULTI])
    platform = serializers.ChoiceField(choices=PLATFORMS, required=False)
    playback_ref = serializers.CharField(required=False, allow_blank=True)
    display_name = serializers.CharField(required=False, allow_blank=True)
    title = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    thumbnail = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    members = StreamMemberSerializer(many=True, required=False)

    def validate(self, attrs):
        if attrs["kind"] == KIND_SINGLE and "platform" not in attrs:
            raise serializers.ValidationError({"platform": "This field is required."})
        if attrs["kind"] == KIND_MULTI and "members" not in attrs:
            raise serializers.ValidationError({"members": "This field is required."})

        try:
            parse_descriptor(self.initial_data)
        except InvalidDescriptor as exc:
            raise serializers.ValidationError(str(exc))
        return attrs

    @property
    def descriptor(self) -> dict:
        return dict(self.initial_data)
