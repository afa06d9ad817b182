from __future__ import annotations

from rest_framework import serializers

from modules.configuration.models import VatSetting


class VatSettingSerializer(serializers.ModelSerializer):
    class Meta:
        model = VatSetting
        fields = ["id", "value", "updated_by", "updated_at"]
        read_only_fields = fields
