from django.contrib import admin

from modules.configuration.models import VatSetting


@admin.register(VatSetting)
class VatSettingAdmin(admin.ModelAdmin):
    list_display = ("value", "updated_by", "updated_at")
