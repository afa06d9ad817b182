from django.contrib import admin

from modules.accounts.models import AccountInfo


@admin.register(AccountInfo)
class AccountInfoAdmin(admin.ModelAdmin):
    list_display = ("username", "role", "email", "region")
    list_filter = ("role",)
    search_fields = ("username", "email", "recipient_name")
