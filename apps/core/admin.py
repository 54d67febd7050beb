# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from apps.core.models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("id", "username", "name", "email", "role", "is_active")
    list_filter = ("role", "is_active", "is_staff")
    search_fields = ("username", "name", "email")
    fieldsets = DjangoUserAdmin.fieldsets + (
        ("Evalify", {"fields": ("name", "role")}),
    )
