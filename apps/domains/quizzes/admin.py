from django.contrib import admin

from .models import Lab, Quiz, QuizAttempt


@admin.register(Quiz)
class QuizAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "start_time", "end_time", "is_published", "auto_submit")
    list_filter = ("is_published", "auto_submit")
    search_fields = ("name",)
    filter_horizontal = ("students", "labs")
    ordering = ("-start_time",)


@admin.register(Lab)
class LabAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "block", "ip_subnet", "is_active")
    list_filter = ("is_active", "block")
    search_fields = ("name", "ip_subnet")


@admin.register(QuizAttempt)
class QuizAttemptAdmin(admin.ModelAdmin):
    list_display = ("id", "quiz", "student", "submission_status", "submitted_at", "ip")
    list_display_links = ("id", "quiz")
    list_filter = ("submission_status", "is_submitted")
    search_fields = ("student__username", "quiz__name", "ip")
    ordering = ("-created_at",)
    # 제출 기록은 감사 자료: 관리자 화면에서도 수정 금지
    readonly_fields = (
        "responses",
        "is_submitted",
        "submission_status",
        "submitted_at",
        "ip",
        "violations",
        "start_ips",
        "started_at",
        "ends_at",
    )
