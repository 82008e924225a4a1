from django.contrib import admin, messages

from .models import StreamCode


@admin.register(StreamCode)
class StreamCodeAdmin(admin.ModelAdmin):
    list_display = ["code", "kind", "is_active", "created_at", "expires_at"]
    list_filter = ["is_active"]
    search_fields = ["code"]
    ordering = ["-created_at"]
    readonly_fields = ["id", "code", "stream_data", "created_at"]
    actions = ["deactivate"]

    @admin.display(description="Kind")
    def kind(self, obj):
        return (obj.stream_data or {}).get("kind", "")

    @admin.action(description="Deactivate selected codes")
    def deactivate(self, request, queryset):
        updated = queryset.filter(is_active=True).update(is_active=False)
        self.message_user(request, f"Deactivated {updated} stream code(s)", messages.SUCCESS)
