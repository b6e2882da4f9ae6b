# gamesessions/admin.py

# Import admin from django.contrib because this file configures the admin site.
from django.contrib import admin
# Import the models because they need to be registered.
from .models import Platform, SessionType, SessionDuration, Session, SessionSettings, SessionMessage

"""
Shows the settings and the message feed on the session's own admin
page, since both belong to exactly one session.
"""
class SessionSettingsInline(admin.StackedInline):
    model = SessionSettings
    can_delete = False


class SessionMessageInline(admin.TabularInline):
    model = SessionMessage
    extra = 0
    fields = ('kind', 'author', 'body', 'created_date')


class SessionAdmin(admin.ModelAdmin):
    list_display = ('session_type', 'platform', 'creator', 'scheduled_date', 'status') # columns shown in the Session list
    list_filter = ('status', 'platform', 'session_type')
    search_fields = ('creator__username', 'information')
    filter_horizontal = ('signed_gamers',)
    inlines = [SessionSettingsInline, SessionMessageInline]


class SessionDurationAdmin(admin.ModelAdmin):
    list_display = ('label', 'minutes')


admin.site.register(Platform)
admin.site.register(SessionType)
admin.site.register(SessionDuration, SessionDurationAdmin)
admin.site.register(Session, SessionAdmin)
