# kudos/admin.py

# Import admin from django.contrib because this file configures the admin site.
from django.contrib import admin
# Import models from .models because Kudos and KudosHistory need to be registered.
from .models import Kudos, KudosHistory

"""
Shows each user's history entries underneath their kudos balance.
History is append-only, so existing entries are read-only here.
"""
class KudosHistoryInline(admin.TabularInline):
    model = KudosHistory
    extra = 0
    readonly_fields = ('points', 'created_date')
    can_delete = False


class KudosAdmin(admin.ModelAdmin):
    list_display = ('user', 'points')
    ordering = ('-points',)
    search_fields = ('user__username',)
    # Points should only change through add_kudos_points so history stays in sync
    readonly_fields = ('points',)
    inlines = [KudosHistoryInline]


admin.site.register(Kudos, KudosAdmin)
