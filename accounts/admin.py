# accounts/admin.py

# Import admin from django.contrib because this file configures the admin site.
from django.contrib import admin
# Import UserAdmin from django.contrib.auth.admin because it already knows how to show user accounts.
from django.contrib.auth.admin import UserAdmin
# Import models from .models because User and Profile need to be registered.
from .models import User, Profile

"""
This class adds the gaming-specific fields (time zone and friends)
to the standard Django user admin page.
"""
class GamerAdmin(UserAdmin):
    fieldsets = UserAdmin.fieldsets + (
        ('Gaming', {'fields': ('time_zone', 'friends')}),
    )
    filter_horizontal = UserAdmin.filter_horizontal + ('friends',)


class ProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'avatar')
    search_fields = ('user__username',)

"""
This block of code makes the user database tables visible
in the Django admin control panel. This allows an
administrator to manually view or edit accounts and profiles.
"""
admin.site.register(User, GamerAdmin)
admin.site.register(Profile, ProfileAdmin)
