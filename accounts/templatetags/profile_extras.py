# accounts/templatetags/profile_extras.py

from django import template

from accounts.services import get_user_menu_information

register = template.Library()


# Renders the small user menu (avatar, kudos, friends) in the page header
@register.inclusion_tag('accounts/partials/user_menu.html', takes_context=True)
def user_menu(context):
    user = context['request'].user
    if not user.is_authenticated:
        return {'menu': None}
    return {'menu': get_user_menu_information(user.pk)}
