# accounts/forms.py

from django import forms

from core.utils import get_time_zone_choices
from .models import User

"""
This class defines the "Edit Profile" form. It edits the user's
name, email and time zone (which decides how session times are
shown to them) plus the bio stored on their profile.
"""
class EditProfileForm(forms.ModelForm):
    bio = forms.CharField(
        widget=forms.Textarea(attrs={'rows': 4}),
        required=False,
        max_length=2000
    )
    time_zone = forms.ChoiceField(choices=get_time_zone_choices, label="Time zone")

    class Meta:
        model = User
        fields = ['first_name', 'last_name', 'email', 'time_zone']

    def clean_email(self):
        email = self.cleaned_data.get('email', '').lower()
        if User.objects.filter(email__iexact=email).exclude(pk=self.instance.pk).exists():
            raise forms.ValidationError("Another account already uses this email address.")
        return email
