# gamesessions/forms.py

# Import forms from django because this file defines web forms.
from django import forms

# Import the lookup models because the select lists are built from them.
from .models import Platform, SessionType, SessionDuration
# Import the lookup providers because they supply the options for the select lists.
from .lookups import get_durations, get_session_types, get_platforms
# Import the helpers because the time and gamer pickers use fixed option lists.
from .utils import get_time_slots, parse_time_slot, get_gamers_required_options

"""
This class defines the form used for creating a new gaming session.
The date and time are picked separately (a calendar for the day and
a list of 15 minute slots for the time) and are joined together when
the session is saved. The time the user picks is in their own time
zone. The select lists are filled in by 'bind_options'.
"""
class CreateSessionForm(forms.Form):
    scheduled_date = forms.DateField(widget=forms.DateInput(attrs={'type': 'date'}), label="Date")
    scheduled_time = forms.TypedChoiceField(coerce=parse_time_slot, label="Time")
    platform = forms.ModelChoiceField(queryset=Platform.objects.none())
    session_type = forms.ModelChoiceField(queryset=SessionType.objects.none(), label="Type")
    duration = forms.ModelChoiceField(queryset=SessionDuration.objects.none())
    gamers_required = forms.TypedChoiceField(coerce=int, label="Gamers needed")
    information = forms.CharField(
        widget=forms.Textarea(attrs={'rows': 4}),
        required=False,
        label="Information"
    )
    is_public = forms.BooleanField(required=False, initial=True, label="Show in the public session list")
    approve_joinees = forms.BooleanField(required=False, label="Approve gamers who join")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.bind_options()

    # (Re)loads every select list's options
    def bind_options(self):
        self.fields['duration'].queryset = get_durations()
        self.fields['session_type'].queryset = get_session_types()
        self.fields['platform'].queryset = get_platforms()
        self.fields['scheduled_time'].choices = [(slot, slot) for slot in get_time_slots()]
        self.fields['gamers_required'].choices = get_gamers_required_options()

"""
This class defines the form used for editing an existing session.
It has everything the create form has, plus the hidden id of the
session being edited. The status is not edited here: Open and Full
follow the sign-ups, and cancelling has its own button.
"""
class EditSessionForm(CreateSessionForm):
    session_id = forms.UUIDField(widget=forms.HiddenInput)

"""
This class defines the form used for posting a comment on a
session's message feed.
"""
class CommentForm(forms.Form):
    comment = forms.CharField(
        widget=forms.Textarea(attrs={'rows': 2, 'placeholder': 'Write a comment...'}),
        max_length=1000,
        label=''
    )
