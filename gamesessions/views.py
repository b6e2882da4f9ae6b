# gamesessions/views.py

from django.shortcuts import render, redirect
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.template.loader import render_to_string
from django.http import Http404, HttpResponseForbidden
from django.views.decorators.http import require_POST
from channels.layers import get_channel_layer
from asgiref.sync import async_to_sync

from core.results import NOT_FOUND, FORBIDDEN
from .constants import SESSION_FEED_GROUP_PREFIX
from .forms import CreateSessionForm, EditSessionForm, CommentForm
from . import services


# Helper: pushes a new feed message to everyone watching the session page.
def broadcast_session_message(message):
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return
    html = render_to_string('gamesessions/partials/message_item.html', {'message': message})
    async_to_sync(channel_layer.group_send)(
        f'{SESSION_FEED_GROUP_PREFIX}{message.session_id}',
        {
            'type': 'broadcast_message', # The type of message for the consumer
            'html': html,
            'message_type': message.kind, # 'system' or 'comment' for client-side JS
        }
    )


# Helper: turns a failed service result into the matching error response.
def result_error_response(request, result, session_id):
    if result.kind == NOT_FOUND:
        raise Http404(result.error)
    if result.kind == FORBIDDEN:
        return HttpResponseForbidden(result.error)
    messages.error(request, result.error)
    return redirect('session_detail', pk=session_id)


# Shows the list of public sessions, latest first
def session_list_view(request):
    sessions = services.get_all(request.user)
    return render(request, 'gamesessions/session_list.html', {'sessions': sessions})

"""
Shows the create session form and handles creating the session.
If saving fails the form is shown again with an error message.
"""
@login_required
def create_session_view(request):
    if request.method == 'POST':
        form = CreateSessionForm(request.POST)
        if form.is_valid():
            result = services.create_session(request.user, form.cleaned_data)
            if result:
                return redirect('session_detail', pk=result.value.pk)
            form.add_error(None, result.error)
        form = services.prepare_create_session_vm(request.user, form)
    else:
        form = services.prepare_create_session_vm(request.user)
    return render(request, 'gamesessions/create_session.html', {'form': form})

"""
Shows the edit form for a session and saves the changes. Only the
gamer who created the session can edit it.
"""
@login_required
def edit_session_view(request, pk):
    session = services.get_by_id(pk)
    if session is None:
        raise Http404("Session not found")
    # Security check: only the creator can edit
    if session.creator_id != request.user.pk:
        return HttpResponseForbidden()

    if request.method == 'POST':
        form = EditSessionForm(request.POST)
        if form.is_valid() and form.cleaned_data['session_id'] == session.pk:
            result = services.edit_session(request.user, form.cleaned_data)
            if result:
                return redirect('session_detail', pk=session.pk)
            form.add_error(None, result.error)
        elif form.is_valid():
            form.add_error(None, "This form doesn't belong to this session.")
        form = services.prepare_edit_session_vm(form)
    else:
        form = services.edit_session_vm(request.user, pk)
        if form is None:
            raise Http404("Session not found")

    return render(request, 'gamesessions/edit_session.html', {'form': form, 'session': session})


# Shows the session page with its gamers and message feed
def session_detail_view(request, pk):
    details = services.prepare_view_session_vm(request.user, pk)
    if details is None:
        raise Http404("Session not found")

    context = {
        'session': details,
        'comment_form': CommentForm(),
        'is_signed_up': request.user in details.signed_gamers,
        'is_creator': request.user == details.creator,
    }
    return render(request, 'gamesessions/session_detail.html', context)

# Posts a comment to the session feed
@login_required
@require_POST
def add_comment_view(request, pk):
    form = CommentForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Your comment can't be empty.")
        return redirect('session_detail', pk=pk)

    result = services.add_session_comment(request.user, form.cleaned_data['comment'], pk)
    if not result:
        return result_error_response(request, result, pk)

    # --- Real-Time Broadcast ---
    broadcast_session_message(result.value)
    return redirect('session_detail', pk=pk)

# Signs the current user up to a session
@login_required
@require_POST
def join_session_view(request, pk):
    result = services.join_session(request.user, pk)
    if not result:
        return result_error_response(request, result, pk)
    broadcast_session_message(result.value)
    return redirect('session_detail', pk=pk)

# Removes the current user from a session
@login_required
@require_POST
def leave_session_view(request, pk):
    result = services.leave_session(request.user, pk)
    if not result:
        return result_error_response(request, result, pk)
    broadcast_session_message(result.value)
    return redirect('session_list')

# Cancels a session (creator only); the session stays visible as 'Cancelled'
@login_required
@require_POST
def cancel_session_view(request, pk):
    result = services.cancel_session(request.user, pk)
    if not result:
        return result_error_response(request, result, pk)
    broadcast_session_message(result.value)
    return redirect('session_detail', pk=pk)
