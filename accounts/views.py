# accounts/views.py

# Import render, redirect from django.shortcuts because almost all views need them.
from django.shortcuts import render, redirect
# Import logout from django.contrib.auth because 'logout_view' needs it.
from django.contrib.auth import logout
# Import login_required from django.contrib.auth.decorators because most views in this file need it.
from django.contrib.auth.decorators import login_required
# Import messages from django.contrib because upload errors are flashed to the next page.
from django.contrib import messages
# Import the HTTP responses the profile pages can return.
from django.http import Http404, HttpResponseBadRequest, JsonResponse
# Import require_GET, require_POST from django.views.decorators.http because each route only accepts one method.
from django.views.decorators.http import require_GET, require_POST

# Import EditProfileForm from .forms because 'edit_profile_view' validates with it.
from .forms import EditProfileForm
# Import services from . because every view hands its work to the profile services.
from . import services

"""
This function shows a user's profile page by username. Anyone can
view it, even without logging in. When the logged-in user looks
at their own username they get their own profile page (with the
edit links); otherwise they see the public profile of that user.
"""
def profile_view(request, username=None):
    if not username:
        return HttpResponseBadRequest()

    # Is my profile?
    if request.user.is_authenticated and username == request.user.username:
        context = services.get_my_profile(request.user.pk)
        return render(request, 'accounts/my_profile.html', context)

    context = services.get_user_profile(username)
    if context is None:
        raise Http404("User not found")
    if request.user.is_authenticated:
        context['is_friend'] = request.user.friends.filter(pk=context['profile_user'].pk).exists()
    return render(request, 'accounts/user_profile.html', context)

"""
This function handles the "Edit Profile" page. On GET it shows the
form (plus any error left over from a failed picture upload). On
POST it saves the changes and sends the user back to their profile,
or shows the form again with the problem.
"""
@login_required
def edit_profile_view(request):
    if request.method == 'POST':
        form = EditProfileForm(request.POST, instance=request.user)
        if not form.is_valid():
            return render(request, 'accounts/edit_profile.html', {'form': form})

        result = services.edit_profile(request.user.pk, form.cleaned_data)
        if result:
            return redirect('profile', username=request.user.username)

        # Something went wrong
        form.add_error(None, result.error)
        return render(request, 'accounts/edit_profile.html', {'form': form})

    form = services.get_edit_profile_model(request.user.pk)
    if form is None:
        return HttpResponseBadRequest()

    # Upload errors flashed by 'image_upload_view' are shown with the form's own errors
    upload_errors = [str(m) for m in messages.get_messages(request) if m.level == messages.ERROR]
    return render(request, 'accounts/edit_profile.html', {'form': form, 'upload_errors': upload_errors})

"""
This function is called (with JavaScript) when a user clicks
"Add Friend" on someone's profile. It answers with a small JSON
object saying whether it worked and a message to show.
"""
@login_required
@require_POST
def add_friend_view(request):
    username = request.POST.get('userName') or request.POST.get('username')
    if not username:
        return JsonResponse({'success': False, 'responseText': 'No user provided'})

    result = services.add_friend(request.user, username)

    # Return Success
    if result:
        return JsonResponse({'success': True, 'responseText': 'Friend added'})

    # Return error
    return JsonResponse({'success': False, 'responseText': result.error})

# Autocomplete search used by the "find a gamer" box
@require_GET
def users_json_view(request):
    users = services.get_users_json(request.GET.get('term', ''))
    return JsonResponse(users, safe=False)

"""
This function handles the avatar upload from the Edit Profile page.
Whatever happens it sends the user back to the edit page; if
something went wrong the error message is flashed so the edit page
can show it.
"""
@login_required
@require_POST
def image_upload_view(request):
    upload = request.FILES.get('file')
    if upload is None or upload.size <= 0:
        messages.error(request, "No image was selected. Please select an image.")
        return redirect('edit_profile')

    result = services.process_image_upload(upload, request.user.pk)
    if not result:
        # Something went wrong
        messages.error(request, result.error)
    return redirect('edit_profile')

"""
This function logs the user out of the application and sends
them back to the session list.
"""
def logout_view(request):
    logout(request)
    return redirect('home')
