# config/urls.py

from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import path, include
from django.conf import settings
from django.http import HttpResponse
from django.conf.urls.static import static

from accounts.views import logout_view
from .views import home_view

urlpatterns = [
    path('admin/', admin.site.urls),
    path('healthz/', lambda r: HttpResponse("ok", content_type="text/plain")),

    # Login/logout only; accounts are managed by the identity provider (Django auth)
    path('accounts/login/', auth_views.LoginView.as_view(template_name='accounts/login.html'), name='login'),
    path('accounts/logout/', logout_view, name='logout'),

    # App URLs
    path('', home_view, name='home'),
    path('Session/', include('gamesessions.urls')),
    path('Profile/', include('accounts.urls')),
    path('Kudos/', include('kudos.urls')),
]

# Local media serving
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
