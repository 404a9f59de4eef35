from __future__ import annotations

from django.contrib.auth import views as auth_views
from django.urls import path

from .views import SignInView
from .views import SignUpView
from .views import UpdateProfileView

urlpatterns = [
    path("login/", SignInView.as_view(), name="login"),
    path("logout/", auth_views.LogoutView.as_view(), name="logout"),
    path("signup/", SignUpView.as_view(), name="signup"),
    path("profile/", UpdateProfileView.as_view(), name="update_profile"),
]
