import logging

from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth.mixins import LoginRequiredMixin
from django.contrib.auth.views import LoginView
from django.urls import reverse
from django.views.generic.edit import CreateView
from django.views.generic.edit import UpdateView

from .forms import CustomUserCreationForm
from .forms import EmailAuthenticationForm
from .forms import ProfileForm
from .models import UserProfile

logger = logging.getLogger(__name__)


class SignInView(LoginView):
    form_class = EmailAuthenticationForm
    template_name = "registration/login.html"
    redirect_authenticated_user = True


class SignUpView(CreateView):
    form_class = CustomUserCreationForm
    template_name = "registration/signup.html"

    def get_success_url(self):
        messages.add_message(
            self.request,
            messages.INFO,
            "Your account has been created. Welcome to GamePlan!",
        )
        return reverse("home")

    def form_valid(self, form):
        """Sign the new user in straight away."""
        response = super().form_valid(form)
        login(
            self.request,
            self.object,
            backend="django.contrib.auth.backends.ModelBackend",
        )
        logger.info("New account created for user %s", self.object.pk)
        return response


class UpdateProfileView(LoginRequiredMixin, UpdateView):
    form_class = ProfileForm
    template_name = "registration/update_profile.html"

    def get_object(self, queryset=None):
        profile, created = UserProfile.objects.get_or_create(user=self.request.user)
        if created:
            logger.info("Created missing profile for user %s", self.request.user.pk)
        return profile

    def get_success_url(self):
        messages.add_message(
            self.request,
            messages.INFO,
            "Your profile information has been updated successfully.",
        )
        return reverse("home")
