from django import forms
from django.contrib.auth.forms import AuthenticationForm
from django.contrib.auth.forms import UserCreationForm

from .models import CustomUser
from .models import UserProfile


class EmailAuthenticationForm(AuthenticationForm):
    """Sign-in form that labels the username field as the email address."""

    username = forms.EmailField(
        label="Email",
        widget=forms.EmailInput(
            attrs={"autofocus": True, "placeholder": "you@example.com"}
        ),
    )

    error_messages = {
        "invalid_login": "Invalid email or password.",
        "inactive": "This account is inactive.",
    }


class CustomUserCreationForm(UserCreationForm):
    error_messages = {
        "password_mismatch": "Passwords don't match",
    }

    class Meta:
        model = CustomUser
        fields = ("email",)
        error_messages = {
            "email": {
                "invalid": "Please enter a valid email address",
                "unique": "An account with this email already exists.",
            },
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["email"].required = True
        self.fields["password1"].label = "Password"
        self.fields["password2"].label = "Confirm Password"


class ProfileForm(forms.ModelForm):
    first_name = forms.CharField(
        max_length=150,
        label="First Name",
        error_messages={"required": "First name is required"},
        widget=forms.TextInput(attrs={"placeholder": "John"}),
    )
    last_name = forms.CharField(
        max_length=150,
        label="Last Name",
        error_messages={"required": "Last name is required"},
        widget=forms.TextInput(attrs={"placeholder": "Doe"}),
    )

    class Meta:
        model = UserProfile
        fields = ("first_name", "last_name")
