from django import forms

from src.apps.profiles.models import Profile


class UploadForm(forms.ModelForm):
    class Meta:
        model = Profile
        fields = ("avatar",)
