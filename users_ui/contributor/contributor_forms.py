# users_ui/contributor/contributor_forms.py
from django import forms

from core.exceptions import ValidationError
from utils.validators import validate_create_post


class CreatePostForm(forms.Form):
    """HTML form for a new post. Field rules come from validate_create_post."""
    title = forms.CharField(
        label="Title",
        required=False,
        strip=False,
        widget=forms.TextInput(attrs={
            "placeholder": "Post title",
            "class": "form-control"
        })
    )
    details = forms.CharField(
        label="Details",
        required=False,
        strip=False,
        widget=forms.Textarea(attrs={
            "placeholder": "Write your post",
            "class": "form-control",
            "rows": 8,
        })
    )

    def clean(self):
        cleaned_data = super().clean()
        try:
            draft = validate_create_post(cleaned_data)
        except ValidationError as e:
            for field, messages in e.errors.items():
                for message in messages:
                    self.add_error(field, message)
            return cleaned_data
        cleaned_data["title"] = draft.title
        cleaned_data["details"] = draft.details
        return cleaned_data
