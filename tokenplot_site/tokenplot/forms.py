from django import forms


class SentenceForm(forms.Form):
    """
    Single sentence input. The raw text is kept as typed (no stripping);
    tokenization and the empty-token check happen in the pipeline.
    """
    sentence = forms.CharField(
        label="Enter a sentence:",
        strip=False,
        error_messages={"required": "Please enter a sentence."},
        widget=forms.TextInput(attrs={"placeholder": "Type your sentence here"}),
    )
