from django import forms

from fodselsnr.norway_standards import Fodselsnummer
from fodselsnr.validators import validate_fodselsnummer


class FodselsnummerField(forms.CharField):
    default_validators = [validate_fodselsnummer]

    def __init__(self, **kwargs):
        kwargs.setdefault("label", "Fødselsnummer")
        kwargs.setdefault("max_length", Fodselsnummer.LENGTH)
        kwargs.setdefault("strip", True)
        super().__init__(**kwargs)

    def clean(self, value):
        value = super().clean(value)
        if value in self.empty_values:
            return value
        # Return the number with its leading zero restored.
        return str(Fodselsnummer(value))
