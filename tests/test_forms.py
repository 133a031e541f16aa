from django import forms

from fodselsnr.forms import FodselsnummerField


class PersonForm(forms.Form):
    fodselsnummer = FodselsnummerField()


class OptionalPersonForm(forms.Form):
    fodselsnummer = FodselsnummerField(required=False)


def test_cleaned_value_is_normalized():
    form = PersonForm(data={"fodselsnummer": " 1019012480 "})
    assert form.is_valid()
    assert form.cleaned_data["fodselsnummer"] == "01019012480"


def test_invalid_number():
    form = PersonForm(data={"fodselsnummer": "01019012481"})
    assert not form.is_valid()
    [error] = form.errors.as_data()["fodselsnummer"]
    assert error.code == "checksum_mismatch"


def test_too_long():
    form = PersonForm(data={"fodselsnummer": "010190124800"})
    assert not form.is_valid()
    assert "fodselsnummer" in form.errors


def test_required():
    form = PersonForm(data={"fodselsnummer": "  "})
    assert not form.is_valid()
    [error] = form.errors.as_data()["fodselsnummer"]
    assert error.code == "required"


def test_optional():
    form = OptionalPersonForm(data={"fodselsnummer": ""})
    assert form.is_valid()
    assert form.cleaned_data["fodselsnummer"] == ""


def test_label():
    assert PersonForm().fields["fodselsnummer"].label == "Fødselsnummer"
