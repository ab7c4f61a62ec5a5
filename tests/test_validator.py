"""Tests for quote form validation."""

from datetime import timedelta

import pytest

from cotizador.config import ValidationConfig
from cotizador.quote.validator import QuoteValidator
from cotizador.schemas.quote_schema import FormField, RawFormInput

from tests.conftest import TODAY, make_form


class TestValidForm:
    def test_complete_form_passes(self, validator):
        result = validator.validate(make_form(), today=TODAY)
        assert result.valid is True
        assert result.failed_fields == ()
        assert result.errors == {}
        assert result.first_failed_field is None

    def test_event_today_is_allowed(self, validator):
        result = validator.validate(make_form(fecha=TODAY.isoformat()), today=TODAY)
        assert result.valid is True

    def test_inverted_times_are_allowed(self, validator):
        form = make_form(hora_inicio="23:00", hora_fin="02:00")
        assert validator.validate(form, today=TODAY).valid is True

    def test_bar_staff_is_never_a_failure(self, validator):
        assert validator.validate(make_form(barra="abc"), today=TODAY).valid is True
        assert validator.validate(make_form(barra=None), today=TODAY).valid is True


class TestName:
    def test_short_name_fails(self, validator):
        result = validator.validate(make_form(nombre="Al"), today=TODAY)
        assert result.failed_fields == (FormField.NOMBRE,)

    def test_name_is_trimmed_before_length_check(self, validator):
        result = validator.validate(make_form(nombre="  Al   "), today=TODAY)
        assert FormField.NOMBRE in result.failed_fields

    def test_three_characters_pass(self, validator):
        result = validator.validate(make_form(nombre="Ana"), today=TODAY)
        assert result.valid is True


class TestPhone:
    @pytest.mark.parametrize("phone", ["998123456", "99812345678", "998-123-4567",
                                       "998 123 4567", "abcdefghij", "", None])
    def test_invalid_phone_shapes_fail(self, validator, phone):
        result = validator.validate(make_form(telefono=phone), today=TODAY)
        assert result.failed_fields == (FormField.TELEFONO,)

    def test_surrounding_whitespace_is_ignored(self, validator):
        result = validator.validate(make_form(telefono=" 9981234567 "), today=TODAY)
        assert result.valid is True

    def test_non_ascii_digits_fail(self, validator):
        result = validator.validate(make_form(telefono="٩٩٨١٢٣٤٥٦٧"), today=TODAY)
        assert FormField.TELEFONO in result.failed_fields

    def test_message_mentions_length(self, validator):
        result = validator.validate(make_form(telefono="123"), today=TODAY)
        assert "10 dígitos" in result.errors[FormField.TELEFONO]


class TestDate:
    def test_yesterday_fails(self, validator):
        yesterday = (TODAY - timedelta(days=1)).isoformat()
        result = validator.validate(make_form(fecha=yesterday), today=TODAY)
        assert result.failed_fields == (FormField.FECHA,)
        assert result.errors[FormField.FECHA] == "La fecha debe ser futura."

    def test_yesterday_fails_with_real_clock(self, validator):
        from datetime import date

        yesterday = (date.today() - timedelta(days=1)).isoformat()
        result = validator.validate(make_form(fecha=yesterday))
        assert FormField.FECHA in result.failed_fields

    def test_missing_date_fails(self, validator):
        result = validator.validate(make_form(fecha=""), today=TODAY)
        assert result.errors[FormField.FECHA] == "Selecciona la fecha del evento."

    def test_malformed_date_fails(self, validator):
        result = validator.validate(make_form(fecha="20/10/2026"), today=TODAY)
        assert FormField.FECHA in result.failed_fields

    def test_date_object_accepted(self, validator):
        result = validator.validate(make_form(fecha=TODAY + timedelta(days=3)), today=TODAY)
        assert result.valid is True

    def test_min_event_date(self):
        assert QuoteValidator.min_event_date(TODAY) == "2026-10-19"


class TestCountsAndVenue:
    def test_blank_venue_fails(self, validator):
        result = validator.validate(make_form(lugar="   "), today=TODAY)
        assert result.failed_fields == (FormField.LUGAR,)

    @pytest.mark.parametrize("tables", ["0", "", None, "-3", "mesas"])
    def test_tables_below_one_fail(self, validator, tables):
        result = validator.validate(make_form(mesas=tables), today=TODAY)
        assert result.failed_fields == (FormField.MESAS,)

    @pytest.mark.parametrize("guests", ["0", "", None, "-1"])
    def test_guests_below_one_fail(self, validator, guests):
        result = validator.validate(make_form(invitados=guests), today=TODAY)
        assert result.failed_fields == (FormField.INVITADOS,)

    def test_overlong_digit_run_fails_instead_of_raising(self, validator):
        result = validator.validate(make_form(mesas="1" * 5000), today=TODAY)
        assert result.failed_fields == (FormField.MESAS,)

    def test_integer_values_accepted(self, validator):
        result = validator.validate(make_form(mesas=1, invitados=1), today=TODAY)
        assert result.valid is True


class TestTimes:
    def test_missing_start_time_fails(self, validator):
        result = validator.validate(make_form(hora_inicio=""), today=TODAY)
        assert result.failed_fields == (FormField.HORA_INICIO,)

    def test_missing_end_time_fails(self, validator):
        result = validator.validate(make_form(hora_fin=None), today=TODAY)
        assert result.failed_fields == (FormField.HORA_FIN,)

    def test_unparseable_time_fails(self, validator):
        result = validator.validate(make_form(hora_inicio="siete"), today=TODAY)
        assert FormField.HORA_INICIO in result.failed_fields


class TestCollectsAllFailures:
    def test_missing_name_and_phone_both_reported_in_order(self, validator):
        result = validator.validate(make_form(nombre="", telefono=""), today=TODAY)
        assert result.valid is False
        assert result.failed_fields == (FormField.NOMBRE, FormField.TELEFONO)
        assert [f.value for f in result.failed_fields] == ["nombre", "telefono"]

    def test_empty_form_reports_every_required_field(self, validator):
        result = validator.validate(RawFormInput(), today=TODAY)
        assert [f.value for f in result.failed_fields] == [
            "nombre", "telefono", "fecha", "lugar",
            "mesas", "invitados", "horaInicio", "horaFin",
        ]
        assert result.first_failed_field == FormField.NOMBRE

    def test_first_failed_field_follows_declaration_order(self, validator):
        result = validator.validate(make_form(hora_fin="", lugar=""), today=TODAY)
        assert result.first_failed_field == FormField.LUGAR

    def test_every_failure_has_a_message(self, validator):
        result = validator.validate(RawFormInput(), today=TODAY)
        assert set(result.errors) == set(result.failed_fields)
        assert all(result.errors.values())

    def test_odd_types_never_raise(self, validator):
        form = RawFormInput(nombre=123, telefono=9981234567, fecha=[], lugar={},
                            mesas=float("nan"), invitados=True, hora_inicio=7, hora_fin=object())
        result = validator.validate(form, today=TODAY)
        assert result.valid is False
        assert FormField.TELEFONO not in result.failed_fields


class TestResultHashing:
    def test_equal_results_hash_equal(self, validator):
        first = validator.validate(make_form(nombre=""), today=TODAY)
        second = validator.validate(make_form(nombre=""), today=TODAY)
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_invalid_outcome_is_hashable(self, service):
        outcome = service.prepare(make_form(mesas="0"))
        assert outcome in {outcome}


class TestAlternateLimits:
    def test_custom_phone_length(self):
        validator = QuoteValidator(ValidationConfig(name_min_length=3, phone_length=8))
        assert validator.validate(make_form(telefono="12345678"), today=TODAY).valid is True
        result = validator.validate(make_form(telefono="9981234567"), today=TODAY)
        assert result.failed_fields == (FormField.TELEFONO,)

    def test_custom_name_length(self):
        validator = QuoteValidator(ValidationConfig(name_min_length=10, phone_length=10))
        result = validator.validate(make_form(nombre="Ana Pérez"), today=TODAY)
        assert result.failed_fields == (FormField.NOMBRE,)
