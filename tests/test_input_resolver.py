#!/usr/bin/env python3
"""
Tests for input resolution: domain checks, form text parsing and roughness lookup.
"""

import pytest
from fluids.friction import _roughness

from utils.input_resolver import (
    DomainError, PhysicalInputs, check_domain, parse_form_inputs,
    get_pipe_roughness_mm, list_roughness_materials,
    FORM_MISSING_MESSAGE, FORM_BOUNDS_MESSAGE,
)

VALID = dict(
    flowrate_m3_h=100.0, diameter_mm=150.0, density_kg_m3=998.0,
    viscosity_pa_s=0.001, roughness_mm=0.045, length_m=50.0,
)

FORM = {
    "flowrate": "100",
    "diameter": "150",
    "density": "998",
    "dynamicViscosity": "0.001",
    "pipeRoughness": "0.045",
    "pipeLength": "50",
}


class TestCheckDomain:

    def test_valid_inputs_pass(self):
        check_domain(**VALID)

    def test_zero_roughness_and_length_allowed(self):
        check_domain(**dict(VALID, roughness_mm=0.0, length_m=0.0))

    def test_missing_field(self):
        values = dict(VALID)
        del values["length_m"]
        with pytest.raises(DomainError) as excinfo:
            check_domain(**values)
        assert excinfo.value.field == "length_m"
        assert excinfo.value.bound == "required"

    def test_non_numeric_rejected(self):
        with pytest.raises(DomainError) as excinfo:
            check_domain(**dict(VALID, density_kg_m3="998"))
        assert excinfo.value.bound == "real"

    def test_bool_rejected(self):
        with pytest.raises(DomainError):
            check_domain(**dict(VALID, diameter_mm=True))

    def test_message_names_field_and_bound(self):
        with pytest.raises(DomainError, match="Pipe diameter"):
            check_domain(**dict(VALID, diameter_mm=0.0))

    def test_physical_inputs_check(self):
        inputs = PhysicalInputs(**VALID)
        assert inputs.check() is inputs
        with pytest.raises(DomainError):
            PhysicalInputs(**dict(VALID, viscosity_pa_s=-1.0)).check()


class TestParseFormInputs:
    """Raw text values as collected by the calculator form."""

    def test_form_keys(self):
        inputs = parse_form_inputs(FORM)
        assert inputs == PhysicalInputs(**VALID)

    def test_snake_case_keys_and_whitespace(self):
        raw = {name: f" {value} " for name, value in VALID.items()}
        assert parse_form_inputs(raw) == PhysicalInputs(**VALID)

    def test_empty_field(self):
        with pytest.raises(DomainError) as excinfo:
            parse_form_inputs(dict(FORM, density=""))
        assert str(excinfo.value) == FORM_MISSING_MESSAGE
        assert excinfo.value.field == "density_kg_m3"

    def test_missing_field(self):
        raw = dict(FORM)
        del raw["pipeLength"]
        with pytest.raises(DomainError, match=FORM_MISSING_MESSAGE):
            parse_form_inputs(raw)

    def test_not_a_number(self):
        with pytest.raises(DomainError, match=FORM_MISSING_MESSAGE):
            parse_form_inputs(dict(FORM, flowrate="abc"))

    @pytest.mark.parametrize("key, value", [
        ("diameter", "0"),
        ("density", "-1"),
        ("dynamicViscosity", "0"),
        ("flowrate", "-5"),
        ("pipeRoughness", "-0.1"),
        ("pipeLength", "-2"),
    ])
    def test_out_of_bounds(self, key, value):
        with pytest.raises(DomainError) as excinfo:
            parse_form_inputs(dict(FORM, **{key: value}))
        assert str(excinfo.value) == FORM_BOUNDS_MESSAGE


class TestPipeRoughness:

    def test_explicit_value_wins(self):
        assert get_pipe_roughness_mm("Cast iron", 0.1) == (0.1, "Provided")

    def test_material_lookup_case_insensitive(self):
        roughness, source = get_pipe_roughness_mm("cast IRON")
        assert roughness == pytest.approx(_roughness["Cast iron"] * 1000)
        assert "Cast iron" in source

    def test_unknown_material(self):
        with pytest.raises(DomainError) as excinfo:
            get_pipe_roughness_mm("Unobtainium")
        assert excinfo.value.field == "material"

    def test_nothing_provided(self):
        with pytest.raises(DomainError) as excinfo:
            get_pipe_roughness_mm()
        assert excinfo.value.field == "roughness_mm"

    def test_material_table_in_mm(self):
        table = list_roughness_materials()
        assert set(table) == set(_roughness)
        assert table["Cast iron"] == pytest.approx(_roughness["Cast iron"] * 1000)
