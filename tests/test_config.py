"""
Tests for the constants table and lookup helpers in config.
"""

import dataclasses

import pytest

import config
from config import (
    ion_mass, get_ion_masses, get_structure, get_ion_system, mass_source_name,
    ION_MASSES, PAPER_ION_MASSES, STRUCTURE_PRESETS, DEFAULT_STRUCTURE,
    UnknownSpeciesError, UnknownStructureError, UnknownIonSystemError,
    CalculationError, StructureGeometry,
)


class TestPhysicalConstants:
    """Fixed CODATA constants."""

    def test_exact_values(self):
        assert config.BOLTZMANN_CONSTANT == 1.380649e-23
        assert config.ELEMENTARY_CHARGE == 1.602176634e-19

    def test_record_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.PHYSICAL_CONSTANTS.boltzmann = 1.0

    def test_material_properties(self):
        m = config.MATERIAL_PROPERTIES
        assert m.yield_strength == 670e6
        assert m.solid_density == 2700
        assert m.liquid_density == 1000


class TestIonMasses:
    """Species lookup in both mass tables."""

    @pytest.mark.parametrize("species", ['H+', 'I-', 'Li+', 'Cl-', 'K+'])
    def test_both_tables_cover_all_species(self, species):
        assert ion_mass(species) == ION_MASSES[species]
        assert ion_mass(species, use_paper_masses=True) == PAPER_ION_MASSES[species]

    def test_tables_differ(self):
        assert ion_mass('I-') != ion_mass('I-', use_paper_masses=True)

    def test_table_selection(self):
        assert get_ion_masses() is ION_MASSES
        assert get_ion_masses(True) is PAPER_ION_MASSES

    def test_unknown_species_fails(self):
        with pytest.raises(UnknownSpeciesError) as exc_info:
            ion_mass('Xx-', use_paper_masses=True)
        assert exc_info.value.species == 'Xx-'
        assert exc_info.value.mass_source == 'paper'
        assert 'Xx-' in str(exc_info.value)

    def test_unknown_species_is_lookup_error(self):
        with pytest.raises(LookupError):
            ion_mass('Na+')
        with pytest.raises(CalculationError):
            ion_mass('Na+')

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ION_MASSES['Na+'] = 3.8e-26

    def test_mass_source_name(self):
        assert mass_source_name(True) == 'paper'
        assert mass_source_name(False) == 'reference'


class TestStructurePresets:
    """Named structure lookup."""

    def test_presets(self):
        assert set(STRUCTURE_PRESETS) == {'SMALL', 'MEDIUM', 'LARGE'}
        assert STRUCTURE_PRESETS['MEDIUM'] == StructureGeometry(0.01, 0.0142, 0.02, 0.0084)

    def test_default_aliases_small(self):
        assert DEFAULT_STRUCTURE is STRUCTURE_PRESETS['SMALL']
        assert get_structure('DEFAULT') is DEFAULT_STRUCTURE

    def test_case_insensitive(self):
        assert get_structure('large') is STRUCTURE_PRESETS['LARGE']

    def test_unknown_structure_fails(self):
        with pytest.raises(UnknownStructureError) as exc_info:
            get_structure('HUGE')
        assert exc_info.value.name == 'HUGE'

    def test_explicit_fallback(self):
        assert get_structure('HUGE', default=DEFAULT_STRUCTURE) is DEFAULT_STRUCTURE

    def test_geometry_is_immutable(self, small):
        with pytest.raises(dataclasses.FrozenInstanceError):
            small.r1 = 1.0


class TestIonSystems:
    """Named electrolyte systems."""

    def test_order_and_values(self):
        names = [s.name for s in config.ION_SYSTEMS]
        assert names == ['HI', 'LiCl', 'KCl']
        assert [s.conductivity for s in config.ION_SYSTEMS] == [0.85, 0.7, 0.6]

    def test_lookup(self):
        s = get_ion_system('LiCl')
        assert (s.anion, s.cation) == ('Cl-', 'Li+')

    def test_unknown_system_fails(self):
        with pytest.raises(UnknownIonSystemError):
            get_ion_system('NaCl')


def test_print_summary(capsys):
    config.print_summary(use_paper_masses=True)
    out = capsys.readouterr().out
    assert 'CONSTANTS TABLE' in out
    assert 'paper' in out
    assert 'MEDIUM' in out
