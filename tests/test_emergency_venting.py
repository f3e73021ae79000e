"""
Unit tests for emergency (fire exposure) venting.
"""

import math
import unittest

from tankvent.calculations.emergency_venting import (
    HexaneSimplifiedMethod,
    TableOrFormulaMethod,
    select_heat_input_coefficients,
    calc_heat_input,
    calc_general_vent_rate,
    calc_hexane_vent_rate,
    resolve_reference_fluid,
    compute_emergency_venting,
)
from tankvent.calculations.geometry import compute_derived_geometry
from tankvent.core.config import (
    ApiEdition,
    FluidProperties,
    Insulation,
    TankConfiguration,
    reference_case,
)
from tankvent.core.exceptions import MissingParameterError
from tankvent.core.results import HeatInputCoefficients
from tankvent.lookups import emergency_vent_table_lookup


def _run(case, method=None):
    return compute_emergency_venting(case, compute_derived_geometry(case), method)


class TestHeatInputCoefficients(unittest.TestCase):

    def test_area_bands(self):
        self.assertEqual(select_heat_input_coefficients(10.0, 101.32),
                         HeatInputCoefficients(63_150, 1))
        self.assertEqual(select_heat_input_coefficients(18.6, 101.32),
                         HeatInputCoefficients(224_200, 0.566))
        self.assertEqual(select_heat_input_coefficients(93.0, 101.32),
                         HeatInputCoefficients(630_400, 0.338))
        self.assertEqual(select_heat_input_coefficients(259.9, 5.0),
                         HeatInputCoefficients(630_400, 0.338))

    def test_large_area_by_design_pressure(self):
        self.assertEqual(select_heat_input_coefficients(260.0, 7.1),
                         HeatInputCoefficients(43_200, 0.82))
        self.assertEqual(select_heat_input_coefficients(260.0, 7.0),
                         HeatInputCoefficients(4_129_700, 0))

    def test_unbounded_mid_row(self):
        self.assertEqual(
            select_heat_input_coefficients(689.44, 101.32, unbounded_mid_row=True),
            HeatInputCoefficients(630_400, 0.338),
        )

    def test_heat_input(self):
        self.assertEqual(calc_heat_input(HeatInputCoefficients(4_129_700, 0), 689.44), 4_129_700)
        self.assertAlmostEqual(
            calc_heat_input(HeatInputCoefficients(43_200, 0.82), 689.44),
            43_200 * 689.44 ** 0.82,
            places=3,
        )


class TestReferenceFluid(unittest.TestCase):

    def test_hexane_defaults(self):
        fluid = resolve_reference_fluid(FluidProperties())
        self.assertEqual(fluid.tag, "Hexane")
        self.assertEqual(fluid.latent_heat, 334.9)
        self.assertEqual(fluid.relieving_temperature, 15.6)
        self.assertEqual(fluid.molecular_mass, 86.17)

    def test_partially_specified_is_user_defined(self):
        fluid = resolve_reference_fluid(FluidProperties(latent_heat=300.0))
        self.assertEqual(fluid.tag, "User-defined")
        self.assertEqual(fluid.latent_heat, 300.0)
        self.assertEqual(fluid.molecular_mass, 86.17)


class TestVentRateFormulas(unittest.TestCase):

    def test_general_formula(self):
        expected = 906.6 * 1e6 * 1.0 / (1000 * 300.0) * math.sqrt((20.0 + 273.15) / 50.0)
        self.assertAlmostEqual(calc_general_vent_rate(1e6, 1.0, 300.0, 20.0, 50.0),
                               expected, places=6)

    def test_hexane_formulas(self):
        self.assertEqual(calc_hexane_vent_rate(689.44, 5.0, 0.5), 0.5 * 19910)
        self.assertAlmostEqual(calc_hexane_vent_rate(689.44, 101.32, 1.0),
                               208.2 * 689.44 ** 0.82, places=6)


class TestHexaneSimplifiedMethod(unittest.TestCase):

    def test_reference_case(self):
        case = reference_case()
        result = _run(case)
        area = compute_derived_geometry(case).wetted_area
        self.assertEqual(result.coefficients, HeatInputCoefficients(43_200, 0.82))
        self.assertAlmostEqual(result.heat_input, 43_200 * area ** 0.82, places=3)
        self.assertAlmostEqual(result.heat_input, 9_184_416, delta=1_000)
        self.assertEqual(result.environmental_factor, 1.0)
        self.assertEqual(result.reference_fluid, "Hexane")
        self.assertAlmostEqual(result.emergency_vent_required, 208.2 * area ** 0.82, places=6)
        self.assertAlmostEqual(result.emergency_vent_required, 44_264, delta=5)

    def test_low_design_pressure(self):
        result = _run(reference_case().copy(design_pressure=5.0))
        self.assertEqual(result.coefficients, HeatInputCoefficients(4_129_700, 0))
        self.assertEqual(result.heat_input, 4_129_700)
        self.assertEqual(result.emergency_vent_required, 19910)

    def test_small_tank_uses_table(self):
        case = reference_case().copy(diameter=4000.0, height=5000.0)
        area = compute_derived_geometry(case).wetted_area
        result = _run(case)
        self.assertEqual(result.coefficients, HeatInputCoefficients(224_200, 0.566))
        self.assertEqual(result.emergency_vent_required, emergency_vent_table_lookup(area))

    def test_coefficient_bands_by_tank_size(self):
        for d, h, expected in ((1000.0, 3000.0, HeatInputCoefficients(63_150, 1)),
                               (4000.0, 5000.0, HeatInputCoefficients(224_200, 0.566)),
                               (8000.0, 6000.0, HeatInputCoefficients(630_400, 0.338))):
            case = reference_case().copy(diameter=d, height=h)
            self.assertEqual(_run(case).coefficients, expected)

    def test_user_fluid_uses_general_formula(self):
        fluid = FluidProperties(avg_storage_temp=35.0, vapour_pressure=5.6,
                                latent_heat=300.0, relieving_temperature=20.0,
                                molecular_mass=50.0)
        result = _run(reference_case().copy(fluid=fluid))
        self.assertEqual(result.reference_fluid, "User-defined")
        expected = calc_general_vent_rate(result.heat_input, 1.0, 300.0, 20.0, 50.0)
        self.assertAlmostEqual(result.emergency_vent_required, expected, places=6)

    def test_underground_has_no_emergency_venting(self):
        result = _run(reference_case().copy(tank_configuration=TankConfiguration.UNDERGROUND))
        self.assertEqual(result.environmental_factor, 0.0)
        self.assertEqual(result.emergency_vent_required, 0.0)

    def test_impoundment_halves_vent_rate(self):
        bare = _run(reference_case())
        impounded = _run(reference_case().copy(tank_configuration=TankConfiguration.IMPOUNDMENT))
        self.assertAlmostEqual(
            impounded.emergency_vent_required / bare.emergency_vent_required, 0.5, places=12
        )

    def test_general_formula_linear_in_environmental_factor(self):
        fluid = FluidProperties(latent_heat=300.0, relieving_temperature=20.0,
                                molecular_mass=50.0)
        bare = _run(reference_case().copy(fluid=fluid))
        impounded = _run(reference_case().copy(
            fluid=fluid, tank_configuration=TankConfiguration.IMPOUNDMENT,
        ))
        self.assertEqual(impounded.reference_fluid, "User-defined")
        self.assertEqual(impounded.environmental_factor, 0.5)
        self.assertAlmostEqual(
            impounded.emergency_vent_required / bare.emergency_vent_required, 0.5, places=12
        )

    def test_zero_insulation_thickness(self):
        """Zero thickness is unbounded conductance: F clamps to the table maximum."""
        case = reference_case().copy(
            tank_configuration=TankConfiguration.INSULATED_FULL,
            insulation=Insulation(thickness_mm=0.0, conductivity=0.05,
                                  inside_heat_transfer_coeff=4.0),
        )
        result = _run(case)
        self.assertEqual(result.environmental_factor, 0.300)
        self.assertAlmostEqual(
            result.emergency_vent_required, 0.300 * 208.2 * 689.44 ** 0.82, delta=2
        )

    def test_insulated_environmental_factor(self):
        case = reference_case().copy(
            tank_configuration=TankConfiguration.INSULATED_FULL,
            insulation=Insulation(thickness_mm=25.0, conductivity=0.05,
                                  inside_heat_transfer_coeff=4.0),
        )
        result = _run(case)
        self.assertAlmostEqual(result.environmental_factor, 0.02625, places=9)

    def test_insulated_without_parameters(self):
        case = reference_case().copy(tank_configuration=TankConfiguration.INSULATED_FULL)
        derived = compute_derived_geometry(reference_case())
        with self.assertRaises(MissingParameterError):
            compute_emergency_venting(case, derived)


class TestTableOrFormulaMethod(unittest.TestCase):

    def setUp(self):
        self.method = TableOrFormulaMethod()

    def test_table_at_boundary_outside_seventh(self):
        case = reference_case().copy(api_edition=ApiEdition.SIXTH)
        self.assertEqual(
            self.method.vent_rate(260.0, 101.32, case.api_edition, 0.0, 1.0,
                                  resolve_reference_fluid(case.fluid)),
            19910,
        )

    def test_seventh_edition_general_formula(self):
        case = reference_case()
        result = _run(case, self.method)
        self.assertEqual(result.coefficients, HeatInputCoefficients(630_400, 0.338))
        expected = calc_general_vent_rate(result.heat_input, 1.0, 334.9, 15.6, 86.17)
        self.assertAlmostEqual(result.emergency_vent_required, expected, places=6)

    def test_sixth_edition_large_tank(self):
        case = reference_case().copy(api_edition=ApiEdition.SIXTH)
        result = _run(case, self.method)
        self.assertEqual(result.coefficients, HeatInputCoefficients(43_200, 0.82))
        expected = calc_general_vent_rate(result.heat_input, 1.0, 334.9, 15.6, 86.17)
        self.assertAlmostEqual(result.emergency_vent_required, expected, places=6)

    def test_method_names_differ(self):
        self.assertNotEqual(self.method.name, HexaneSimplifiedMethod().name)
        self.assertEqual(self.method.get_info()["class"], "TableOrFormulaMethod")


if __name__ == '__main__':
    unittest.main()
