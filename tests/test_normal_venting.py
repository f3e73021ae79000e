"""
Unit tests for normal venting per API 2000 edition.
"""

import unittest

from tankvent.calculations.geometry import compute_derived_geometry
from tankvent.calculations.normal_venting import (
    FifthEditionRules,
    SixthEditionRules,
    SeventhEditionRules,
    PlainProcessRules,
    rules_for_edition,
    compute_normal_venting,
    sum_flowrates,
)
from tankvent.core.config import (
    ApiEdition,
    FluidProperties,
    Insulation,
    Stream,
    TankConfiguration,
    reference_case,
)
from tankvent.lookups import normal_vent_inbreathing, normal_vent_outbreathing


def _run(case, rules=None):
    return compute_normal_venting(case, compute_derived_geometry(case), rules)


class TestEditionRules(unittest.TestCase):

    def test_rules_for_edition(self):
        self.assertIsInstance(rules_for_edition(ApiEdition.FIFTH), FifthEditionRules)
        self.assertIsInstance(rules_for_edition("6TH"), SixthEditionRules)
        self.assertIsInstance(rules_for_edition("SEVENTH"), SeventhEditionRules)

    def test_rule_info(self):
        info = SeventhEditionRules().get_info()
        self.assertEqual(info["class"], "SeventhEditionRules")
        self.assertIn("7th", info["name"])

    def test_sum_flowrates(self):
        self.assertEqual(sum_flowrates([]), 0.0)
        self.assertEqual(sum_flowrates([Stream("A", 50.0), Stream("B", 75.0)]), 125.0)


class TestSeventhEdition(unittest.TestCase):
    """Reference case: 7th edition, one outgoing stream of 368.9 m³/h."""

    def setUp(self):
        self.case = reference_case()
        self.derived = compute_derived_geometry(self.case)
        self.result = compute_normal_venting(self.case, self.derived)

    def test_outbreathing(self):
        out = self.result.outbreathing
        self.assertEqual(out.process_flowrate, 0.0)
        self.assertEqual(out.y_factor, 0.32)
        self.assertEqual(out.reduction_factor, 1.0)
        self.assertAlmostEqual(
            out.thermal_outbreathing,
            0.32 * self.derived.max_tank_volume ** 0.9,
            places=9,
        )

    def test_inbreathing(self):
        inb = self.result.inbreathing
        self.assertEqual(inb.process_flowrate, 368.9)
        self.assertEqual(inb.c_factor, 6.5)
        self.assertAlmostEqual(
            inb.thermal_inbreathing,
            6.5 * self.derived.max_tank_volume ** 0.7,
            places=9,
        )

    def test_total_is_sum(self):
        out = self.result.outbreathing
        inb = self.result.inbreathing
        self.assertEqual(out.total, out.process_flowrate + out.thermal_outbreathing)
        self.assertEqual(inb.total, inb.process_flowrate + inb.thermal_inbreathing)

    def test_volatile_fluid_doubles_process_outbreathing(self):
        case = self.case.copy(incoming_streams=(Stream("A", 50.0), Stream("B", 75.0)))
        self.assertEqual(_run(case).outbreathing.process_flowrate, 250.0)

    def test_vapour_pressure_threshold(self):
        """Doubling applies strictly above 5.0 kPa."""
        streams = (Stream("A", 50.0), Stream("B", 75.0))
        at_threshold = self.case.copy(
            incoming_streams=streams,
            fluid=FluidProperties(avg_storage_temp=35.0, vapour_pressure=5.0),
        )
        above = self.case.copy(
            incoming_streams=streams,
            fluid=FluidProperties(avg_storage_temp=35.0, vapour_pressure=5.1),
        )
        self.assertEqual(_run(at_threshold).outbreathing.process_flowrate, 125.0)
        self.assertEqual(_run(above).outbreathing.process_flowrate, 250.0)


class TestSixthEdition(unittest.TestCase):

    def test_process_not_weighted(self):
        case = reference_case().copy(
            api_edition=ApiEdition.SIXTH,
            incoming_streams=(Stream("A", 50.0), Stream("B", 75.0)),
        )
        result = _run(case)
        self.assertEqual(result.outbreathing.process_flowrate, 125.0)
        self.assertEqual(result.inbreathing.process_flowrate, 368.9)

    def test_thermal_matches_seventh(self):
        sixth = _run(reference_case().copy(api_edition=ApiEdition.SIXTH))
        seventh = _run(reference_case())
        self.assertEqual(sixth.outbreathing.thermal_outbreathing,
                         seventh.outbreathing.thermal_outbreathing)
        self.assertEqual(sixth.inbreathing.thermal_inbreathing,
                         seventh.inbreathing.thermal_inbreathing)


class TestFifthEdition(unittest.TestCase):

    def setUp(self):
        self.case = reference_case().copy(api_edition=ApiEdition.FIFTH)

    def test_process_inbreathing_factor(self):
        case = self.case.copy(outgoing_streams=(Stream("S-1", 100.0),))
        self.assertAlmostEqual(_run(case).inbreathing.process_flowrate, 94.0, places=9)

    def test_process_outbreathing_by_fluid_class(self):
        streams = (Stream("A", 100.0),)
        volatile = self.case.copy(incoming_streams=streams)
        low_vol = self.case.copy(
            incoming_streams=streams,
            fluid=FluidProperties(flash_boiling_point_type="FP", flash_boiling_point=60.0),
        )
        self.assertAlmostEqual(_run(volatile).outbreathing.process_flowrate, 202.0, places=9)
        self.assertAlmostEqual(_run(low_vol).outbreathing.process_flowrate, 101.0, places=9)

    def test_thermal_from_table(self):
        result = _run(self.case)
        volume = compute_derived_geometry(self.case).max_tank_volume
        self.assertEqual(result.outbreathing.y_factor, 1.0)
        self.assertEqual(result.inbreathing.c_factor, 1.0)
        self.assertEqual(result.inbreathing.thermal_inbreathing, normal_vent_inbreathing(volume))
        self.assertEqual(result.outbreathing.thermal_outbreathing,
                         normal_vent_outbreathing(volume, low_volatility=False))

    def test_total_is_maximum(self):
        inb = _run(self.case).inbreathing
        self.assertEqual(inb.total, max(inb.process_flowrate, inb.thermal_inbreathing))

    def test_reduction_factor_applies(self):
        insulated = self.case.copy(
            tank_configuration=TankConfiguration.INSULATED_FULL,
            insulation=Insulation(thickness_mm=100.0, conductivity=0.04,
                                  inside_heat_transfer_coeff=4.0),
        )
        bare = _run(self.case).inbreathing.thermal_inbreathing
        self.assertAlmostEqual(_run(insulated).inbreathing.thermal_inbreathing,
                               bare / 11, places=6)


class TestPlainProcessRules(unittest.TestCase):

    def test_plain_sums(self):
        case = reference_case().copy(
            api_edition=ApiEdition.FIFTH,
            incoming_streams=(Stream("A", 100.0),),
            outgoing_streams=(Stream("S-1", 100.0),),
        )
        result = _run(case, PlainProcessRules(FifthEditionRules()))
        self.assertEqual(result.inbreathing.process_flowrate, 100.0)
        self.assertEqual(result.outbreathing.process_flowrate, 100.0)

    def test_thermal_delegated(self):
        rules = PlainProcessRules(SeventhEditionRules())
        plain = _run(reference_case(), rules)
        default = _run(reference_case())
        self.assertEqual(plain.inbreathing, default.inbreathing)
        self.assertIn("plain process sums", rules.name)


if __name__ == '__main__':
    unittest.main()
