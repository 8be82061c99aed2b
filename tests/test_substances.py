import unittest

import numpy as np

from stoichio import extract
from stoichio.elements import Element, Elements
from stoichio.errors import ElementNotFoundError, FormulaError, SubstanceNotFoundError
from stoichio.substances import Substance, SubstanceAttributes, Substances


class TestSubstance(unittest.TestCase):
    def test_water(self):
        substance = Substance("H2O")
        self.assertEqual(substance.name, "H2O")
        self.assertEqual(substance.formula.label, "H2O")
        self.assertEqual(substance.charge, 0.0)
        self.assertEqual(len(substance.elements), 2)
        self.assertEqual(substance.coefficient("H"), 2.0)
        self.assertEqual(substance.coefficient("O"), 1.0)
        self.assertAlmostEqual(substance.molar_mass, 0.01801528, places=10)

    def test_molar_masses(self):
        expected = {
            "CaCO3": 0.1000872,
            "HCO3-": 0.06101714,
            "CO3--": 0.0600092,
            "Na+": 0.022989768,
            "Fe+++": 0.055847,
            "(CaMg)(CO3)2": 0.1844014,
            "CH3COOH": 0.06005256,
        }
        for formula, molar_mass in expected.items():
            with self.subTest(formula=formula):
                self.assertAlmostEqual(Substance(formula).molar_mass, molar_mass, places=10)

    def test_charged_substance(self):
        substance = Substance("CO3--", name="CO3--(aq)", type="aqueous", tags=["anion"])
        self.assertEqual(substance.name, "CO3--(aq)")
        self.assertEqual(substance.type, "aqueous")
        self.assertEqual(substance.tags, ("anion",))
        self.assertEqual(substance.charge, -2.0)
        self.assertEqual(substance.symbols, ("C", "O", "Z"))
        self.assertEqual(substance.coefficients, (1.0, 3.0, -2.0))
        self.assertEqual(substance.elements.symbols(), ["C", "O"])

    def test_custom_elements(self):
        elements = Elements([
            Element("Aa", atomic_weight=0.001),
            Element("Bb", atomic_weight=0.002),
        ])
        substance = Substance("AaBb2+", elements=elements)
        self.assertEqual(substance.charge, 1.0)
        self.assertEqual(substance.coefficient("Aa"), 1.0)
        self.assertEqual(substance.coefficient("Bb"), 2.0)
        self.assertAlmostEqual(substance.molar_mass, 0.005)

    def test_unknown_element(self):
        with self.assertRaises(ElementNotFoundError):
            Substance("Xx2O")

    def test_invalid_formula(self):
        with self.assertRaises(FormulaError):
            Substance("2NaCl")

    def test_from_attributes(self):
        attributes = SubstanceAttributes("CaCO3", name="Calcite", tags=["mineral"])
        substance = Substance(attributes)
        self.assertIs(substance.attributes, attributes)
        self.assertEqual(substance.name, "Calcite")
        self.assertEqual(substance.tags, ("mineral",))

    def test_replace_builds_new_substances(self):
        elements = Elements([Element("Aa", atomic_weight=1.0), Element("Bb", atomic_weight=2.0)])
        original = Substance("Aa", name="first", elements=elements)

        renamed = original.replace_name("second")
        self.assertEqual(renamed.name, "second")
        self.assertEqual(original.name, "first")

        reformulated = original.replace_formula("AaBb")
        self.assertEqual(reformulated.name, "first")
        self.assertEqual(reformulated.formula.label, "AaBb")
        self.assertAlmostEqual(reformulated.molar_mass, 3.0)

        retyped = original.replace_type("gaseous").replace_tags(["x", "y"])
        self.assertEqual(retyped.type, "gaseous")
        self.assertEqual(retyped.tags, ("x", "y"))
        self.assertEqual(original.type, "")

    def test_equality(self):
        self.assertEqual(Substance("H2O"), Substance("H2O"))
        self.assertNotEqual(Substance("H2O"), Substance("H2O", name="water"))
        self.assertEqual(len({Substance("H2O"), Substance("H2O")}), 1)
        self.assertLess(Substance("CO2"), Substance("H2O"))


class TestSubstances(unittest.TestCase):
    def setUp(self):
        self.substances = Substances([
            Substance("H2O", "H2O(aq)", "aqueous", ["solvent"]),
            Substance("H+", "H+(aq)", "aqueous", ["charged", "cation"]),
            Substance("OH-", "OH-(aq)", "aqueous", ["charged", "anion"]),
            Substance("HCO3-", "HCO3-(aq)", "aqueous", ["charged", "anion"]),
            Substance("CO3-2", "CO3-2(aq)", "aqueous", ["charged", "anion"]),
            Substance("CO2", "CO2(aq)", "aqueous", ["neutral"]),
            Substance("CO2", "CO2(g)", "gaseous"),
            Substance("H2O", "H2O(g)", "gaseous"),
        ])

    def names(self, substances):
        return [substance.name for substance in substances]

    def test_size(self):
        self.assertEqual(len(self.substances), 8)
        self.assertEqual(len(self.substances.data), 8)

    def test_index_with_name(self):
        expected = ["H2O(aq)", "H+(aq)", "OH-(aq)", "HCO3-(aq)", "CO3-2(aq)", "CO2(aq)", "CO2(g)", "H2O(g)"]
        for index, name in enumerate(expected):
            self.assertEqual(self.substances.index_with_name(name), index)
        self.assertEqual(self.substances.index_with_name("NaCl(s)"), 8)

    def test_index_with_formula(self):
        self.assertEqual(self.substances.index_with_formula("H2O"), 0)
        self.assertEqual(self.substances.index_with_formula("H+"), 1)
        self.assertEqual(self.substances.index_with_formula("OH-"), 2)
        self.assertEqual(self.substances.index_with_formula("HCO3-"), 3)
        self.assertEqual(self.substances.index_with_formula("CO3-2"), 4)
        self.assertEqual(self.substances.index_with_formula("CO3--"), 4)
        self.assertEqual(self.substances.index_with_formula("CO2"), 5)
        self.assertEqual(self.substances.index_with_formula("NaCl"), 8)

    def test_get(self):
        self.assertEqual(self.substances.get_with_name("CO2(g)").type, "gaseous")
        self.assertEqual(self.substances.get_with_formula("OH-").name, "OH-(aq)")
        with self.assertRaises(SubstanceNotFoundError):
            self.substances.get_with_name("NaCl(s)")
        with self.assertRaises(SubstanceNotFoundError):
            self.substances.get_with_formula("NaCl")

    def test_with_names(self):
        filtered = self.substances.with_names("H+(aq) OH-(aq) H2O(aq)")
        self.assertEqual(self.names(filtered), ["H+(aq)", "OH-(aq)", "H2O(aq)"])
        filtered = self.substances.with_names(["CO2(g)"])
        self.assertEqual(self.names(filtered), ["CO2(g)"])

    def test_with_formulas(self):
        filtered = self.substances.with_formulas("CO2 HCO3- CO3--")
        self.assertEqual(filtered[0], self.substances.get_with_name("CO2(aq)"))
        self.assertEqual(filtered[1], self.substances.get_with_name("HCO3-(aq)"))
        self.assertEqual(filtered[2], self.substances.get_with_name("CO3-2(aq)"))

    def test_with_type(self):
        self.assertEqual(
            self.names(self.substances.with_type("aqueous")),
            ["H2O(aq)", "H+(aq)", "OH-(aq)", "HCO3-(aq)", "CO3-2(aq)", "CO2(aq)"],
        )
        self.assertEqual(self.names(self.substances.with_type("gaseous")), ["CO2(g)", "H2O(g)"])

    def test_tags(self):
        self.assertEqual(
            self.names(self.substances.with_tag("charged")),
            ["H+(aq)", "OH-(aq)", "HCO3-(aq)", "CO3-2(aq)"],
        )
        self.assertEqual(
            self.names(self.substances.without_tag("charged")),
            ["H2O(aq)", "CO2(aq)", "CO2(g)", "H2O(g)"],
        )
        self.assertEqual(self.names(self.substances.with_tags(["cation", "charged"])), ["H+(aq)"])
        self.assertEqual(
            self.names(self.substances.with_tags("anion charged")),
            ["OH-(aq)", "HCO3-(aq)", "CO3-2(aq)"],
        )
        self.assertEqual(len(self.substances.without_tags(["anion", "charged"])), 5)

    def test_with_elements(self):
        self.assertEqual(
            self.names(self.substances.with_elements("H O")),
            ["H2O(aq)", "H+(aq)", "OH-(aq)", "H2O(g)"],
        )
        self.assertEqual(
            self.names(self.substances.with_elements_of(["CO2"])),
            ["CO3-2(aq)", "CO2(aq)", "CO2(g)"],
        )
        self.assertEqual(
            self.names(self.substances.with_elements_of("H2O CO2")),
            self.names(self.substances),
        )

    def test_append(self):
        self.substances.append(Substance("CaCO3").replace_name("CaCO3(calcite)"))
        self.assertEqual(len(self.substances), 9)
        self.assertEqual(self.substances.get_with_name("CaCO3(calcite)").formula.label, "CaCO3")
        self.assertEqual(self.substances.get_with_formula("CaCO3").name, "CaCO3(calcite)")

    def test_from_formulas(self):
        substances = Substances(["H2O", "CO2"])
        self.assertEqual(self.names(substances), ["H2O", "CO2"])


class TestExtract(unittest.TestCase):
    def test_charges(self):
        substances = Substances(["Na+", "CO3--", "H2O"])
        np.testing.assert_array_equal(extract.charges(substances), [1.0, -2.0, 0.0])

    def test_names(self):
        substances = Substances([Substance("H2O", "water"), Substance("CO2", "CO2(g)")])
        self.assertEqual(extract.names(substances), ["water", "CO2(g)"])
        self.assertEqual(extract.names(Elements.periodic_table())[:2], ["Hydrogen", "Helium"])

    def test_molar_masses(self):
        substances = Substances(["H2O", "CaCO3"])
        np.testing.assert_allclose(extract.molar_masses(substances), [0.01801528, 0.1000872])


if __name__ == '__main__':
    unittest.main()
