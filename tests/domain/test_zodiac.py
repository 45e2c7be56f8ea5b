import unittest

from pearl.domain.common.zodiac import ZodiacSign, degree_in_sign


class TestZodiacSign(unittest.TestCase):
    def test_from_longitude_boundaries(self):
        self.assertEqual(ZodiacSign.from_longitude(0.0), ZodiacSign.ARIES)
        self.assertEqual(ZodiacSign.from_longitude(29.999), ZodiacSign.ARIES)
        self.assertEqual(ZodiacSign.from_longitude(30.0), ZodiacSign.TAURUS)
        self.assertEqual(ZodiacSign.from_longitude(359.9), ZodiacSign.PISCES)
        self.assertEqual(ZodiacSign.from_longitude(360.0), ZodiacSign.ARIES)
        self.assertEqual(ZodiacSign.from_longitude(-1.0), ZodiacSign.PISCES)

    def test_every_longitude_maps_to_one_of_twelve(self):
        for tenth in range(0, 3600):
            sign = ZodiacSign.from_longitude(tenth / 10.0)
            self.assertEqual(sign.index, int(tenth / 300))

    def test_elements_and_modalities(self):
        self.assertEqual(ZodiacSign.ARIES.element, "Fire")
        self.assertEqual(ZodiacSign.TAURUS.element, "Earth")
        self.assertEqual(ZodiacSign.GEMINI.element, "Air")
        self.assertEqual(ZodiacSign.CANCER.element, "Water")
        self.assertEqual(ZodiacSign.ARIES.modality, "Cardinal")
        self.assertEqual(ZodiacSign.TAURUS.modality, "Fixed")
        self.assertEqual(ZodiacSign.GEMINI.modality, "Mutable")
        self.assertEqual(ZodiacSign.CAPRICORN.modality, "Cardinal")

    def test_opposite(self):
        self.assertEqual(ZodiacSign.ARIES.opposite, ZodiacSign.LIBRA)
        self.assertEqual(ZodiacSign.VIRGO.opposite, ZodiacSign.PISCES)
        for sign in ZodiacSign:
            self.assertEqual(sign.opposite.opposite, sign)

    def test_display_name_and_symbol(self):
        self.assertEqual(ZodiacSign.SAGITTARIUS.display_name, "Sagittarius")
        self.assertEqual(ZodiacSign.ARIES.symbol, "♈")

    def test_degree_in_sign(self):
        self.assertAlmostEqual(degree_in_sign(45.5), 15.5)
        self.assertAlmostEqual(degree_in_sign(-1.0), 29.0)


if __name__ == "__main__":
    unittest.main()
