import unittest
from datetime import date, time

from pearl.domain.common.birth import BirthData
from pearl.domain.common.text import latin_letters, require_letters
from pearl.domain.errors import InvalidBirthDataError, PearlError


class TestBirthData(unittest.TestCase):
    def test_date_only(self):
        birth = BirthData(birth_date=date(1990, 3, 25))
        self.assertFalse(birth.time_known)
        self.assertFalse(birth.has_coordinates)
        self.assertEqual(birth.timezone, "UTC")

    def test_full_birth_data(self):
        birth = BirthData(
            birth_date=date(1990, 11, 2),
            birth_time=time(14, 30),
            latitude=40.7128,
            longitude=-74.006,
            timezone="America/New_York",
        )
        self.assertTrue(birth.time_known)
        self.assertTrue(birth.has_coordinates)

    def test_frozen(self):
        birth = BirthData(birth_date=date(1990, 3, 25))
        with self.assertRaises(Exception):
            birth.birth_date = date(1991, 1, 1)

    def test_coordinates_come_in_pairs(self):
        with self.assertRaises(InvalidBirthDataError):
            BirthData(birth_date=date(1990, 3, 25), latitude=10.0)

    def test_coordinate_ranges(self):
        with self.assertRaises(InvalidBirthDataError):
            BirthData(birth_date=date(1990, 3, 25), latitude=91.0, longitude=0.0)
        with self.assertRaises(InvalidBirthDataError):
            BirthData(birth_date=date(1990, 3, 25), latitude=0.0, longitude=-181.0)

    def test_unknown_timezone(self):
        with self.assertRaises(InvalidBirthDataError):
            BirthData(birth_date=date(1990, 3, 25), timezone="Nowhere/Special")

    def test_rejects_non_date(self):
        with self.assertRaises(InvalidBirthDataError):
            BirthData(birth_date="1990-03-25")

    def test_errors_share_a_root(self):
        self.assertTrue(issubclass(InvalidBirthDataError, PearlError))


class TestNameLetters(unittest.TestCase):
    def test_folds_accents_and_punctuation(self):
        self.assertEqual(latin_letters("Zoë O'Neil"), "zoeoneil")
        self.assertEqual(latin_letters("  Test User  "), "testuser")

    def test_letterless_name_raises(self):
        with self.assertRaises(InvalidBirthDataError):
            require_letters("1234 !!")
        with self.assertRaises(InvalidBirthDataError):
            require_letters("")


if __name__ == "__main__":
    unittest.main()
