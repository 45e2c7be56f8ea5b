import unittest
from datetime import date

from pearl.domain.errors import InvalidBirthDataError
from pearl.domain.numerology.calculator import (
    birthday,
    calculate_numerology,
    challenges,
    expression,
    life_path,
    personal_year,
    personality,
    pinnacles,
    reduce_number,
    soul_urge,
)


class TestReduceNumber(unittest.TestCase):
    def test_single_digits_unchanged(self):
        for n in range(10):
            self.assertEqual(reduce_number(n), n)

    def test_master_numbers_preserved(self):
        self.assertEqual(reduce_number(11), 11)
        self.assertEqual(reduce_number(22), 22)
        self.assertEqual(reduce_number(33), 33)
        self.assertEqual(reduce_number(29), 11)
        self.assertEqual(reduce_number(38), 11)

    def test_master_numbers_reduced_on_request(self):
        self.assertEqual(reduce_number(11, preserve_masters=False), 2)
        self.assertEqual(reduce_number(29, preserve_masters=False), 2)

    def test_result_range(self):
        for n in range(1, 5000, 7):
            self.assertIn(reduce_number(n), set(range(1, 10)) | {11, 22, 33})


class TestCoreNumbers(unittest.TestCase):
    def test_life_path(self):
        self.assertEqual(life_path(date(1990, 3, 15)).value, 1)
        self.assertEqual(life_path(date(1990, 11, 2)).value, 5)

    def test_master_life_path(self):
        lp = life_path(date(1960, 11, 2))
        self.assertEqual(lp.value, 11)
        self.assertTrue(lp.is_master_number)
        self.assertTrue(lp.meaning)

    def test_birthday_never_master(self):
        self.assertEqual(birthday(27).value, 9)
        self.assertEqual(birthday(11).value, 2)
        self.assertFalse(birthday(22).is_master_number)
        self.assertLessEqual(len(birthday(27).keywords), 2)

    def test_name_numbers(self):
        # t2 e5 s1 t2 u3 s1 e5 r9
        self.assertEqual(expression("Test User").value, 1)
        self.assertEqual(soul_urge("Test User").value, 4)
        self.assertEqual(personality("Test User").value, 6)
        self.assertIn("6", personality("Test User").meaning)

    def test_letterless_name_raises(self):
        with self.assertRaises(InvalidBirthDataError):
            calculate_numerology(date(1990, 3, 15), "123")


class TestCycles(unittest.TestCase):
    def test_personal_year(self):
        # 15 + 3 + (2026 -> 1) = 19 -> 1
        year = personal_year(date(1990, 3, 15), date(2026, 6, 1))
        self.assertEqual(year.value, 1)
        self.assertEqual(year.as_of, date(2026, 6, 1))
        self.assertTrue(year.theme)

    def test_pinnacles(self):
        result = pinnacles(date(1990, 3, 15), 1)
        self.assertEqual(len(result), 4)
        self.assertEqual([p.number for p in result], [9, 7, 7, 4])
        self.assertEqual(
            [(p.start_age, p.end_age) for p in result],
            [(0, 35), (36, 44), (45, 53), (54, None)],
        )

    def test_challenges(self):
        result = challenges(date(1990, 3, 15))
        self.assertGreaterEqual(len(result), 3)
        self.assertEqual([c.number for c in result], [3, 5, 2, 2])
        for c in result:
            self.assertIn(c.number, range(0, 9))
            self.assertTrue(c.meaning)


class TestCalculateNumerology(unittest.TestCase):
    def test_profile(self):
        profile = calculate_numerology(date(1990, 11, 2), "Test User", today=date(2026, 1, 1))
        self.assertEqual(profile.life_path.value, 5)
        self.assertEqual(profile.birthday.value, 2)
        self.assertEqual(len(profile.core_numbers), 5)
        self.assertEqual(len(profile.pinnacles), 4)
        self.assertEqual(profile.personal_year.as_of, date(2026, 1, 1))

    def test_consistent_across_runs(self):
        first = calculate_numerology(date(1990, 11, 2), "Test User", today=date(2026, 1, 1))
        second = calculate_numerology(date(1990, 11, 2), "Test User", today=date(2026, 1, 1))
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
