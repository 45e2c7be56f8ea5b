from typing import Dict, Tuple


MASTER_NUMBERS = frozenset({11, 22, 33})

VOWELS = frozenset("aeiou")

# Pythagorean table: a..i, j..r, s..z run 1..9
LETTER_VALUES: Dict[str, int] = {
    letter: index % 9 + 1
    for index, letter in enumerate("abcdefghijklmnopqrstuvwxyz")
}

LIFE_PATH_MEANINGS: Dict[int, str] = {
    1: "The Leader: you are here to pioneer, to be original, to forge your own path. Independence and self-reliance define your journey.",
    2: "The Peacemaker: you are here to cooperate, to bring balance, to weave harmony from discord. Sensitivity is your superpower.",
    3: "The Creator: you are here to express, to create, to uplift through joy and communication. Your words and art carry light.",
    4: "The Builder: you are here to create lasting foundations. Stability, discipline, and dedication turn your visions into reality.",
    5: "The Adventurer: you are here to experience freedom in all its forms. Change is not your enemy; it is your element.",
    6: "The Nurturer: you are here to love deeply, to care for others, and to create beauty and harmony in the world around you.",
    7: "The Seeker: you are here to go deep, to question, to seek the truth beneath all surfaces. Solitude feeds your wisdom.",
    8: "The Powerhouse: you are here to master the material world. Abundance, authority, and achievement flow when you align with purpose.",
    9: "The Humanitarian: you are here to serve the world with compassion. Your life carries a universal quality; you are meant for everyone.",
    11: "The Intuitive Master: a master number carrying the vibration of spiritual insight and inspiration. You illuminate the path for others.",
    22: "The Master Builder: a master number carrying the power to manifest grand visions into physical reality. You build cathedrals.",
    33: "The Master Teacher: the highest master number. You embody unconditional love and spiritual upliftment. Your very presence heals.",
}

KEYWORDS: Dict[int, Tuple[str, ...]] = {
    1: ("Leadership", "Independence", "Innovation", "Courage"),
    2: ("Diplomacy", "Sensitivity", "Partnership", "Balance"),
    3: ("Creativity", "Expression", "Joy", "Communication"),
    4: ("Stability", "Foundation", "Discipline", "Dedication"),
    5: ("Freedom", "Adventure", "Change", "Versatility"),
    6: ("Love", "Nurturing", "Responsibility", "Beauty"),
    7: ("Wisdom", "Introspection", "Spirituality", "Analysis"),
    8: ("Abundance", "Power", "Achievement", "Authority"),
    9: ("Compassion", "Humanitarianism", "Wisdom", "Completion"),
    11: ("Intuition", "Illumination", "Inspiration", "Mastery"),
    22: ("Vision", "Manifestation", "Legacy", "Architecture"),
    33: ("Healing", "Teaching", "Unconditional Love", "Service"),
}

EXPRESSION_MEANINGS: Dict[int, str] = {
    1: "You express yourself through leadership and originality.",
    2: "You express yourself through cooperation and sensitivity.",
    3: "You express yourself through creativity and communication.",
    4: "You express yourself through structure and reliability.",
    5: "You express yourself through versatility and freedom.",
    6: "You express yourself through love and responsibility.",
    7: "You express yourself through wisdom and depth.",
    8: "You express yourself through achievement and mastery.",
    9: "You express yourself through compassion and vision.",
}

SOUL_URGE_MEANINGS: Dict[int, str] = {
    1: "Your soul craves independence and the freedom to lead.",
    2: "Your soul craves deep partnership and harmony.",
    3: "Your soul craves creative expression and joyful communication.",
    4: "Your soul craves stability, order, and meaningful work.",
    5: "Your soul craves adventure, variety, and sensory experience.",
    6: "Your soul craves love, family, and creating beauty.",
    7: "Your soul craves truth, solitude, and spiritual understanding.",
    8: "Your soul craves mastery, influence, and material accomplishment.",
    9: "Your soul craves service to humanity and universal compassion.",
}

PERSONAL_YEAR_THEMES: Dict[int, str] = {
    1: "New beginnings and fresh starts",
    2: "Patience, partnerships, and gestation",
    3: "Creative expression and social expansion",
    4: "Building foundations and hard work",
    5: "Change, freedom, and adventure",
    6: "Love, family, and responsibility",
    7: "Reflection, spirituality, and inner work",
    8: "Achievement, power, and abundance",
    9: "Completion, release, and humanitarianism",
}

CHALLENGE_MEANINGS: Dict[int, str] = {
    0: "The challenge of all challenges: finding your own inner compass",
    1: "The challenge of asserting yourself and standing alone",
    2: "The challenge of patience, sensitivity, and cooperation",
    3: "The challenge of self-expression and overcoming self-doubt",
    4: "The challenge of discipline, commitment, and practical effort",
    5: "The challenge of handling freedom responsibly",
    6: "The challenge of responsibility without self-sacrifice",
    7: "The challenge of trust, faith, and emotional openness",
    8: "The challenge of power, money, and material mastery",
    9: "The challenge of letting go and serving the greater good",
}
