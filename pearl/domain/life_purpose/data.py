from typing import Dict

from pearl.domain.common.zodiac import ZodiacSign

Z = ZodiacSign

SUN_THEMES: Dict[ZodiacSign, str] = {
    Z.ARIES: "Pioneering courage and bold action",
    Z.TAURUS: "Building lasting value and sensory richness",
    Z.GEMINI: "Connecting ideas and communicating truth",
    Z.CANCER: "Nurturing and creating emotional sanctuary",
    Z.LEO: "Creative self-expression and radiant leadership",
    Z.VIRGO: "Sacred service and devotion to craft",
    Z.LIBRA: "Creating harmony, beauty, and just relationships",
    Z.SCORPIO: "Transformative depth and regenerative power",
    Z.SAGITTARIUS: "Expanding horizons and seeking higher truth",
    Z.CAPRICORN: "Building enduring structures and earned authority",
    Z.AQUARIUS: "Innovating for the collective and honoring uniqueness",
    Z.PISCES: "Channeling compassion and transcendent vision",
}

NORTH_NODE_THEMES: Dict[ZodiacSign, str] = {
    Z.ARIES: "Independent action, courage, and self-leadership",
    Z.TAURUS: "Stability, self-worth, and trusting your own values",
    Z.GEMINI: "Curiosity, communication, and embracing many perspectives",
    Z.CANCER: "Emotional vulnerability, home, and nurturing others",
    Z.LEO: "Creative self-expression, joy, and being seen",
    Z.VIRGO: "Humble service, practical wisdom, and sacred routine",
    Z.LIBRA: "Partnership, diplomacy, and learning to receive",
    Z.SCORPIO: "Deep transformation, shared resources, and intimate trust",
    Z.SAGITTARIUS: "Big-picture meaning, faith, and philosophical expansion",
    Z.CAPRICORN: "Mastery, public contribution, and responsible leadership",
    Z.AQUARIUS: "Community, innovation, and humanitarian vision",
    Z.PISCES: "Surrender, spiritual connection, and unconditional compassion",
}

SATURN_THEMES: Dict[ZodiacSign, str] = {
    Z.ARIES: "Learning to stand alone and trust your instincts",
    Z.TAURUS: "Building material security through patience and persistence",
    Z.GEMINI: "Mastering communication and disciplined thinking",
    Z.CANCER: "Emotional maturity and building true security within",
    Z.LEO: "Earned confidence and authentic creative authority",
    Z.VIRGO: "Perfecting your craft through humble, steady practice",
    Z.LIBRA: "Mastering committed relationships and fair negotiation",
    Z.SCORPIO: "Facing shadows with courage and building inner power",
    Z.SAGITTARIUS: "Grounding your beliefs in real-world wisdom",
    Z.CAPRICORN: "Ultimate mastery in Saturn's own sign, the patience that builds empires",
    Z.AQUARIUS: "Structuring your vision for the collective good",
    Z.PISCES: "Giving form to the formless through disciplined spirituality",
}

MIDHEAVEN_THEMES: Dict[ZodiacSign, str] = {
    Z.ARIES: "Leadership, entrepreneurship, and blazing trails in public",
    Z.TAURUS: "Building tangible beauty and lasting financial wisdom",
    Z.GEMINI: "Communication, media, teaching, and connecting ideas publicly",
    Z.CANCER: "Caregiving, real estate, food, and emotional intelligence in career",
    Z.LEO: "Performance, creative direction, and inspiring others publicly",
    Z.VIRGO: "Health, analysis, service, and meticulous excellence in your field",
    Z.LIBRA: "Law, design, diplomacy, and creating aesthetic harmony",
    Z.SCORPIO: "Psychology, research, transformation, and working with hidden truths",
    Z.SAGITTARIUS: "Education, publishing, travel, and expanding cultural horizons",
    Z.CAPRICORN: "Executive leadership, institution-building, and earned authority",
    Z.AQUARIUS: "Technology, social change, and innovation that serves the future",
    Z.PISCES: "Healing arts, music, spirituality, and compassionate service",
}
