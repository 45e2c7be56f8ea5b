"""
The 64 Gene Keys: shadow, gift and siddhi frequencies per gate.
"""
from typing import Tuple

from pearl.domain.gene_keys.schemas import GeneKey


GENE_KEYS: Tuple[GeneKey, ...] = (
    GeneKey(number=1, shadow="Entropy", gift="Freshness", siddhi="Beauty", theme="From Self-Absorption to Fresh Beauty", codon_ring="Ring of Fire"),
    GeneKey(number=2, shadow="Dislocation", gift="Orientation", siddhi="Unity", theme="Returning to the One", codon_ring="Ring of Water"),
    GeneKey(number=3, shadow="Chaos", gift="Innovation", siddhi="Innocence", theme="Through the Eyes of a Child", codon_ring="Ring of Life and Death"),
    GeneKey(number=4, shadow="Intolerance", gift="Understanding", siddhi="Forgiveness", theme="A Universal Panacea", codon_ring="Ring of Union"),
    GeneKey(number=5, shadow="Impatience", gift="Patience", siddhi="Timelessness", theme="The Ending of Time", codon_ring="Ring of Light"),
    GeneKey(number=6, shadow="Conflict", gift="Diplomacy", siddhi="Peace", theme="The Path to Peace", codon_ring="Ring of Alchemy"),
    GeneKey(number=7, shadow="Division", gift="Guidance", siddhi="Virtue", theme="The Army of Light", codon_ring="Ring of Union"),
    GeneKey(number=8, shadow="Mediocrity", gift="Style", siddhi="Exquisiteness", theme="The Diamond of Your True Self", codon_ring="Ring of Water"),
    GeneKey(number=9, shadow="Inertia", gift="Determination", siddhi="Invincibility", theme="The Power of the Infinitesimal", codon_ring="Ring of Light"),
    GeneKey(number=10, shadow="Self-Obsession", gift="Naturalness", siddhi="Being", theme="Being at Ease", codon_ring="Ring of Humanity"),
    GeneKey(number=11, shadow="Obscurity", gift="Idealism", siddhi="Light", theme="The Light of Eden", codon_ring="Ring of Light"),
    GeneKey(number=12, shadow="Vanity", gift="Discrimination", siddhi="Purity", theme="A Pure Heart", codon_ring="Ring of Trials"),
    GeneKey(number=13, shadow="Discord", gift="Discernment", siddhi="Empathy", theme="Listening Through Love", codon_ring="Ring of Purification"),
    GeneKey(number=14, shadow="Compromise", gift="Competence", siddhi="Bounteousness", theme="Radiating Prosperity", codon_ring="Ring of Fire"),
    GeneKey(number=15, shadow="Dullness", gift="Magnetism", siddhi="Florescence", theme="An Eternally Flowering Spring", codon_ring="Ring of Seeking"),
    GeneKey(number=16, shadow="Indifference", gift="Versatility", siddhi="Mastery", theme="Magical Genius", codon_ring="Ring of Prosperity"),
    GeneKey(number=17, shadow="Opinion", gift="Far-Sightedness", siddhi="Omniscience", theme="The Eye", codon_ring="Ring of Humanity"),
    GeneKey(number=18, shadow="Judgement", gift="Integrity", siddhi="Perfection", theme="The Healing Power of Mind", codon_ring="Ring of Matter"),
    GeneKey(number=19, shadow="Co-dependence", gift="Sensitivity", siddhi="Sacrifice", theme="The Future Human Being", codon_ring="Ring of Gaia"),
    GeneKey(number=20, shadow="Superficiality", gift="Self-Assurance", siddhi="Presence", theme="The Sacred Om", codon_ring="Ring of Life and Death"),
    GeneKey(number=21, shadow="Control", gift="Authority", siddhi="Valour", theme="A Noble Life", codon_ring="Ring of Humanity"),
    GeneKey(number=22, shadow="Dishonour", gift="Graciousness", siddhi="Grace", theme="Grace Under Pressure", codon_ring="Ring of Divinity"),
    GeneKey(number=23, shadow="Complexity", gift="Simplicity", siddhi="Quintessence", theme="The Alchemy of Simplicity", codon_ring="Ring of Life and Death"),
    GeneKey(number=24, shadow="Addiction", gift="Invention", siddhi="Silence", theme="The Paradise State", codon_ring="Ring of Life and Death"),
    GeneKey(number=25, shadow="Constriction", gift="Acceptance", siddhi="Universal Love", theme="The Myth of the Sacred Wound", codon_ring="Ring of Humanity"),
    GeneKey(number=26, shadow="Pride", gift="Artfulness", siddhi="Invisibility", theme="Sacred Tricksters", codon_ring="Ring of Light"),
    GeneKey(number=27, shadow="Selfishness", gift="Altruism", siddhi="Selflessness", theme="Food of the Gods", codon_ring="Ring of Life and Death"),
    GeneKey(number=28, shadow="Purposelessness", gift="Totality", siddhi="Immortality", theme="Embracing the Dark Side", codon_ring="Ring of Illusion"),
    GeneKey(number=29, shadow="Half-Heartedness", gift="Commitment", siddhi="Devotion", theme="Leaping into the Void", codon_ring="Ring of Union"),
    GeneKey(number=30, shadow="Desire", gift="Lightness", siddhi="Rapture", theme="Celestial Fire", codon_ring="Ring of Purification"),
    GeneKey(number=31, shadow="Arrogance", gift="Leadership", siddhi="Humility", theme="Sounding Your Truth", codon_ring="Ring of No Return"),
    GeneKey(number=32, shadow="Failure", gift="Preservation", siddhi="Veneration", theme="Ancestral Reverence", codon_ring="Ring of Illusion"),
    GeneKey(number=33, shadow="Forgetting", gift="Mindfulness", siddhi="Revelation", theme="The Final Revelation", codon_ring="Ring of Trials"),
    GeneKey(number=34, shadow="Force", gift="Strength", siddhi="Majesty", theme="The Beauty of the Beast", codon_ring="Ring of Alchemy"),
    GeneKey(number=35, shadow="Hunger", gift="Adventure", siddhi="Boundlessness", theme="Wormholes and Miracles", codon_ring="Ring of Miracles"),
    GeneKey(number=36, shadow="Turbulence", gift="Humanity", siddhi="Compassion", theme="Becoming Human", codon_ring="Ring of Divinity"),
    GeneKey(number=37, shadow="Weakness", gift="Equality", siddhi="Tenderness", theme="Family Alchemy", codon_ring="Ring of Divinity"),
    GeneKey(number=38, shadow="Struggle", gift="Perseverance", siddhi="Honour", theme="The Warrior of Light", codon_ring="Ring of Destiny"),
    GeneKey(number=39, shadow="Provocation", gift="Dynamism", siddhi="Liberation", theme="The Tension of Transcendence", codon_ring="Ring of Seeking"),
    GeneKey(number=40, shadow="Exhaustion", gift="Resolve", siddhi="Divine Will", theme="The Will to Surrender", codon_ring="Ring of Alchemy"),
    GeneKey(number=41, shadow="Fantasy", gift="Anticipation", siddhi="Emanation", theme="The Prime Emanation", codon_ring="Ring of Origin"),
    GeneKey(number=42, shadow="Expectation", gift="Detachment", siddhi="Celebration", theme="Letting Go of Living and Dying", codon_ring="Ring of Matter"),
    GeneKey(number=43, shadow="Deafness", gift="Insight", siddhi="Epiphany", theme="Breakthrough", codon_ring="Ring of Destiny"),
    GeneKey(number=44, shadow="Interference", gift="Teamwork", siddhi="Synarchy", theme="Karmic Relationships", codon_ring="Ring of Illusion"),
    GeneKey(number=45, shadow="Dominance", gift="Synergy", siddhi="Communion", theme="Cosmic Communion", codon_ring="Ring of Prosperity"),
    GeneKey(number=46, shadow="Seriousness", gift="Delight", siddhi="Ecstasy", theme="A Science of Luck", codon_ring="Ring of Matter"),
    GeneKey(number=47, shadow="Oppression", gift="Transmutation", siddhi="Transfiguration", theme="Transmuting the Past", codon_ring="Ring of Alchemy"),
    GeneKey(number=48, shadow="Inadequacy", gift="Resourcefulness", siddhi="Wisdom", theme="The Wonder of Uncertainty", codon_ring="Ring of Matter"),
    GeneKey(number=49, shadow="Reaction", gift="Revolution", siddhi="Rebirth", theme="Changing the World from the Inside", codon_ring="Ring of the Whirlwind"),
    GeneKey(number=50, shadow="Corruption", gift="Equilibrium", siddhi="Harmony", theme="Cosmic Order", codon_ring="Ring of Illuminati"),
    GeneKey(number=51, shadow="Agitation", gift="Initiative", siddhi="Awakening", theme="Initiative to Awakening", codon_ring="Ring of Humanity"),
    GeneKey(number=52, shadow="Stress", gift="Restraint", siddhi="Stillness", theme="The Stillpoint", codon_ring="Ring of Seeking"),
    GeneKey(number=53, shadow="Immaturity", gift="Expansion", siddhi="Superabundance", theme="Evolving Beyond Evolution", codon_ring="Ring of Seeking"),
    GeneKey(number=54, shadow="Greed", gift="Aspiration", siddhi="Ascension", theme="The Serpent Path", codon_ring="Ring of Gaia"),
    GeneKey(number=55, shadow="Victimisation", gift="Freedom", siddhi="Freedom", theme="The Dragonfly's Dream", codon_ring="Ring of the Whirlwind"),
    GeneKey(number=56, shadow="Distraction", gift="Enrichment", siddhi="Intoxication", theme="Divine Intoxication", codon_ring="Ring of Trials"),
    GeneKey(number=57, shadow="Unease", gift="Intuition", siddhi="Clarity", theme="A Gentle Wind", codon_ring="Ring of Matter"),
    GeneKey(number=58, shadow="Dissatisfaction", gift="Vitality", siddhi="Bliss", theme="From Dissatisfaction to Bliss", codon_ring="Ring of Seeking"),
    GeneKey(number=59, shadow="Dishonesty", gift="Intimacy", siddhi="Transparency", theme="The Dragon in Your Genome", codon_ring="Ring of Union"),
    GeneKey(number=60, shadow="Limitation", gift="Realism", siddhi="Justice", theme="The Cracking of the Vessel", codon_ring="Ring of Gaia"),
    GeneKey(number=61, shadow="Psychosis", gift="Inspiration", siddhi="Sanctity", theme="The Holy of Holies", codon_ring="Ring of Gaia"),
    GeneKey(number=62, shadow="Intellect", gift="Precision", siddhi="Impeccability", theme="The Language of Light", codon_ring="Ring of No Return"),
    GeneKey(number=63, shadow="Doubt", gift="Inquiry", siddhi="Truth", theme="Reaching the Source", codon_ring="Ring of Origin"),
    GeneKey(number=64, shadow="Confusion", gift="Imagination", siddhi="Illumination", theme="The Aurora", codon_ring="Ring of Origin"),
)
