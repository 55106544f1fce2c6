"""Static lookup tables for scansion.

Data only: stress exceptions, poetic elisions, syllable breakdowns, word
stress biases and the standard meter templates. Loaded once at import and
never mutated.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class StandardMeter:
    pattern: str
    name: str
    min_match: float


# Metrically conventional patterns. Function words are lexically stressable
# but unstressed by default in verse, so this table overrides the lexicon.
STRESS_EXCEPTIONS: Mapping[str, str] = MappingProxyType({
    # Personal pronouns
    "i": "u",
    "you": "u",
    "he": "u",
    "she": "u",
    "we": "u",
    "they": "u",
    "it": "u",
    "me": "u",
    "him": "u",
    "her": "u",
    "us": "u",
    "them": "u",
    "thee": "u",
    "thou": "u",
    "thy": "u",
    "my": "u",
    "mine": "u",
    "your": "u",
    "his": "u",
    "our": "u",
    "their": "u",
    # Articles and prepositions
    "a": "u",
    "an": "u",
    "the": "u",
    "to": "u",
    "of": "u",
    "in": "u",
    "on": "u",
    "at": "u",
    "by": "u",
    "for": "u",
    "with": "u",
    "from": "u",
    "as": "u",
    "through": "u",
    "than": "u",
    "like": "u",
    # Conjunctions
    "and": "u",
    "but": "u",
    "or": "u",
    "nor": "u",
    "so": "u",
    "yet": "u",
    "that": "u",
    "which": "u",
    "who": "u",
    "whom": "u",
    "whose": "u",
    "if": "u",
    "when": "u",
    "where": "u",
    "while": "u",
    "though": "u",
    "although": "u/",
    "because": "u/",
    # Auxiliaries
    "is": "u",
    "are": "u",
    "was": "u",
    "were": "u",
    "be": "u",
    "been": "u",
    "being": "/u",
    "am": "u",
    "have": "u",
    "has": "u",
    "had": "u",
    "do": "u",
    "does": "u",
    "did": "u",
    "shall": "u",
    "will": "u",
    "would": "u",
    "could": "u",
    "should": "u",
    "may": "u",
    "might": "u",
    "must": "u",
    "can": "u",
    # Question words and negation
    "what": "/",
    "how": "/",
    "why": "/",
    "not": "/",
    "no": "/",
    "none": "/",
    "never": "/u",
    # Monosyllabic content words
    "day": "/",
    "night": "/",
    "light": "/",
    "soft": "/",
    "tell": "/",
    "once": "/",
    "cloud": "/",
    "love": "/",
    "life": "/",
    "death": "/",
    "heart": "/",
    "soul": "/",
    "mind": "/",
    "man": "/",
    "world": "/",
    "time": "/",
    # Two syllables
    "compare": "u/",
    "upon": "u/",
    "about": "u/",
    "above": "u/",
    "across": "u/",
    "after": "/u",
    "again": "u/",
    "against": "u/",
    "along": "u/",
    "among": "u/",
    "around": "u/",
    "away": "u/",
    "before": "u/",
    "behind": "u/",
    "below": "u/",
    "beneath": "u/",
    "beside": "u/",
    "between": "u/",
    "beyond": "u/",
    "over": "/u",
    "under": "/u",
    "into": "/u",
    "onto": "/u",
    "within": "u/",
    "without": "u/",
    "ever": "/u",
    "always": "/u",
    "only": "/u",
    "also": "/u",
    "even": "/u",
    "often": "/u",
    "seldom": "/u",
    "begin": "u/",
    "become": "u/",
    "believe": "u/",
    "belong": "u/",
    "return": "u/",
    "remain": "u/",
    "repeat": "u/",
    "receive": "u/",
    "remove": "u/",
    "reply": "u/",
    "report": "u/",
    "request": "u/",
    "require": "u/",
    "silent": "/u",
    "silence": "/u",
    "moment": "/u",
    "morning": "/u",
    "evening": "/u",
    "water": "/u",
    "father": "/u",
    "mother": "/u",
    "brother": "/u",
    "sister": "/u",
    "daughter": "/u",
    "beauty": "/u",
    "nature": "/u",
    "garden": "/u",
    "window": "/u",
    "shadow": "/u",
    "yellow": "/u",
    "follow": "/u",
    "sorrow": "/u",
    "borrow": "/u",
    "morrow": "/u",
    "narrow": "/u",
    "sometime": "u/",
    "ago": "u/",
    "today": "u/",
    "tonight": "u/",
    "himself": "u/",
    "herself": "u/",
    "itself": "u/",
    "ourselves": "u/",
    "themselves": "u/",
    "slowly": "/u",
    "quickly": "/u",
    "gently": "/u",
    "softly": "/u",
    "darkly": "/u",
    "brightly": "/u",
    "lightly": "/u",
    # Three syllables
    "beautiful": "/uu",
    "wonderful": "/uu",
    "terrible": "/uu",
    "horrible": "/uu",
    "remember": "u/u",
    "forgotten": "u/u",
    "together": "u/u",
    "forever": "u/u",
    "however": "u/u",
    "whatever": "u/u",
    "whenever": "u/u",
    "wherever": "u/u",
    "imagine": "u/u",
    "important": "u/u",
    "tomorrow": "u/u",
    "already": "u/u",
    "another": "u/u",
    "continue": "u/u",
    "suddenly": "/uu",
    "quietly": "/uu",
    "certainly": "/uu",
    # Four syllables and up
    "miserable": "/uuu",
    "desperately": "/uuu",
    "disparately": "/uuu",
    "separately": "/uuu",
    "accurately": "/uuu",
    "fortunately": "/uuu",
    "ultimately": "/uuu",
    "definitely": "/uuu",
    "absolutely": "u/uu",
    "immediately": "u/uuu",
})

# Performed syllable counts for words commonly compressed in verse.
POETIC_SYLLABLE_COUNT: Mapping[str, int] = MappingProxyType({
    # -ering -> -'ring
    "wandering": 2, "wondering": 2, "pondering": 2, "towering": 2,
    "flowering": 2, "showering": 2, "hovering": 2, "quivering": 2,
    "shivering": 2, "wavering": 2, "faltering": 2, "entering": 2,
    "uttering": 2, "muttering": 2, "scattering": 2, "flattering": 2,
    "battering": 2, "chattering": 2, "glittering": 2, "shattering": 2,
    "gathering": 2, "withering": 2, "slithering": 2, "smothering": 2,
    "mothering": 2, "fathering": 2, "bothering": 2, "feathering": 2,
    "tethering": 2, "weathering": 2, "whispering": 2, "blistering": 2,
    "listening": 2, "glistening": 2, "christening": 2, "threatening": 2,
    "reckoning": 2, "beckoning": 2, "happening": 2, "opening": 2,
    "deepening": 2, "ripening": 2, "sharpening": 2, "darkening": 2,
    "wakening": 2, "slackening": 2, "quickening": 2, "thickening": 2,
    "sickening": 2, "blackening": 2, "sweetening": 2,
    "hastening": 2, "fastening": 2,
    "lightening": 2, "frightening": 2, "brightening": 2, "tightening": 2,
    "lengthening": 2, "strengthening": 2,
    # -ery/-ary -> -'ry
    "every": 2, "memory": 2, "history": 2, "victory": 2,
    "mystery": 2, "misery": 2, "slavery": 2, "bravery": 2,
    "archery": 2, "butchery": 2, "cutlery": 2, "battery": 2,
    "flattery": 2, "lottery": 2, "pottery": 2, "watery": 2,
    "knavery": 2, "savagery": 2, "imagery": 2,
    "scenery": 2, "greenery": 2, "machinery": 3, "refinery": 3,
    "marriage": 2, "carriage": 2, "marriageable": 3,
    "spirit": 1, "spirits": 1,
    "natural": 2, "general": 2, "several": 2, "federal": 2, "liberal": 2,
    "different": 2, "difference": 2, "interest": 2, "interested": 3,
    "business": 2, "easiness": 3, "happiness": 3,
    "beautiful": 2, "bountiful": 2, "dutiful": 2, "pitiful": 2,
    "merciful": 2, "plentiful": 2, "fanciful": 2, "peaceful": 2,
    # -ual
    "actual": 2, "mutual": 2, "usual": 2, "casual": 2,
    "gradual": 2, "manual": 2, "annual": 2, "visual": 2,
    # -ious/-eous
    "glorious": 2, "curious": 2, "furious": 2, "serious": 2,
    "various": 2, "previous": 2, "obvious": 2, "envious": 2,
    "tedious": 2, "hideous": 2, "studious": 2,
    # -tion/-ion
    "passion": 2, "fashion": 2, "nation": 2, "station": 2,
    "patient": 2, "ancient": 2,
    "complexion": 2, "possession": 2, "impression": 2, "expression": 2,
    "confession": 2, "profession": 2, "succession": 2, "procession": 2,
    "occasion": 2,
    # -ation
    "alteration": 3, "meditation": 3, "adoration": 3, "admiration": 3,
    "inspiration": 3, "aspiration": 3, "separation": 3, "preparation": 3,
    "declaration": 3, "celebration": 3, "desolation": 3, "observation": 3,
    "compensation": 3, "contemplation": 3, "lamentation": 3, "generation": 3,
    "moderation": 3, "operation": 3, "reputation": 3,
    # -iment/-ement
    "impediments": 3, "impediment": 3,
    "compliments": 2, "compliment": 2,
    "instruments": 2, "instrument": 2,
    "ornament": 2, "ornaments": 2,
    "sacrament": 2, "sacraments": 2,
    "temperament": 3,
})

KNOWN_CONTRACTIONS: Mapping[str, int] = MappingProxyType({
    "o'er": 1,
    "e'er": 1,
    "ne'er": 1,
    "e'en": 1,
    "'tis": 1,
    "'twas": 1,
    "'twill": 1,
    "'gainst": 1,
    "'mongst": 1,
    "t'other": 2,
    "whe'er": 1,
    "whate'er": 2,
    "whoe'er": 2,
    "howe'er": 2,
    "whene'er": 2,
    "where'er": 2,
})

# Exact breakdowns for frequent or awkward words.
SYLLABLE_OVERRIDES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "wandered": ("wan", "dered"),
    "lonely": ("lone", "ly"),
    "slowly": ("slow", "ly"),
    "quickly": ("quick", "ly"),
    "softly": ("soft", "ly"),
    "gently": ("gent", "ly"),
    "quietly": ("qui", "et", "ly"),
    "suddenly": ("sud", "den", "ly"),
    "beautiful": ("beau", "ti", "ful"),
    "wonderful": ("won", "der", "ful"),
    "terrible": ("ter", "ri", "ble"),
    "horrible": ("hor", "ri", "ble"),
    "miserable": ("mis", "er", "a", "ble"),
    "remember": ("re", "mem", "ber"),
    "forgotten": ("for", "got", "ten"),
    "together": ("to", "geth", "er"),
    "forever": ("for", "ev", "er"),
    "however": ("how", "ev", "er"),
    "whatever": ("what", "ev", "er"),
    "whenever": ("when", "ev", "er"),
    "wherever": ("wher", "ev", "er"),
    "compare": ("com", "pare"),
    "summer": ("sum", "mer"),
    "summers": ("sum", "mers"),
    "window": ("win", "dow"),
    "shadow": ("sha", "dow"),
    "yellow": ("yel", "low"),
    "follow": ("fol", "low"),
    "sorrow": ("sor", "row"),
    "borrow": ("bor", "row"),
    "morrow": ("mor", "row"),
    "narrow": ("nar", "row"),
    "fading": ("fad", "ing"),
    "walking": ("walk", "ing"),
    "talking": ("talk", "ing"),
    "thinking": ("think", "ing"),
    "waiting": ("wait", "ing"),
    "deeply": ("deep", "ly"),
    "really": ("real", "ly"),
    "fully": ("ful", "ly"),
    "painfully": ("pain", "ful", "ly"),
    "desperately": ("des", "per", "ate", "ly"),
    "disparately": ("dis", "par", "ate", "ly"),
    "separately": ("sep", "ar", "ate", "ly"),
    "accurately": ("ac", "cur", "ate", "ly"),
    "fortunately": ("for", "tun", "ate", "ly"),
    "ultimately": ("ul", "tim", "ate", "ly"),
    "definitely": ("def", "in", "ite", "ly"),
    "absolutely": ("ab", "so", "lute", "ly"),
    "immediately": ("im", "me", "di", "ate", "ly"),
    "yonder": ("yon", "der"),
    "under": ("un", "der"),
    "over": ("o", "ver"),
    "question": ("ques", "tion"),
    "midnight": ("mid", "night"),
    "dreary": ("drear", "y"),
    "weary": ("wear", "y"),
    "mournful": ("mourn", "ful"),
    "numbers": ("num", "bers"),
    "about": ("a", "bout"),
    "upon": ("u", "pon"),
})

# Monosyllables that strongly prefer to stay weak.
RESIST_STRESS = frozenset({
    "a", "an", "the", "of", "to", "and", "in", "that", "is", "it",
})

# Monosyllables that strongly prefer to stay strong.
RESIST_UNSTRESS = frozenset({
    "love", "death", "life", "time", "world", "heart", "soul", "mind",
    "god", "man", "night", "day", "light", "dark", "war", "peace",
})

# Order matters only for ties: the earlier entry wins.
STANDARD_METERS: Tuple[StandardMeter, ...] = (
    StandardMeter("u/u/u/u/u/", "iambic pentameter", 0.9),
    StandardMeter("u/u/u/u/", "iambic tetrameter", 0.9),
    StandardMeter("u/u/u/", "iambic trimeter", 0.9),
    StandardMeter("u/u/u/u/u/u/", "iambic hexameter", 0.9),
    StandardMeter("/u/u/u/u", "trochaic tetrameter", 0.9),
    StandardMeter("/u/u/u/u/u", "trochaic pentameter", 0.9),
    StandardMeter("/u/u/u", "trochaic trimeter", 0.9),
    StandardMeter("/u/u/u/", "trochaic tetrameter catalectic", 0.9),
    StandardMeter("uu/uu/uu/uu/", "anapestic tetrameter", 0.85),
    StandardMeter("uu/uu/uu/", "anapestic trimeter", 0.85),
    StandardMeter("/uu/uu/uu/uu/uu/u", "dactylic hexameter", 0.8),
    StandardMeter("/uu/uu/uu/uu", "dactylic tetrameter", 0.85),
    StandardMeter("u/u/u/u/", "common meter (long)", 0.9),
    StandardMeter("u/u/u/", "common meter (short)", 0.9),
)

# Canonical line used by the pentameter bonus.
IAMBIC_PENTAMETER = STANDARD_METERS[0].pattern
