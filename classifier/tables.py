"""Read-only pattern and keyword tables for the question classifier.

Every classifier rule lives here as data: regex groups with a weight and a
label, keyword lists per category, tag vocabularies and question templates.
`build_tables()` compiles them into a single immutable `ClassifierTables`
value which callers construct once and pass to each component.

Order matters in several tables and is part of the contract:
- `CATEGORY_DEFINITIONS` order is the tie-break priority for equal scores.
- `INTENT_GROUPS` order decides indicator order and which group wins when
  two matched groups share the highest weight (first one).
- `AGE_BUCKETS`, `URGENT_KEYWORDS` and templates are scanned first-match-wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from shared.types import Category, IntentType


@dataclass(frozen=True)
class PatternGroup:
    """A weighted regex rule.

    Attributes:
        pattern: Compiled regex, matched against lower-cased text.
        weight: Score contributed per occurrence (or per match, depending
            on the consumer).
        label: Short human-readable description, surfaced as an indicator.
        intent_type: Intent label this group signals, if any.
    """

    pattern: re.Pattern[str]
    weight: float
    label: str
    intent_type: IntentType | None = None

    def count(self, text: str) -> int:
        """Number of non-overlapping occurrences in text."""
        return sum(1 for _ in self.pattern.finditer(text))


@dataclass(frozen=True)
class CategoryDefinition:
    """Scoring rules for a single taxonomy category."""

    name: Category
    keywords: tuple[str, ...]
    patterns: tuple[re.Pattern[str], ...]
    weight: float
    description: str
    semantic_groups: tuple[PatternGroup, ...] = ()
    keyword_patterns: tuple[re.Pattern[str], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        compiled = tuple(
            re.compile(rf"\b{re.escape(keyword.lower())}\b") for keyword in self.keywords
        )
        object.__setattr__(self, "keyword_patterns", compiled)


@dataclass(frozen=True)
class IntentBoost:
    """Semantic score bonus for categories when a given intent is detected."""

    intent_type: IntentType
    categories: frozenset[Category]
    boost: float


@dataclass(frozen=True)
class QuestionTemplate:
    """Structured question form suggested when its pattern matches."""

    name: str
    category: Category
    pattern: re.Pattern[str]
    fields: tuple[str, ...]


@dataclass(frozen=True)
class ClassifierTables:
    """Immutable bundle of every table the classifier components read."""

    intent_groups: tuple[PatternGroup, ...]
    exclusion_groups: tuple[PatternGroup, ...]
    categories: tuple[CategoryDefinition, ...]
    intent_boosts: tuple[IntentBoost, ...]
    intent_contexts: Mapping[IntentType, str]
    breeds: tuple[str, ...]
    age_buckets: tuple[tuple[str, tuple[str, ...]], ...]
    urgent_keywords: tuple[str, ...]
    category_tags: Mapping[Category, tuple[str, ...]]
    context_keywords: tuple[str, ...]
    templates: tuple[QuestionTemplate, ...]

    def category(self, name: Category | str) -> CategoryDefinition:
        """Look up a category definition by name.

        Raises:
            KeyError: If the category is not part of the taxonomy.
        """
        for definition in self.categories:
            if definition.name == name:
                return definition
        raise KeyError(name)

    def priority(self, name: Category) -> int:
        """Tie-break rank of a category (lower wins)."""
        return [definition.name for definition in self.categories].index(name)


# =============================================================================
# Intent detection
# =============================================================================

# (regex, weight, intent type, label)
INTENT_GROUPS = (
    (r"\b(what|when|where|why|how|who|which)\b", 0.9, IntentType.interrogative, "question word"),
    (r"\b(urgent|emergency|immediately|asap|critical|serious)\b", 0.85, IntentType.urgent_request, "urgency indicator"),
    (r"\b(help|advice|suggest|recommend|tips?|guidance)\b", 0.8, IntentType.help_request, "help request"),
    (r"\b(should i|can i|will this|is this|would it|could i)\b", 0.8, IntentType.seeking_guidance, "seeking guidance"),
    (r"\b(need|want|looking for|seeking|require)\b", 0.75, IntentType.need_statement, "need statement"),
    (r"\b(best|better|compare|vs|versus|which is|top|recommended)\b", 0.7, IntentType.comparison_request, "comparison query"),
    (r"\b(brands?|types?|options?|varieties|choices|alternatives)\b", 0.6, IntentType.selection_query, "selection query"),
    (r"\b(near me|nearby|contact|address|location|phone|clinic|hospital)\b", 0.7, IntentType.location_query, "location query"),
    (
        r"\b(mumbai|delhi|bangalore|chennai|pune|hyderabad|ahmedabad|kolkata|gurgaon|noida|in india)\b",
        0.6,
        IntentType.location_query,
        "Indian city",
    ),
    (
        r"\b(anyone tried|reviews?|feedback|opinions?|experience|worth it|good idea)\b",
        0.65,
        IntentType.experience_request,
        "experience request",
    ),
    (r"\b(safe|works?|effective|reliable|trustworthy|legit)\b", 0.55, IntentType.validation_seeking, "validation seeking"),
    (r"\b(problem|issue|trouble|struggling|difficulty|confused|stuck)\b", 0.6, IntentType.problem_statement, "problem statement"),
    (r"\b(not working|doesn't work|won't|isn't|can't)\b", 0.55, IntentType.malfunction, "malfunction"),
    (r"\b(my dog|dog is|dog has|dog won't|dog doesn't|puppy is)\b", 0.7, IntentType.pet_issue, "pet issue"),
    (
        r"\b(kya|kaise|kyun|kahan|kab|kaun|kya karna|batao|suggest karo)\b",
        0.8,
        IntentType.hinglish_question,
        "Hinglish question",
    ),
    (r"\b(chahiye|hona chahiye|karna chahiye|milega|kaise kare)\b", 0.75, IntentType.hinglish_need, "Hinglish need"),
    (
        r"\b(bhaiya|sir|doctor sahab|veterinary wala|clinic main|hospital main)\b",
        0.6,
        IntentType.indian_cultural,
        "Indian context",
    ),
    (r"\b(koi|kuch|achha|samjho|pata hai|malum hai)\b", 0.5, IntentType.hinglish_misc, "Hinglish misc"),
)

EXCLUSION_WEIGHT = 0.3

# (regex, label)
EXCLUSION_GROUPS = (
    (r"\b(thank you|thanks|grateful|appreciate|great job|well done)\b", "gratitude"),
    (r"\b(here is|here are|sharing|update|announcement|fyi|just to inform)\b", "announcement"),
    (r"\b(congratulations|congrats|happy birthday|celebration|hooray|yay)\b", "celebration"),
    (r"\b(i am|i was|i have been|yesterday i|today i|this morning)\b", "statement of fact"),
)


# =============================================================================
# Category taxonomy
# =============================================================================

CATEGORY_DEFINITIONS = (
    {
        "name": Category.health,
        "description": "Health-related query detected",
        "weight": 1.0,
        "keywords": (
            "sick", "illness", "disease", "symptom", "vet", "veterinarian", "medicine", "medication",
            "injury", "wound", "infection", "fever", "vomiting", "diarrhea", "appetite", "eating",
            "drinking", "urination", "breathing", "cough", "sneeze", "limping", "swelling",
            "vaccine", "vaccination", "checkup", "examination", "treatment", "surgery", "pain",
            "weight loss", "weight gain", "lethargy", "energy", "sleep", "rash", "itching", "scratching",
        ),
        "patterns": (
            r"(?:my|our) dog (?:is|seems|looks) sick",
            r"dog (?:won't|can't|doesn't) eat",
            r"(?:strange|weird|unusual) behavior",
            r"vet(?:erinarian)? (?:visit|appointment|recommend)",
        ),
        "semantic": (
            (r"\b(sick|illness|symptoms|vet|medical|treatment|medication|disease|infection|pain|injury)\b", 0.3, "medical terms"),
            (r"\b(not eating|vomiting|diarrhea|limping|breathing|temperature|fever|swelling)\b", 0.4, "symptoms"),
            (r"\b(emergency|urgent|serious|worried|concerned)\b", 0.2, "concern"),
        ),
    },
    {
        "name": Category.behavior,
        "description": "Behavioral concern identified",
        "weight": 1.0,
        "keywords": (
            "behavior", "training", "aggression", "aggressive", "biting", "barking", "howling",
            "jumping", "pulling", "leash", "walk", "obedience", "commands", "sit", "stay",
            "come", "heel", "house training", "potty", "toilet", "discipline", "punishment",
            "reward", "treat", "positive reinforcement", "socialization", "fearful", "anxiety",
            "separation anxiety", "destructive", "chewing", "digging", "escape", "running away",
        ),
        "patterns": (
            r"dog (?:is|being) (?:aggressive|naughty|destructive)",
            r"(?:train|teach) (?:my|our) dog",
            r"dog (?:won't|doesn't) (?:listen|obey)",
            r"barking (?:too much|excessively|constantly)",
        ),
        "semantic": (
            (r"\b(aggressive|barking|biting|jumping|pulling|destructive|anxiety|fearful)\b", 0.3, "problem behavior"),
            (r"\b(training|obedience|commands|socialization|calm|reactive)\b", 0.4, "behavior training"),
            (r"\b(won't listen|doesn't come|ignores|stubborn|difficult)\b", 0.3, "non-compliance"),
        ),
    },
    {
        "name": Category.food,
        "description": "Nutrition or feeding topic detected",
        "weight": 1.0,
        "keywords": (
            "food", "feeding", "diet", "nutrition", "kibble", "wet food", "dry food", "treats",
            "snacks", "homemade", "raw diet", "barf", "portion", "amount", "frequency",
            "meal", "breakfast", "dinner", "lunch", "hungry", "appetite", "picky eater",
            "allergies", "food allergy", "ingredient", "protein", "grain free", "organic",
            "supplements", "vitamins", "calcium", "overweight", "underweight", "puppy food",
            "senior food", "digestive", "sensitive stomach",
        ),
        "patterns": (
            r"(?:what|how) (?:to|should) (?:feed|give)",
            r"dog (?:food|diet|nutrition)",
            r"(?:recommend|suggest) food",
            r"(?:best|good) food for",
        ),
        "semantic": (
            (r"\b(food|diet|eating|nutrition|meal|treats|appetite|weight|hungry)\b", 0.3, "feeding terms"),
            (r"\b(won't eat|picky eater|allergies|overweight|underweight|portion)\b", 0.4, "feeding problems"),
            (r"\b(brand|recipe|homemade|raw diet|kibble|wet food)\b", 0.2, "food choices"),
        ),
    },
    {
        "name": Category.training,
        "description": "Training or learning request identified",
        "weight": 1.0,
        "keywords": (
            "training", "train", "teach", "learn", "command", "trick", "obedience", "puppy training",
            "basic training", "advanced training", "agility", "competition", "show dog", "trainer",
            "class", "school", "session", "practice", "exercise", "mental stimulation",
            "puzzle", "game", "activity", "socialization", "puppy socialization", "dog park",
            "meet other dogs", "confidence", "fearful", "shy", "timid", "bold", "energetic",
        ),
        "patterns": (
            r"(?:training|teach|learn) (?:tips|advice|help)",
            r"(?:how to|ways to) train",
            r"dog training (?:class|program|method)",
            r"(?:puppy|basic|advanced) training",
        ),
        "semantic": (
            (r"\b(teach|learn|command|trick|housebreak|potty|leash|walk)\b", 0.3, "teaching"),
            (r"\b(puppy training|basic commands|house training|crate training)\b", 0.4, "training programs"),
            (r"\b(how to train|training tips|methods|techniques)\b", 0.3, "training methods"),
        ),
    },
    {
        "name": Category.local,
        "description": "Location-specific question detected",
        "weight": 1.0,
        "keywords": (
            "local", "nearby", "area", "city", "location", "mumbai", "delhi", "bangalore", "kolkata",
            "pune", "hyderabad", "chennai", "ahmedabad", "jaipur", "lucknow", "kanpur", "nagpur",
            "indore", "thane", "bhopal", "visakhapatnam", "pimpri", "patna", "vadodara", "ghaziabad",
            "ludhiana", "agra", "nashik", "faridabad", "meerut", "rajkot", "kalyan", "vasai",
            "varanasi", "srinagar", "aurangabad", "dhanbad", "amritsar", "navi mumbai", "allahabad",
            "ranchi", "howrah", "coimbatore", "jabalpur", "gwalior", "vijayawada", "jodhpur",
            "madurai", "raipur", "kota", "guwahati", "chandigarh", "solapur", "hubballi", "tiruchirappalli",
            "bareilly", "mysuru", "tiruppur", "gurgaon", "aligarh", "jalandhar", "bhubaneswar",
            "salem", "warangal", "guntur", "bhiwandi", "saharanpur", "gorakhpur", "bikaner", "amravati",
        ),
        "patterns": (
            r"(?:in|near|around) (?:mumbai|delhi|bangalore|pune|hyderabad)",
            r"(?:local|nearby) (?:vet|trainer|groomer|pet store)",
            r"(?:best|good) (?:vet|trainer) in",
            r"(?:where|which) (?:city|area|location)",
        ),
        "semantic": (),
    },
    {
        "name": Category.general,
        "description": "General pet care question",
        "weight": 0.5,
        "keywords": (
            "general", "advice", "tip", "help", "question", "doubt", "confusion", "beginner",
            "new dog owner", "first time", "puppy owner", "adopt", "adoption", "rescue",
            "breed", "choosing", "selection", "comparison", "personality", "temperament",
            "size", "apartment", "family", "children", "kids", "elderly", "senior citizen",
            "experience", "lifestyle", "time", "commitment", "responsibility", "cost", "budget",
        ),
        "patterns": (
            r"(?:new|first time) dog owner",
            r"(?:thinking|planning) (?:to|of) (?:get|adopt)",
            r"(?:which|what) breed",
            r"general (?:advice|question|help)",
        ),
        "semantic": (),
    },
)

SEMANTIC_SCORE_CAP = 0.8

# (intent type, boosted categories, boost)
INTENT_BOOSTS = (
    (IntentType.problem_statement, (Category.health, Category.behavior), 0.2),
    (IntentType.help_request, (Category.training, Category.food), 0.15),
)

INTENT_CONTEXTS = {
    IntentType.problem_statement: "problem requiring help",
    IntentType.help_request: "direct help request",
    IntentType.seeking_guidance: "guidance needed",
}
DEFAULT_INTENT_CONTEXT = "question detected"


# =============================================================================
# Tags
# =============================================================================

BREEDS = (
    "golden retriever", "labrador", "german shepherd", "poodle", "bulldog", "beagle",
    "rottweiler", "siberian husky", "boxer", "dachshund", "cocker spaniel", "border collie",
    "shih tzu", "pomeranian", "yorkshire terrier", "chihuahua", "great dane", "doberman",
    "indian pariah", "rajapalayam", "chippiparai", "kombai", "kanni", "rampur hound",
)

AGE_BUCKETS = (
    ("puppy", ("puppy", "puppies", "young dog", "8 weeks", "12 weeks", "4 months", "6 months")),
    ("adult", ("adult dog", "mature dog", "1 year", "2 years", "3 years")),
    ("senior", ("senior dog", "old dog", "elderly dog", "7 years", "8 years", "10 years")),
)

URGENT_KEYWORDS = ("urgent", "emergency", "help", "asap", "immediately", "serious")

CATEGORY_TAGS = {
    Category.health: ("medical", "symptoms", "diagnosis", "treatment"),
    Category.behavior: ("training-needed", "behavioral-issue", "socialization"),
    Category.food: ("nutrition", "diet-advice", "food-recommendation"),
    Category.training: ("obedience", "tricks", "commands", "puppy-training"),
    Category.local: ("location-specific", "service-recommendation"),
    Category.general: ("advice-needed", "beginner-friendly"),
}


# =============================================================================
# Quality and templates
# =============================================================================

CONTEXT_KEYWORDS = ("age", "breed", "symptoms", "duration", "when", "how long")

# (category, name, regex, fields)
QUESTION_TEMPLATES = (
    (
        Category.health,
        "symptom_check",
        r"(?:symptom|sick|not feeling well)",
        ("symptoms", "duration", "severity", "dog_age", "breed"),
    ),
    (
        Category.health,
        "medication",
        r"(?:medicine|medication|drug)",
        ("medication_name", "dosage", "duration", "side_effects"),
    ),
    (
        Category.behavior,
        "training_issue",
        r"(?:won't listen|doesn't obey|misbehaving)",
        ("behavior_description", "frequency", "triggers", "training_attempted"),
    ),
    (
        Category.behavior,
        "aggression",
        r"(?:aggressive|biting|attacking)",
        ("aggression_triggers", "severity", "target", "safety_concerns"),
    ),
)


def _build_category(entry: dict) -> CategoryDefinition:
    return CategoryDefinition(
        name=entry["name"],
        keywords=tuple(entry["keywords"]),
        patterns=tuple(re.compile(p, re.IGNORECASE) for p in entry["patterns"]),
        weight=entry["weight"],
        description=entry["description"],
        semantic_groups=tuple(
            PatternGroup(pattern=re.compile(p), weight=score, label=label)
            for p, score, label in entry["semantic"]
        ),
    )


def build_tables() -> ClassifierTables:
    """Compile the built-in tables into an immutable ClassifierTables.

    Call once at startup and share the result; it holds no per-call state.
    """
    return ClassifierTables(
        intent_groups=tuple(
            PatternGroup(
                pattern=re.compile(p, re.IGNORECASE),
                weight=weight,
                label=label,
                intent_type=intent_type,
            )
            for p, weight, intent_type, label in INTENT_GROUPS
        ),
        exclusion_groups=tuple(
            PatternGroup(pattern=re.compile(p, re.IGNORECASE), weight=EXCLUSION_WEIGHT, label=label)
            for p, label in EXCLUSION_GROUPS
        ),
        categories=tuple(_build_category(entry) for entry in CATEGORY_DEFINITIONS),
        intent_boosts=tuple(
            IntentBoost(intent_type=intent_type, categories=frozenset(categories), boost=boost)
            for intent_type, categories, boost in INTENT_BOOSTS
        ),
        intent_contexts=MappingProxyType(dict(INTENT_CONTEXTS)),
        breeds=BREEDS,
        age_buckets=AGE_BUCKETS,
        urgent_keywords=URGENT_KEYWORDS,
        category_tags=MappingProxyType(dict(CATEGORY_TAGS)),
        context_keywords=CONTEXT_KEYWORDS,
        templates=tuple(
            QuestionTemplate(
                name=name,
                category=category,
                pattern=re.compile(p, re.IGNORECASE),
                fields=fields,
            )
            for category, name, p, fields in QUESTION_TEMPLATES
        ),
    )
