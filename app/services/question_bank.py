"""
Fixed 40-question learning style assessment bank
Theme: "Ancient Civilizations" - 10 questions per modality
"""
from typing import Any, Dict, List

from app.services.classifier import VISUAL, AUDITORY, READING_WRITING, KINESTHETIC

MULTIPLE_CHOICE = "multiple_choice"
MATCHING = "matching"


def _mcq(q_id: int, style: str, question: str, options: List[str], correct: int) -> Dict[str, Any]:
    return {
        "id": q_id,
        "type": MULTIPLE_CHOICE,
        "style": style,
        "question": question,
        "options": options,
        "correct": correct,
    }


def _matching(q_id: int, question: str, pairs: List[tuple]) -> Dict[str, Any]:
    # A left item matches the right item carrying the same pair id
    return {
        "id": q_id,
        "type": MATCHING,
        "style": KINESTHETIC,
        "question": question,
        "pairs": [{"id": pair_id, "left": left, "right": right} for pair_id, left, right in pairs],
    }


QUESTIONS: List[Dict[str, Any]] = [
    # Visual (1-10)
    _mcq(1, VISUAL, "Look at this pyramid structure. Which civilization built it?", ["Egyptian", "Mayan", "Aztec", "Incan"], 0),
    _mcq(2, VISUAL, "Observe this hieroglyphic pattern. What does it represent?", ["Numbers", "Gods", "Seasons", "Trade routes"], 1),
    _mcq(3, VISUAL, "Study this map showing ancient trade routes. Which continent is highlighted?", ["Africa", "Asia", "Europe", "Americas"], 1),
    _mcq(4, VISUAL, "Look at the architectural columns. Which style is this?", ["Doric", "Ionic", "Corinthian", "Composite"], 2),
    _mcq(5, VISUAL, "Examine this ancient coin. Which emperor is depicted?", ["Julius Caesar", "Augustus", "Nero", "Constantine"], 1),
    _mcq(6, VISUAL, "View this irrigation system diagram. Which civilization created it?", ["Mesopotamian", "Egyptian", "Roman", "Chinese"], 0),
    _mcq(7, VISUAL, "Look at this color-coded timeline. When did the Bronze Age begin?", ["3300 BCE", "2000 BCE", "1200 BCE", "800 BCE"], 0),
    _mcq(8, VISUAL, "Study this pottery design. Which culture is it from?", ["Greek", "Roman", "Persian", "Phoenician"], 0),
    _mcq(9, VISUAL, "Observe this temple layout. Which religion is it associated with?", ["Buddhism", "Hinduism", "Judaism", "Zoroastrianism"], 1),
    _mcq(10, VISUAL, "Look at this ancient writing system. What is it called?", ["Cuneiform", "Hieroglyphics", "Sanskrit", "Linear B"], 0),

    # Auditory (11-20)
    _mcq(11, AUDITORY, "Listen to this description: 'A civilization known for democracy and philosophy.' Which is it?", ["Greek", "Roman", "Persian", "Chinese"], 0),
    _mcq(12, AUDITORY, "Hear the narrative: 'They built the Great Wall.' Who are they?", ["Japanese", "Mongols", "Chinese", "Koreans"], 2),
    _mcq(13, AUDITORY, "Audio: 'Famous for their calendar system and astronomy.' Which civilization?", ["Mayan", "Incan", "Aztec", "Olmec"], 0),
    _mcq(14, AUDITORY, "Listen: 'Empire that stretched from Spain to India.' Which one?", ["Roman", "Persian", "Ottoman", "Mongol"], 1),
    _mcq(15, AUDITORY, "Hear: 'Invented paper and gunpowder.' Which civilization?", ["Indian", "Chinese", "Arab", "Japanese"], 1),
    _mcq(16, AUDITORY, "Audio clip: 'Built Machu Picchu.' Who built it?", ["Mayan", "Aztec", "Incan", "Olmec"], 2),
    _mcq(17, AUDITORY, "Listen: 'Known for gladiators and aqueducts.' Which empire?", ["Greek", "Roman", "Byzantine", "Persian"], 1),
    _mcq(18, AUDITORY, "Hear: 'Developed the first writing system.' Who were they?", ["Sumerians", "Egyptians", "Phoenicians", "Hebrews"], 0),
    _mcq(19, AUDITORY, "Audio: 'Famous for their library in Alexandria.' Which civilization?", ["Greek", "Roman", "Egyptian", "Persian"], 2),
    _mcq(20, AUDITORY, "Listen: 'Created the alphabet used today.' Who were they?", ["Greeks", "Romans", "Phoenicians", "Egyptians"], 2),

    # Reading/Writing (21-30)
    _mcq(21, READING_WRITING, "Read: 'The Code of Hammurabi established laws.' Where was it from?", ["Babylon", "Egypt", "Greece", "Rome"], 0),
    _mcq(22, READING_WRITING, "Text: 'The Rosetta Stone helped decipher which language?'", ["Cuneiform", "Hieroglyphics", "Sanskrit", "Latin"], 1),
    _mcq(23, READING_WRITING, "Read: 'Homer wrote the Iliad and Odyssey.' Which culture?", ["Greek", "Roman", "Persian", "Egyptian"], 0),
    _mcq(24, READING_WRITING, "Text: 'The Silk Road connected East and West.' Who initiated it?", ["Romans", "Persians", "Chinese", "Indians"], 2),
    _mcq(25, READING_WRITING, "Read: 'Democracy originated in Athens.' When approximately?", ["750 BCE", "508 BCE", "300 BCE", "100 BCE"], 1),
    _mcq(26, READING_WRITING, "Text: 'The Phoenicians spread their alphabet.' To which region?", ["Asia", "Africa", "Mediterranean", "Americas"], 2),
    _mcq(27, READING_WRITING, "Read: 'Confucius taught philosophy in China.' During which period?", ["Tang Dynasty", "Han Dynasty", "Zhou Dynasty", "Qin Dynasty"], 2),
    _mcq(28, READING_WRITING, "Text: 'The Vedas are ancient sacred texts.' From which religion?", ["Buddhism", "Hinduism", "Jainism", "Sikhism"], 1),
    _mcq(29, READING_WRITING, "Read: 'Alexander the Great conquered Persia.' When?", ["450 BCE", "356 BCE", "330 BCE", "200 BCE"], 2),
    _mcq(30, READING_WRITING, "Text: 'The Parthenon was dedicated to Athena.' In which city?", ["Sparta", "Athens", "Corinth", "Thebes"], 1),

    # Kinesthetic (31-40): drag each item onto its match
    _matching(31, "Match each monument to the civilization that built it.", [
        ("pyramids", "Great Pyramid of Giza", "Egyptians"),
        ("colosseum", "Colosseum", "Romans"),
        ("machu-picchu", "Machu Picchu", "Incas"),
    ]),
    _matching(32, "Match each tool to the craft it was used for.", [
        ("chisel", "Chisel", "Sculpting marble"),
        ("stylus", "Stylus", "Writing on clay tablets"),
        ("loom", "Loom", "Weaving cloth"),
    ]),
    _matching(33, "Match each navigation aid to what it helped sailors do.", [
        ("north-star", "North Star", "Find north at night"),
        ("rudder", "Rudder", "Steer the ship"),
        ("sail", "Sail", "Catch the wind"),
    ]),
    _matching(34, "Match each farm animal to its job in ancient agriculture.", [
        ("ox", "Ox", "Pulling the plow"),
        ("donkey", "Donkey", "Carrying loads to market"),
        ("sheep", "Sheep", "Providing wool"),
    ]),
    _matching(35, "Match each writing system to its civilization.", [
        ("cuneiform", "Cuneiform", "Sumerians"),
        ("hieroglyphs", "Hieroglyphs", "Egyptians"),
        ("linear-b", "Linear B", "Mycenaeans"),
    ]),
    _matching(36, "Match each Roman military term to its meaning.", [
        ("testudo", "Testudo", "Shield-covered formation"),
        ("legion", "Legion", "Main army unit"),
        ("centurion", "Centurion", "Officer commanding a century"),
    ]),
    _matching(37, "Match each engineering principle to the structure that relied on it.", [
        ("gravity", "Gravity", "Aqueduct"),
        ("arch", "Arch", "Bridge"),
        ("lever", "Lever", "Shaduf water lift"),
    ]),
    _matching(38, "Match each pottery step to what you do with your hands.", [
        ("wedging", "Wedging", "Knead the clay to remove air"),
        ("centering", "Centering", "Press the clay to the wheel's middle"),
        ("pulling", "Pulling", "Draw the walls upward"),
    ]),
    _matching(39, "Match each trade good to where it came from on the Silk Road.", [
        ("silk", "Silk", "China"),
        ("spices", "Spices", "India"),
        ("glassware", "Glassware", "Rome"),
    ]),
    _matching(40, "Match each ancient game to its origin.", [
        ("senet", "Senet", "Egypt"),
        ("royal-game", "Royal Game of Ur", "Mesopotamia"),
        ("go", "Go", "China"),
    ]),
]

TOTAL_QUESTIONS = len(QUESTIONS)


def question_at(index: int) -> Dict[str, Any]:
    return QUESTIONS[index]


def public_view(question: Dict[str, Any]) -> Dict[str, Any]:
    """
    Question as shown to the learner: no correct index, and the right-hand
    matching items listed in an order that does not reveal the pairing
    """
    view = {
        "id": question["id"],
        "type": question["type"],
        "style": question["style"],
        "question": question["question"],
    }
    if question["type"] == MULTIPLE_CHOICE:
        view["options"] = list(question["options"])
    else:
        pairs = question["pairs"]
        view["left_items"] = [{"id": p["id"], "text": p["left"]} for p in pairs]
        view["right_items"] = sorted(
            ({"id": p["id"], "text": p["right"]} for p in pairs),
            key=lambda item: item["text"],
        )
    return view
