"""
Learning style classification
Maps per-modality correct-answer counts to one dominant learning style
"""
import logging
from dataclasses import dataclass
from typing import Dict, Tuple

logger = logging.getLogger(__name__)


VISUAL = "visual"
AUDITORY = "auditory"
READING_WRITING = "reading_writing"
KINESTHETIC = "kinesthetic"

# Tie-break order: on equal scores the earliest style wins
STYLE_PRIORITY: Tuple[str, ...] = (VISUAL, AUDITORY, READING_WRITING, KINESTHETIC)

BEGINNER = "beginner"
INTERMEDIATE = "intermediate"
ADVANCED = "advanced"


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one set of scores"""
    dominant_style: str
    max_score: int
    second_highest: int
    dominance_percentage: float


class LearningStyleClassifier:
    """
    Decision logic for the learning style assessment

    - Dominant style: highest score, ties resolved by STYLE_PRIORITY
    - Dominance margin: lead of the top score over the runner-up, informational only
    - Quiz level: age tier, independent of the scores
    """

    BEGINNER_MAX_AGE = 13  # age < 14
    ADVANCED_MIN_AGE = 20

    def classify(self, visual: int, auditory: int, reading_writing: int, kinesthetic: int) -> str:
        """
        Return the dominant learning style

        Raises:
            ValueError: if any score is negative
        """
        scores = self._as_mapping(visual, auditory, reading_writing, kinesthetic)

        dominant_style = STYLE_PRIORITY[0]
        max_score = scores[dominant_style]
        for style in STYLE_PRIORITY[1:]:
            # Strictly greater: an equal score never displaces an earlier style
            if scores[style] > max_score:
                dominant_style = style
                max_score = scores[style]

        return dominant_style

    def dominance_percentage(self, visual: int, auditory: int, reading_writing: int, kinesthetic: int) -> float:
        """Lead of the top score over the second highest, as a percentage of the top score"""
        scores = self._as_mapping(visual, auditory, reading_writing, kinesthetic)
        max_score, second_highest = self._top_two(scores)
        return self._margin(max_score, second_highest)

    def evaluate(self, visual: int, auditory: int, reading_writing: int, kinesthetic: int) -> Classification:
        """Classify and compute the dominance margin in one pass"""
        dominant_style = self.classify(visual, auditory, reading_writing, kinesthetic)
        scores = self._as_mapping(visual, auditory, reading_writing, kinesthetic)
        max_score, second_highest = self._top_two(scores)
        margin = self._margin(max_score, second_highest)

        logger.debug(f"Dominant style: {dominant_style} with {margin:.1f}% lead")

        return Classification(
            dominant_style=dominant_style,
            max_score=max_score,
            second_highest=second_highest,
            dominance_percentage=margin,
        )

    def quiz_level(self, age: int) -> str:
        """Map an age to the beginner / intermediate / advanced tier"""
        if age <= self.BEGINNER_MAX_AGE:
            return BEGINNER
        if age >= self.ADVANCED_MIN_AGE:
            return ADVANCED
        return INTERMEDIATE

    def _as_mapping(self, visual: int, auditory: int, reading_writing: int, kinesthetic: int) -> Dict[str, int]:
        scores = {
            VISUAL: visual,
            AUDITORY: auditory,
            READING_WRITING: reading_writing,
            KINESTHETIC: kinesthetic,
        }
        negative = [style for style, score in scores.items() if score < 0]
        if negative:
            raise ValueError(f"Scores must be non-negative, got negative values for: {', '.join(negative)}")
        return scores

    def _top_two(self, scores: Dict[str, int]) -> Tuple[int, int]:
        ordered = sorted(scores.values(), reverse=True)
        return ordered[0], ordered[1]

    def _margin(self, max_score: int, second_highest: int) -> float:
        if max_score == 0:
            return 0.0
        return round((max_score - second_highest) / max_score * 100, 1)


# Global instance
classifier = LearningStyleClassifier()
