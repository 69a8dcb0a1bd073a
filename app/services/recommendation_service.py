"""
Recommendation engine
Keyword frequency over the user's study materials combined with static
per-learning-style tables
"""
import logging
import re
from collections import Counter
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from app.config import settings
from app.models import StudyMaterial, UserProfile
from app.services.classifier import VISUAL, AUDITORY, READING_WRITING, KINESTHETIC
from app.utils.cache import cache_service

logger = logging.getLogger(__name__)


STOP_WORDS = frozenset("""
    the a an is are was were be been being have has had do does did will would could
    should may might must shall can need dare ought used to of in for on with at by
    from as into through during before after above below between under again further
    then once here there when where why how all each few more most other some such no
    nor not only own same so than too very just and but if or because until while
    this that these those it its they them their what which who whom
""".split())

MAX_KEYWORDS = 10
MAX_DOMINANT_TOPICS = 5

LEARNING_PATHS: Dict[str, List[Dict[str, str]]] = {
    VISUAL: [
        {"id": "v1", "title": "Watch Introductory Videos", "description": "Start with visual explanations and diagrams", "level": "basic", "icon": "🎬"},
        {"id": "v2", "title": "Create Mind Maps", "description": "Organize concepts visually with connections", "level": "intermediate", "icon": "🗺️"},
        {"id": "v3", "title": "Design Infographics", "description": "Summarize knowledge in visual formats", "level": "advanced", "icon": "📊"},
    ],
    AUDITORY: [
        {"id": "a1", "title": "Listen to Podcasts", "description": "Start with audio explanations and lectures", "level": "basic", "icon": "🎧"},
        {"id": "a2", "title": "Join Study Groups", "description": "Discuss concepts with peers verbally", "level": "intermediate", "icon": "👥"},
        {"id": "a3", "title": "Record & Teach", "description": "Create your own audio explanations", "level": "advanced", "icon": "🎙️"},
    ],
    READING_WRITING: [
        {"id": "r1", "title": "Read Core Materials", "description": "Start with textbooks and articles", "level": "basic", "icon": "📚"},
        {"id": "r2", "title": "Take Detailed Notes", "description": "Summarize and rewrite in your words", "level": "intermediate", "icon": "📝"},
        {"id": "r3", "title": "Write Essays & Guides", "description": "Create comprehensive study guides", "level": "advanced", "icon": "✍️"},
    ],
    KINESTHETIC: [
        {"id": "k1", "title": "Try Hands-On Experiments", "description": "Start with practical exercises", "level": "basic", "icon": "🔬"},
        {"id": "k2", "title": "Build Projects", "description": "Apply knowledge through real projects", "level": "intermediate", "icon": "🛠️"},
        {"id": "k3", "title": "Teach Through Demos", "description": "Demonstrate concepts to others", "level": "advanced", "icon": "🎯"},
    ],
}

YOUTUBE_QUERIES: Dict[str, List[str]] = {
    VISUAL: ["visual learning techniques", "diagram tutorials", "infographic study"],
    AUDITORY: ["study podcasts", "lecture recordings", "audio learning tips"],
    READING_WRITING: ["note taking methods", "study guide creation", "reading strategies"],
    KINESTHETIC: ["hands-on learning", "practical experiments", "interactive tutorials"],
}

STYLE_TOPICS: Dict[str, Dict[str, str]] = {
    VISUAL: {"topic": "Data Visualization", "reason": "Perfect for visual learners", "icon": "📊"},
    AUDITORY: {"topic": "Public Speaking", "reason": "Enhance your verbal skills", "icon": "🎤"},
    READING_WRITING: {"topic": "Academic Writing", "reason": "Improve your written expression", "icon": "✍️"},
    KINESTHETIC: {"topic": "Laboratory Skills", "reason": "Hands-on practical experience", "icon": "🧪"},
}

GENERAL_TOPIC = {"topic": "Study Techniques", "reason": "Boost your learning efficiency", "icon": "🧠"}


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> List[str]:
    """
    Most frequent meaningful words in the text

    Words of 3 characters or fewer and stop words are ignored; ties keep
    the order of first appearance.
    """
    words = re.sub(r"[^a-z0-9\s]", " ", text.lower()).split()
    counts = Counter(word for word in words if len(word) > 3 and word not in STOP_WORDS)
    return [word for word, _ in counts.most_common(limit)]


def _style_or_default(style: str) -> str:
    return style if style in LEARNING_PATHS else VISUAL


def learning_path(style: str, topics: List[str]) -> List[Dict[str, Any]]:
    """Three style steps, plus a topic deep-dive when topics are known"""
    steps = [
        {**step, "step": number}
        for number, step in enumerate(LEARNING_PATHS[_style_or_default(style)], start=1)
    ]
    if topics:
        topic = topics[0]
        steps.append({
            "id": "topic1",
            "step": len(steps) + 1,
            "title": f"Deepen {topic[:1].upper() + topic[1:]}",
            "description": f"Focus on advanced {topic} concepts",
            "level": "advanced",
            "icon": "🚀",
        })
    return steps


def youtube_queries(style: str, topics: List[str]) -> List[str]:
    base = YOUTUBE_QUERIES[_style_or_default(style)][:2]
    return base + [f"{topic} tutorial for students" for topic in topics[:3]]


def topic_recommendations(topics: List[str], style: str) -> List[Dict[str, str]]:
    recommendations = []
    if topics:
        recommendations.append({
            "topic": f"Advanced {topics[0]}",
            "reason": "Based on your recent study history",
            "icon": "📈",
        })
    recommendations.append(dict(STYLE_TOPICS[_style_or_default(style)]))
    recommendations.append(dict(GENERAL_TOPIC))
    return recommendations[:3]


class RecommendationService:
    """Builds the personalized recommendation payload for a profile"""

    def get_recommendations(self, db: Session, profile: UserProfile) -> Dict[str, Any]:
        cache_key = cache_service.recommendation_key(profile.id)
        cached = cache_service.get(cache_key)
        if cached:
            return cached

        style = _style_or_default(profile.learning_style or VISUAL)

        materials = db.query(StudyMaterial).filter(
            StudyMaterial.user_id == profile.id
        ).order_by(StudyMaterial.updated_at.desc()).limit(settings.RECENT_MATERIALS_LIMIT).all()

        recent_materials = [
            {
                "id": str(material.id),
                "title": material.title or "Untitled Material",
                "category": material.learning_style or "General",
                # Simulated progress, newest first
                "progress": min(100, 40 + index * 10),
                "last_studied": (material.updated_at or material.created_at).isoformat(),
                "summary": material.summary,
            }
            for index, material in enumerate(materials)
        ]

        all_text = " ".join(f"{m.title or ''} {m.summary or ''}" for m in materials)
        dominant_topics = extract_keywords(all_text)[:MAX_DOMINANT_TOPICS]

        payload = {
            "user_id": str(profile.id),
            "learning_style": style,
            "dominant_topics": dominant_topics,
            "youtube_queries": youtube_queries(style, dominant_topics),
            "learning_path": learning_path(style, dominant_topics),
            "topic_recommendations": topic_recommendations(dominant_topics, style),
            "recent_materials": recent_materials,
        }

        logger.info(
            f"Recommendations built for {profile.id}: style={style}, "
            f"{len(materials)} materials, topics={dominant_topics}"
        )

        cache_service.set(cache_key, payload)
        return payload


# Global instance
recommendation_service = RecommendationService()
