from prayer_companion.models.prayer_cache import PrayerCache
from prayer_companion.models.prayer_feedback import PrayerFeedback
from prayer_companion.models.prayer_learning_pattern import PrayerLearningPattern, PatternType
from prayer_companion.models.prayer_generation import PrayerGeneration

__all__ = [
    "PrayerCache", "PrayerFeedback", "PrayerLearningPattern", "PatternType", "PrayerGeneration",
]
