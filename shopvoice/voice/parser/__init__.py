"""Voice command parsing: normalization, segmentation, extraction, dispatch."""

from shopvoice.voice.parser.dispatcher import IntentDispatcher, create_default_dispatcher
from shopvoice.voice.parser.entity_extractor import extract_details, extract_items
from shopvoice.voice.parser.intent_classifier import IntentClassifier, RuleIntentClassifier
from shopvoice.voice.parser.normalizer import normalize
from shopvoice.voice.parser.segmenter import segment

__all__ = [
    "IntentClassifier",
    "IntentDispatcher",
    "RuleIntentClassifier",
    "create_default_dispatcher",
    "extract_details",
    "extract_items",
    "normalize",
    "segment",
]
