# Services package initialization
from .azure_keyvault import azure_kv_service
from .vector_client import VectorIndexClient, SimilarityLookupError
from .profanity import ProfanityClassifier, initialize_profanity_classifier, get_profanity_classifier

__all__ = ["azure_kv_service", "VectorIndexClient", "SimilarityLookupError", "ProfanityClassifier",
           "initialize_profanity_classifier", "get_profanity_classifier"]
