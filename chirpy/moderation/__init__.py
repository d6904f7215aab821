"""
Chirp moderation — profanity filtering and chirp validation.
"""

from chirpy.moderation.profanity import MASK, ProfanityFilter
from chirpy.moderation.validation import ChirpParams, CleanedChirp, ChirpValidator

__all__ = ["MASK", "ProfanityFilter", "ChirpParams", "CleanedChirp", "ChirpValidator"]
