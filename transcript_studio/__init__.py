"""
Transcript Studio.

Paste a video transcript, get its topic and key points from Gemini,
translate them, and turn the translation into a narrated short story.
"""

from transcript_studio.config import config

__version__ = config.APP_VERSION
