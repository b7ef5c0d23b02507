"""
Learning bounded context - Application layer.

Contains use cases for serving generated content:
- Get flashcard deck (cache-aside with image fan-out)
- Get speech audio (cache-aside)
"""
