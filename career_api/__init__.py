"""
Career guidance API package

REST backend for a career guidance and training platform: registration and
sign-in, profession aptitude tests, courses with ordered chapters, and
per-user progress. Storage and credentials are delegated to a managed
backend; this package shapes requests and issues session tokens.

@version 1.0.0
"""

__version__ = "1.0.0"
