"""
Core functionality for the Transcript Studio application.

This package holds the Gemini client factory, the prompt templates,
response validation, and the orchestration of the four model calls.
"""
