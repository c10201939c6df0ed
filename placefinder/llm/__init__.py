"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Hold the fixed instruction prompt for place recommendations.
- Call the Groq chat completion API in JSON-object mode and return the raw text.
"""
