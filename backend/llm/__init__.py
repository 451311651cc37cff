"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Expose a plain ``complete(prompt) -> str`` text model over the Groq SDK.
- Build ranking prompts from the menu and the user's query or meal type.
- Extract relevance-scored candidates from free-form model output, failing
  open to an empty ranking when the model is unavailable or answers badly.
"""
