"""Service layer package housing the model-facing logic.

Contains the content adapter (request parts to LangChain message
content) and the LLM service wrapping the shared Gemini chat model.
"""
