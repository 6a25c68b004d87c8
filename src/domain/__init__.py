"""
Domain layer for the party domain extractor.

This layer contains:
- Data models (immutable Person and Email values)
- Business logic (adult domain extraction pipeline)
- Result types (explicit success/failure handling)
"""
