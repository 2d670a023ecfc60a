"""
Providers Base Package

Provider-agnostic building blocks shared by every adapter:
- Models: canonical messages, content parts, model entries and results
- DTOs: pydantic-validated options, requests and custom model entries
- Adapters: the per-provider translation contract and the factory
- Registry: frozen model tables, credentials and capability lookups
"""
