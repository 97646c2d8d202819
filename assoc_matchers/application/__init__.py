"""Application layer: DTOs, provider interfaces, and matcher services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements IReflectionProvider.
"""
