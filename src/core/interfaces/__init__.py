"""Core interfaces/abstractions.

Why:
- Contracts (Protocol) implemented by concrete adapters and UI layers.
- The services depend on these, never on httpx or typer directly.
"""
