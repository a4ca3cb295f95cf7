"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- La CLI depende de `LaunchSource`, no de httpx.
"""
