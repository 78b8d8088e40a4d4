"""Payload builders — serialização de mensagens para formatos externos.

Estrutura:
- message/: builders JSON e XML da carta (MessageBuilderProtocol)
"""

__all__: list[str] = []
