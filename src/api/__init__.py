"""API — camada de borda: serialização para formatos externos.

Subpastas:
- payload_builders/: builders concretos por formato de saída

NÃO PODE conter: orquestração (Sender) nem configuração de logging.
"""
