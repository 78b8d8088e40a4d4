"""App — orquestração da construção de mensagens.

Subpastas:
- bootstrap/: composition root (logging, validação de settings)
- coordinators/: Director (Sender) do padrão Builder
- protocols/: contratos (MessageBuilderProtocol) e modelos (Message)
- observability/: correlation_id para logs estruturados
- constants/: formatos e conteúdo fixo da carta

Padrão: app orquestra; api serializa; config configura; utils apoia.
"""
