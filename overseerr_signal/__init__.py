"""Pacote do proxy de webhooks Overseerr -> Signal (signal-cli-rest-api).

Este pacote contém:
- constants: tabelas de emojis, caminhos da API e a configuração (Settings)
- utils: acesso seguro a campos aninhados e helpers de configuração
- enrichment: extração dos campos do payload do Overseerr
- detection: classificação do evento em categorias
- formatters: montagem e formatação da mensagem
- services: integração com serviços externos (imagem, Signal)
- controller: criação do Flask app e endpoints
"""
