# src/flagconf/core/__init__.py
"""
Core do flagconf.

Componentes principais:
    - schema  → kinds, metadados de campo, registry e walker
    - sources → arquivo estruturado e argumentos de linha de comando
    - binder  → aplicação das camadas default < arquivo < argumentos
    - hashing → snapshot e hash da configuração resolvida
    - errors  → hierarquia de exceções

Princípios fundamentais:
    - O record do chamador é o único dono dos valores
    - Nenhum estado global: argv e sink de erro são parâmetros explícitos
    - Falhas são tipadas e devolvidas ao chamador
"""
