# src/atlas_automation/core/__init__.py
"""
Core do Atlas Automation.

Este pacote reúne as peças independentes de domínio sobre as quais os
mutadores são construídos:

    - model        → aggregate AutomationConfig e suas coleções
    - search       → lookup genérico por predicado (posição + presença)
    - config       → tabela estática de settings (load, merge, hashing)
    - exceptions   → exceções tipadas das operações
    - errors       → payloads serializáveis e catálogo de códigos
    - traceability → journal estruturado de mutações

Princípios fundamentais:
    - Operações síncronas, em memória, sobre um único aggregate
    - Nenhuma sincronização interna: o chamador é dono do aggregate
    - Erros são devolvidos ao chamador imediato, nunca retentados

Limites explícitos:
    - Não busca nem persiste o aggregate no control plane
    - Não define formato de wire (JSON/BSON)
"""
