"""Services Layer — imperative shell around the pure interval core.

Invariants:
    - Services read Settings; core/ never does
    - Services log; core/ never does
"""
