"""Business vocabulary and rules of the rental domain.

Stored status labels live in ``statuses``; owner dashboard figures are
computed in ``dashboard`` from records the services have already loaded.
"""
