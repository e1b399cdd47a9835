"""
Domain layer of the HypeCrew marketplace: entities, repository contracts
and pure business rules. Nothing here talks to the network.
"""
