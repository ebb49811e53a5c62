"""Domain layer (business logic and domain models).

Domain modules should not depend on UI. Infrastructure access should be injected
via interfaces or passed-in clients where practical.
"""
