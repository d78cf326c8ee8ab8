"""Domain layer: value objects, shape rules, predicates and ports.

Has no third-party imports. Application and infrastructure depend on it,
never the other way around.
"""
