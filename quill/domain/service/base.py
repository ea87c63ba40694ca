"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that doesn't belong to a single
    entity or spans several aggregates.
    """

    pass
